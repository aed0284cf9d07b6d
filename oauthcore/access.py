"""Permission checks against the claims attached to an authenticated user."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Union

from oauthcore.permission import Action, Permission, has_valid_permissions, parse_action


@dataclass
class Claims:
    """User attributes: ``resource_action`` permission strings and placeholders."""

    permissions: list[str] = field(default_factory=list)
    account_id: str = ""
    namespace: str = ""


def _action_name(action: Union[Action, int]) -> str:
    try:
        return Action(int(action)).name
    except ValueError:
        return "UNKNOWN"


def _fill_placeholders(claims: Claims, resource: str) -> str:
    if claims.account_id:
        resource = resource.replace("{accountId}", claims.account_id)
        resource = resource.replace("{ACCOUNTID}", claims.account_id.upper())
    if claims.namespace:
        resource = resource.replace("{namespace}", claims.namespace)
        resource = resource.replace("{NAMESPACE}", claims.namespace.upper())
    return resource


class PermissionService:
    """Answers whether claims grant a permission."""

    def has_permission(self, claims: Claims, permission: str) -> bool:
        """Return True if ``claims`` grant ``permission`` (``resource_action``).

        Malformed input yields False rather than an error.
        """
        resource, sep, action_text = permission.partition("_")
        if not sep:
            return False
        try:
            action = parse_action(action_text)
        except ValueError:
            return False

        granted = []
        for text in claims.permissions:
            try:
                granted.append(Permission.parse(text))
            except ValueError:
                continue
        if not granted:
            return False

        filled = [
            dataclasses.replace(perm, resource=_fill_placeholders(claims, perm.resource))
            for perm in granted
        ]
        return has_valid_permissions(filled, resource, action)

    def has_admin_account_permission(self, claims, account_id, action) -> bool:
        return self.has_permission(
            claims, f"admin:account:{account_id}:permission_{_action_name(action)}"
        )

    def has_admin_account(self, claims, action) -> bool:
        return self.has_permission(claims, f"admin:account_{_action_name(action)}")

    def has_admin_account_with_id(self, claims, account_id, action) -> bool:
        return self.has_permission(claims, f"admin:account:{account_id}_{_action_name(action)}")

    def has_admin_namespace_account(self, claims, namespace, action) -> bool:
        return self.has_permission(
            claims, f"admin:namespace:{namespace}:account_{_action_name(action)}"
        )

    def has_admin_namespace_document(self, claims, namespace, action) -> bool:
        return self.has_permission(
            claims, f"admin:namespace:{namespace}:document_{_action_name(action)}"
        )

    def has_admin_namespace_client(self, claims, namespace, action) -> bool:
        return self.has_permission(
            claims, f"admin:namespace:{namespace}:client_{_action_name(action)}"
        )

    def has_admin_namespace_permission(self, claims, namespace, action) -> bool:
        return self.has_permission(
            claims, f"admin:namespace:{namespace}:permission_{_action_name(action)}"
        )

    def has_admin_namespace_provider_client(self, claims, namespace, action) -> bool:
        return self.has_permission(
            claims, f"admin:namespace:{namespace}:providerclient_{_action_name(action)}"
        )

    def has_admin_namespace_role(self, claims, namespace, action) -> bool:
        return self.has_permission(
            claims, f"admin:namespace:{namespace}:role_{_action_name(action)}"
        )

    def has_admin_namespace(self, claims, action) -> bool:
        return self.has_permission(claims, f"admin:namespace_{_action_name(action)}")

    def has_admin_namespace_with_id(self, claims, namespace, action) -> bool:
        return self.has_permission(claims, f"admin:namespace:{namespace}_{_action_name(action)}")

    def has_admin_role(self, claims, action) -> bool:
        return self.has_permission(claims, f"admin:role_{_action_name(action)}")