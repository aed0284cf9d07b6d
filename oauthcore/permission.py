"""Permission actions, resource permissions and matching rules."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Union

_RESOURCE_PATTERN = re.compile(r"(PUBLIC|ADMIN):[A-Za-z0-9:*{}]*")


class Action(IntEnum):
    """A permission action as a bitmask; combinations are bitwise ORs."""

    CREATE = 1
    READ = 2
    UPDATE = 4
    DELETE = 8
    CREATE_READ = 3
    CREATE_UPDATE = 5
    READ_UPDATE = 6
    CREATE_READ_UPDATE = 7
    CREATE_DELETE = 9
    READ_DELETE = 10
    CREATE_READ_DELETE = 11
    UPDATE_DELETE = 12
    CREATE_UPDATE_DELETE = 13
    READ_UPDATE_DELETE = 14
    ALL = 15

    def _has(self, bit: int) -> bool:
        return int(self) & bit == bit

    def is_create(self) -> bool:
        """Return True if the CREATE bit is set."""
        return self._has(Action.CREATE)

    def is_read(self) -> bool:
        """Return True if the READ bit is set."""
        return self._has(Action.READ)

    def is_update(self) -> bool:
        """Return True if the UPDATE bit is set."""
        return self._has(Action.UPDATE)

    def is_delete(self) -> bool:
        """Return True if the DELETE bit is set."""
        return self._has(Action.DELETE)

    def is_all(self) -> bool:
        """Return True if this is exactly ALL."""
        return self is Action.ALL


def parse_action(text: str) -> Action:
    """Parse an action name, case-insensitively; raise ValueError if unknown."""
    name = text.strip().upper()
    try:
        return Action[name]
    except KeyError:
        raise ValueError(f"invalid action: {text}") from None


@dataclass(frozen=True)
class Permission:
    """A permission on a resource, e.g. ``ADMIN:NAMESPACE:NS:DOCUMENT_READ``."""

    resource: str
    action: Union[Action, int]

    def action_name(self) -> str:
        """Return the name of the action, or ``UNKNOWN(n)`` for other values."""
        try:
            return Action(int(self.action)).name
        except ValueError:
            return f"UNKNOWN({int(self.action)})"

    def __str__(self) -> str:
        return f"{self.resource}_{self.action_name()}"

    @classmethod
    def parse(cls, text: str) -> "Permission":
        """Parse ``resource_action``; the resource is upper-cased.

        Raises ValueError if the string has no action part or the action is unknown.
        """
        resource, sep, action_text = text.partition("_")
        if not sep:
            raise ValueError(f"invalid permission string: {text}")
        action = parse_action(action_text)
        return cls(resource=resource.strip().upper(), action=action)

    def is_valid_format(self) -> bool:
        """Return True if the resource has a valid prefix and characters."""
        if not self.resource:
            return False
        return _RESOURCE_PATTERN.fullmatch(self.resource) is not None


def _resource_matches(permission_resource: str, resource: str) -> bool:
    if permission_resource.casefold() == resource.casefold():
        return True
    if permission_resource.endswith("*"):
        return resource.startswith(permission_resource[:-1])
    return False


def has_valid_permissions(
    permissions: Iterable[Permission], resource: str, action: Union[Action, int]
) -> bool:
    """Return True if any permission covers ``resource`` and every bit of ``action``."""
    resource = resource.upper()
    wanted = int(action)
    return any(
        _resource_matches(perm.resource, resource) and wanted & int(perm.action) == wanted
        for perm in permissions
    )


def admin_namespace(namespace: str) -> str:
    """Return the admin resource of a namespace."""
    return "ADMIN:NAMESPACE:" + namespace.upper()


def admin_namespace_roles(namespace: str) -> str:
    """Return the admin resource of a namespace's roles."""
    return admin_namespace(namespace) + ":ROLE"


def admin_namespace_users(namespace: str) -> str:
    """Return the admin resource of a namespace's users."""
    return admin_namespace(namespace) + ":USER"


def admin_namespace_clients(namespace: str) -> str:
    """Return the admin resource of a namespace's clients."""
    return admin_namespace(namespace) + ":CLIENT"