import pytest

from oauthcore.access import Claims, PermissionService
from oauthcore.permission import Action


@pytest.fixture
def service():
    return PermissionService()


@pytest.fixture
def claims():
    return Claims(
        permissions=[
            "PUBLIC:ACCOUNT:{accountId}_READ",
            "ADMIN:NAMESPACE:{namespace}:CLIENT_CREATE",
        ],
        account_id="user-123",
        namespace="LEGIT-GAMES",
    )


def test_placeholders_replaced(service, claims):
    assert service.has_permission(claims, "PUBLIC:ACCOUNT:USER-123_READ")
    assert service.has_permission(claims, "ADMIN:NAMESPACE:LEGIT-GAMES:CLIENT_CREATE")
    assert not service.has_permission(claims, "ADMIN:NAMESPACE:LEGIT-GAMES:CLIENT_UPDATE")


def test_placeholder_left_when_claim_missing(service):
    claims = Claims(permissions=["PUBLIC:ACCOUNT:{accountId}_READ"])
    assert not service.has_permission(claims, "PUBLIC:ACCOUNT:USER-123_READ")
    assert service.has_permission(claims, "PUBLIC:ACCOUNT:{ACCOUNTID}_READ")


def test_malformed_requests_are_denied(service, claims):
    assert not service.has_permission(claims, "noactionpart")
    assert not service.has_permission(claims, "PUBLIC:ACCOUNT:USER-123_FLY")


def test_invalid_claim_strings_are_skipped(service):
    claims = Claims(permissions=["garbage", "ADMIN:ROLE_BOGUS"])
    assert not service.has_permission(claims, "ADMIN:ROLE_READ")
    claims.permissions.append("ADMIN:ROLE_READ")
    assert service.has_permission(claims, "ADMIN:ROLE_READ")


def test_no_permissions(service):
    assert not service.has_permission(Claims(), "ADMIN:ROLE_READ")


def test_namespace_helpers(service, claims):
    claims.permissions.append("ADMIN:NAMESPACE:{namespace}:DOCUMENT_READ_UPDATE")
    assert service.has_admin_namespace_document(claims, "legit-games", Action.READ)
    assert service.has_admin_namespace_document(claims, "legit-games", Action.READ_UPDATE)
    assert not service.has_admin_namespace_document(claims, "legit-games", Action.DELETE)
    assert service.has_admin_namespace_client(claims, "legit-games", Action.CREATE)
    assert not service.has_admin_namespace_client(claims, "other", Action.CREATE)


def test_wildcard_grants_everything_below(service):
    claims = Claims(permissions=["ADMIN:*_ALL"])
    assert service.has_admin_role(claims, Action.DELETE)
    assert service.has_admin_account(claims, Action.CREATE_READ)
    assert service.has_admin_account_with_id(claims, "acc-1", Action.UPDATE)
    assert service.has_admin_account_permission(claims, "acc-1", Action.READ)
    assert service.has_admin_namespace(claims, Action.ALL)
    assert service.has_admin_namespace_with_id(claims, "ns", Action.READ)
    assert service.has_admin_namespace_account(claims, "ns", Action.READ)
    assert service.has_admin_namespace_permission(claims, "ns", Action.CREATE)
    assert service.has_admin_namespace_provider_client(claims, "ns", Action.UPDATE)
    assert service.has_admin_namespace_role(claims, "ns", Action.DELETE)


def test_specific_helpers_build_expected_resources(service):
    claims = Claims(
        permissions=[
            "ADMIN:ACCOUNT:ACC-1:PERMISSION_READ",
            "ADMIN:NAMESPACE:NS:PROVIDERCLIENT_CREATE",
            "ADMIN:NAMESPACE:NS_UPDATE",
        ]
    )
    assert service.has_admin_account_permission(claims, "acc-1", Action.READ)
    assert not service.has_admin_account_with_id(claims, "acc-1", Action.READ)
    assert service.has_admin_namespace_provider_client(claims, "ns", Action.CREATE)
    assert service.has_admin_namespace_with_id(claims, "ns", Action.UPDATE)
    assert not service.has_admin_namespace(claims, Action.UPDATE)


def test_unknown_action_value_is_denied(service):
    claims = Claims(permissions=["ADMIN:*_ALL"])
    assert not service.has_admin_role(claims, 99)