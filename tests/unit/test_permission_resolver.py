"""Unit tests for the permission resolver."""

from copy import deepcopy

import pytest

from storeadmin.domain.services.permission_resolver import (
    DEFAULT_ROLE_PERMISSIONS,
    NAV_ITEMS,
    PermissionResolver,
    can,
    effective_permissions,
    merge_role_permissions,
    override_state,
    prune_overrides,
    toggle_override,
    visible_nav_items,
)
from storeadmin.domain.value_objects import OverrideState, PermissionAction, Resource, Role

ALL_CELLS = [(r, a) for r in Resource for a in PermissionAction]

PRODUCTS_NO_DELETE = {
    Role.EDITOR: {"products": {"view": True, "create": True, "edit": True, "delete": False}}
}


class TestFixedRoles:
    @pytest.mark.parametrize("resource,action", ALL_CELLS)
    def test_admin_allowed_everything(self, resource, action) -> None:
        revoke_all = {r.value: {a.value: False for a in PermissionAction} for r in Resource}
        assert can(Role.ADMIN, resource, action, revoke_all) is True

    def test_admin_allowed_unknown_names(self) -> None:
        assert can("ADMIN", "no_such_area", "frobnicate") is True

    @pytest.mark.parametrize("resource,action", ALL_CELLS)
    def test_subscriber_denied_everything(self, resource, action) -> None:
        grant_all = {r.value: {a.value: True for a in PermissionAction} for r in Resource}
        assert can(Role.SUBSCRIBER, resource, action, grant_all) is False

    @pytest.mark.parametrize("role", ["SUPERUSER", "", None, 42, "root"])
    def test_unknown_role_denied(self, role) -> None:
        for action in PermissionAction.known():
            assert can(role, Resource.PRODUCTS, action) is False

    def test_role_parsing_is_case_insensitive(self) -> None:
        assert can("editor", "products", "delete") is True
        assert can("admin", "roles", "edit") is True


class TestConfigurableRoles:
    def test_override_grant_beats_role_default(self) -> None:
        assert can(Role.AUTHOR, "banners", "view") is False
        assert can(Role.AUTHOR, "banners", "view", {"banners": {"view": True}}) is True

    def test_override_revoke_beats_role_default(self) -> None:
        assert can(Role.EDITOR, "products", "delete") is True
        assert can(Role.EDITOR, "products", "delete", {"products": {"delete": False}}) is False

    def test_falls_back_to_role_matrix(self) -> None:
        matrix = {Role.EDITOR: {"orders": {"view": True}}}
        assert can(Role.EDITOR, "orders", "view", {"products": {"view": False}}, matrix) is True

    def test_absent_cell_denied(self) -> None:
        matrix = {Role.EDITOR: {"orders": {"view": True}}}
        assert can(Role.EDITOR, "orders", "delete", {}, matrix) is False
        assert can(Role.EDITOR, "media", "view", {}, matrix) is False

    def test_role_missing_from_matrices_denied(self) -> None:
        assert can(Role.AUTHOR, "products", "view", None, {Role.EDITOR: {}}) is False

    def test_none_matrices_use_shipped_defaults(self) -> None:
        assert can(Role.AUTHOR, "products", "create") is True
        assert can(Role.AUTHOR, "products", "delete") is False
        assert can(Role.EDITOR, "orders", "edit") is True
        assert can(Role.EDITOR, "orders", "delete") is False

    def test_unknown_resource_denied(self) -> None:
        assert can(Role.EDITOR, "nonexistent_resource", "view", {}) is False

    def test_unknown_resource_denied_even_with_override(self) -> None:
        overrides = {"nonexistent_resource": {"view": True}}
        assert can(Role.EDITOR, "nonexistent_resource", "view", overrides) is False

    def test_unknown_action_denied(self) -> None:
        assert can(Role.EDITOR, "products", "publish", {"products": {"publish": True}}) is False

    @pytest.mark.parametrize(
        "overrides",
        [
            "garbage",
            {"products": "yes"},
            {"products": {"delete": "true"}},
            {"products": {"delete": 1}},
            {"products": None},
        ],
    )
    def test_malformed_overrides_are_ignored(self, overrides) -> None:
        assert can(Role.AUTHOR, "products", "delete", overrides) is False
        assert can(Role.AUTHOR, "products", "view", overrides) is True

    def test_malformed_role_matrix_denies(self) -> None:
        assert can(Role.EDITOR, "products", "view", None, {Role.EDITOR: ["products"]}) is False
        assert can(Role.EDITOR, "products", "view", None, "broken") is False

    def test_delete_denied_then_granted_by_toggle(self) -> None:
        assert can(Role.EDITOR, "products", "delete", {}, PRODUCTS_NO_DELETE) is False
        overrides = toggle_override({}, "products", "delete", False)
        assert overrides == {"products": {"delete": True}}
        assert can(Role.EDITOR, "products", "delete", overrides, PRODUCTS_NO_DELETE) is True


class TestToggleOverride:
    def test_inherited_becomes_opposite_of_default(self) -> None:
        assert toggle_override({}, "products", "view", True) == {"products": {"view": False}}
        assert toggle_override(None, "banners", "view", False) == {"banners": {"view": True}}

    def test_explicit_returns_to_inherited(self) -> None:
        overrides = {"products": {"view": False, "edit": True}}
        assert toggle_override(overrides, "products", "view", True) == {"products": {"edit": True}}

    @pytest.mark.parametrize("default", [True, False])
    def test_two_toggles_return_to_inherited(self, default) -> None:
        once = toggle_override({}, "media", "delete", default)
        assert override_state(once, "media", "delete") is not OverrideState.INHERITED
        twice = toggle_override(once, "media", "delete", default)
        assert twice == {}
        assert override_state(twice, "media", "delete") is OverrideState.INHERITED

    def test_removing_last_action_removes_resource(self) -> None:
        overrides = {"products": {"delete": True}, "media": {"view": False}}
        assert toggle_override(overrides, "products", "delete", False) == {"media": {"view": False}}

    def test_input_not_mutated(self) -> None:
        overrides = {"products": {"delete": True}, "media": {"view": False}}
        snapshot = deepcopy(overrides)
        toggle_override(overrides, "products", "delete", False)
        toggle_override(overrides, "orders", "edit", True)
        assert overrides == snapshot

    def test_result_does_not_share_nested_dicts(self) -> None:
        overrides = {"media": {"view": False}}
        result = toggle_override(overrides, "products", "view", True)
        result["media"]["view"] = True
        assert overrides == {"media": {"view": False}}

    def test_malformed_input_treated_as_empty(self) -> None:
        assert toggle_override("garbage", "products", "view", True) == {"products": {"view": False}}

    def test_names_normalized_like_can(self) -> None:
        overrides = toggle_override({}, "Products", "Delete", False)
        assert overrides == {"products": {"delete": True}}
        assert can(Role.EDITOR, "Products", "Delete", overrides, PRODUCTS_NO_DELETE) is True
        assert toggle_override(overrides, "PRODUCTS", "DELETE", False) == {}

    def test_unknown_names_leave_matrix_unchanged(self) -> None:
        overrides = {"media": {"view": False}}
        assert toggle_override(overrides, "spaceships", "view", True) == overrides
        assert toggle_override(overrides, "products", "publish", True) == overrides


class TestOverrideState:
    def test_states(self) -> None:
        overrides = {"products": {"view": True, "delete": False}}
        assert override_state(overrides, "products", "view") is OverrideState.GRANTED
        assert override_state(overrides, "products", "delete") is OverrideState.REVOKED
        assert override_state(overrides, "products", "edit") is OverrideState.INHERITED
        assert override_state(None, "media", "view") is OverrideState.INHERITED

    def test_value_or_none(self) -> None:
        assert OverrideState.GRANTED.value_or_none is True
        assert OverrideState.REVOKED.value_or_none is False
        assert OverrideState.INHERITED.value_or_none is None


class TestVisibleNavItems:
    def test_admin_sees_everything_in_order(self) -> None:
        assert visible_nav_items(Role.ADMIN, {}) == [href for href, _ in NAV_ITEMS]

    def test_subscriber_sees_nothing(self) -> None:
        assert visible_nav_items(Role.SUBSCRIBER, None) == []
        assert visible_nav_items("SUPERUSER", {"products": {"view": True}}) == []

    def test_author_defaults(self) -> None:
        permissions = effective_permissions(Role.AUTHOR)
        assert visible_nav_items(Role.AUTHOR, permissions) == [
            "/admin",
            "/admin/content",
            "/admin/types",
            "/admin/products",
            "/admin/quotes",
            "/admin/orders",
            "/admin/media",
        ]

    def test_dashboard_always_visible_to_admin_area(self) -> None:
        assert visible_nav_items(Role.EDITOR, {}) == ["/admin"]
        assert visible_nav_items(Role.AUTHOR, None) == ["/admin"]

    def test_follows_given_matrix(self) -> None:
        permissions = {"audit": {"view": True}, "menu": {"view": False}}
        assert visible_nav_items(Role.EDITOR, permissions) == ["/admin", "/admin/audit-logs"]


class TestMatrices:
    def test_effective_permissions_covers_known_cells(self) -> None:
        matrix = effective_permissions(Role.EDITOR)
        assert set(matrix) == {r.value for r in Resource.known()}
        assert all(set(actions) == {a.value for a in PermissionAction.known()} for actions in matrix.values())
        assert matrix["products"]["delete"] is True
        assert matrix["coupons"]["view"] is False

    def test_effective_permissions_applies_overrides(self) -> None:
        matrix = effective_permissions(Role.AUTHOR, None, {"coupons": {"view": True}})
        assert matrix["coupons"]["view"] is True

    def test_merge_overlays_stored_rows_on_defaults(self) -> None:
        merged = merge_role_permissions({Role.EDITOR: {"products": {"delete": False}}})
        assert merged[Role.EDITOR]["products"] == {
            "view": True,
            "create": True,
            "edit": True,
            "delete": False,
        }
        assert merged[Role.AUTHOR] == DEFAULT_ROLE_PERMISSIONS[Role.AUTHOR]

    def test_merge_ignores_non_configurable_roles(self) -> None:
        merged = merge_role_permissions({Role.ADMIN: {"products": {"view": False}}})
        assert set(merged) == {Role.EDITOR, Role.AUTHOR}

    def test_merge_does_not_touch_defaults(self) -> None:
        snapshot = deepcopy(DEFAULT_ROLE_PERMISSIONS)
        merge_role_permissions({Role.EDITOR: {"products": {"view": False}}})
        assert DEFAULT_ROLE_PERMISSIONS == snapshot

    def test_prune_drops_non_bool_and_empty(self) -> None:
        assert prune_overrides({"a": {"view": "x"}, "b": {"view": True}, "c": 3}) == {
            "b": {"view": True}
        }
        assert prune_overrides(None) == {}


class TestPermissionResolver:
    def test_bound_resolver(self) -> None:
        resolver = PermissionResolver(
            role=Role.EDITOR,
            role_permissions=PRODUCTS_NO_DELETE,
            user_overrides={"products": {"delete": True}},
        )
        assert resolver.can(Resource.PRODUCTS, PermissionAction.DELETE) is True
        assert resolver.can(Resource.MEDIA, PermissionAction.VIEW) is False
        assert resolver.visible_nav_items() == ["/admin", "/admin/products"]

    def test_default_resolver_uses_shipped_defaults(self) -> None:
        assert PermissionResolver(role=Role.AUTHOR).can("content", "edit") is True
