"""Unit tests for contrastkit.plugins.registry — PolicyRegistry, error types,
entry-point loading, and all public methods.
"""
from __future__ import annotations

import logging
from unittest.mock import MagicMock, patch

import pytest

from contrastkit.color.model import Color
from contrastkit.color.palette import BLUE, WHITE
from contrastkit.config.options import ContrastOptions
from contrastkit.engine.policies import RolePolicy
from contrastkit.errors import PolicyAlreadyRegisteredError, PolicyNotFoundError
from contrastkit.plugins.registry import PolicyRegistry
from contrastkit.roles import ContrastRole

_ENTRY_POINTS = "contrastkit.plugins.registry.importlib.metadata.entry_points"


# ---------------------------------------------------------------------------
# Test fixtures: concrete policies
# ---------------------------------------------------------------------------


class AlwaysBlue(RolePolicy):
    def resolve(self, background: Color, options: ContrastOptions) -> Color:
        return BLUE


class AlwaysWhite(RolePolicy):
    def resolve(self, background: Color, options: ContrastOptions) -> Color:
        return WHITE


class NotAPolicy:
    """Does NOT subclass RolePolicy — used for error path testing."""


def _fresh_registry(name: str = "test") -> PolicyRegistry[RolePolicy]:
    """Return a new empty registry for each test."""
    return PolicyRegistry(RolePolicy, name)


def _entry_point(name: str, loaded: object = AlwaysBlue) -> MagicMock:
    ep = MagicMock()
    ep.name = name
    ep.load.return_value = loaded
    return ep


# ===========================================================================
# Error types
# ===========================================================================


class TestPolicyNotFoundError:
    def test_is_key_error(self) -> None:
        with pytest.raises(KeyError):
            raise PolicyNotFoundError("missing", "link", ["luminance"])

    def test_attributes(self) -> None:
        error = PolicyNotFoundError("missing", "link", ["luminance"])
        assert error.policy_name == "missing"
        assert error.role == "link"
        assert error.available == ["luminance"]

    def test_message_is_readable(self) -> None:
        error = PolicyNotFoundError("missing", "link", ["luminance"])
        assert str(error).startswith("Policy 'missing'")
        assert "luminance" in str(error)


class TestPolicyAlreadyRegisteredError:
    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            raise PolicyAlreadyRegisteredError("dup", "primary")

    def test_message_contains_policy_name(self) -> None:
        assert "dup" in str(PolicyAlreadyRegisteredError("dup", "primary"))


# ===========================================================================
# Construction and registration
# ===========================================================================


class TestPolicyRegistryConstruction:
    def test_empty_registry_has_zero_length(self) -> None:
        assert len(_fresh_registry()) == 0

    def test_every_role_has_empty_bucket(self) -> None:
        table = _fresh_registry().as_table()
        assert set(table) == set(ContrastRole)
        assert all(names == [] for names in table.values())

    def test_repr_contains_name_and_base(self) -> None:
        text = repr(_fresh_registry("policies"))
        assert "policies" in text
        assert "RolePolicy" in text


class TestPolicyRegistryRegister:
    def test_decorator_registers_and_returns_class(self) -> None:
        registry = _fresh_registry()

        @registry.register(ContrastRole.LINK, "blue")
        class Blue(AlwaysBlue):
            pass

        assert registry.get(ContrastRole.LINK, "blue") is Blue
        assert Blue().resolve(WHITE, ContrastOptions()) == BLUE

    def test_role_by_string(self) -> None:
        registry = _fresh_registry()
        registry.register_class("neon-link", "blue", AlwaysBlue)
        assert (ContrastRole.NEON_LINK, "blue") in registry

    def test_same_name_different_roles(self) -> None:
        registry = _fresh_registry()
        registry.register_class(ContrastRole.PRIMARY, "x", AlwaysBlue)
        registry.register_class(ContrastRole.LINK, "x", AlwaysWhite)
        assert registry.get(ContrastRole.PRIMARY, "x") is AlwaysBlue
        assert registry.get(ContrastRole.LINK, "x") is AlwaysWhite
        assert len(registry) == 2

    def test_duplicate_raises(self) -> None:
        registry = _fresh_registry()
        registry.register_class(ContrastRole.PRIMARY, "x", AlwaysBlue)
        with pytest.raises(PolicyAlreadyRegisteredError):
            registry.register_class(ContrastRole.PRIMARY, "x", AlwaysWhite)

    def test_wrong_base_class_raises(self) -> None:
        registry = _fresh_registry()
        with pytest.raises(TypeError, match="subclass of RolePolicy"):
            registry.register_class(ContrastRole.PRIMARY, "bad", NotAPolicy)  # type: ignore[arg-type]

    def test_registration_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = _fresh_registry()
        with caplog.at_level(logging.DEBUG, logger="contrastkit.plugins.registry"):
            registry.register_class(ContrastRole.PRIMARY, "logged", AlwaysBlue)
        assert "logged" in caplog.text


class TestPolicyRegistryLookup:
    def test_get_missing_raises(self) -> None:
        registry = _fresh_registry()
        registry.register_class(ContrastRole.LINK, "blue", AlwaysBlue)
        with pytest.raises(PolicyNotFoundError) as info:
            registry.get(ContrastRole.LINK, "red")
        assert info.value.available == ["blue"]

    def test_list_policies_sorted(self) -> None:
        registry = _fresh_registry()
        registry.register_class(ContrastRole.LINK, "zeta", AlwaysBlue)
        registry.register_class(ContrastRole.LINK, "alpha", AlwaysBlue)
        assert registry.list_policies("link") == ["alpha", "zeta"]

    def test_contains_rejects_malformed_keys(self) -> None:
        registry = _fresh_registry()
        registry.register_class(ContrastRole.LINK, "blue", AlwaysBlue)
        assert "blue" not in registry
        assert ("nope", "blue") not in registry
        assert ("link", "blue") in registry

    def test_deregister(self) -> None:
        registry = _fresh_registry()
        registry.register_class(ContrastRole.LINK, "blue", AlwaysBlue)
        registry.deregister(ContrastRole.LINK, "blue")
        assert len(registry) == 0

    def test_deregister_missing_raises(self) -> None:
        with pytest.raises(PolicyNotFoundError):
            _fresh_registry().deregister(ContrastRole.LINK, "blue")


# ===========================================================================
# Entry-point loading
# ===========================================================================


class TestPolicyRegistryLoadEntrypoints:
    def test_empty_group_does_nothing(self) -> None:
        registry = _fresh_registry()
        with patch(_ENTRY_POINTS, return_value=[]):
            registry.load_entrypoints("contrastkit.policies")
        assert len(registry) == 0

    def test_registers_valid_policy(self) -> None:
        registry = _fresh_registry()
        with patch(_ENTRY_POINTS, return_value=[_entry_point("link:always-blue")]):
            registry.load_entrypoints("contrastkit.policies")
        assert registry.get(ContrastRole.LINK, "always-blue") is AlwaysBlue

    def test_skips_name_without_role(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = _fresh_registry()
        with patch(_ENTRY_POINTS, return_value=[_entry_point("always-blue")]):
            with caplog.at_level(logging.WARNING, logger="contrastkit.plugins.registry"):
                registry.load_entrypoints("contrastkit.policies")
        assert len(registry) == 0
        assert "always-blue" in caplog.text

    def test_skips_unknown_role(self) -> None:
        registry = _fresh_registry()
        with patch(_ENTRY_POINTS, return_value=[_entry_point("footer:blue")]):
            registry.load_entrypoints("contrastkit.policies")
        assert len(registry) == 0

    def test_skips_already_registered(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = _fresh_registry()
        registry.register_class(ContrastRole.LINK, "existing", AlwaysWhite)
        ep = _entry_point("link:existing")
        with patch(_ENTRY_POINTS, return_value=[ep]):
            with caplog.at_level(logging.DEBUG, logger="contrastkit.plugins.registry"):
                registry.load_entrypoints("contrastkit.policies")
        ep.load.assert_not_called()
        assert registry.get(ContrastRole.LINK, "existing") is AlwaysWhite

    def test_handles_load_exception(self) -> None:
        registry = _fresh_registry()
        ep = _entry_point("link:broken")
        ep.load.side_effect = ImportError("no module named broken")
        with patch(_ENTRY_POINTS, return_value=[ep]):
            registry.load_entrypoints("contrastkit.policies")
        assert len(registry) == 0

    def test_handles_wrong_type(self) -> None:
        registry = _fresh_registry()
        with patch(_ENTRY_POINTS, return_value=[_entry_point("link:bad", NotAPolicy)]):
            registry.load_entrypoints("contrastkit.policies")
        assert len(registry) == 0

    def test_is_idempotent(self) -> None:
        registry = _fresh_registry()
        with patch(_ENTRY_POINTS, return_value=[_entry_point("primary:stable")]):
            registry.load_entrypoints("contrastkit.policies")
            registry.load_entrypoints("contrastkit.policies")
        assert len(registry) == 1
