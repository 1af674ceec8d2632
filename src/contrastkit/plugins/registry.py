"""Policy registry for contrast-kit.

Role policies are looked up by ``(role, name)``.  The built-in policies
register themselves with the decorator at import time; third-party
packages add their own by declaring entry-points in the
"contrastkit.policies" group, named ``"<role>:<policy-name>"``.

Example
-------
Register a custom link policy::

    from contrastkit.color import BLUE
    from contrastkit.engine import ContrastRole, RolePolicy, policy_registry

    @policy_registry.register(ContrastRole.LINK, "always-blue")
    class AlwaysBlue(RolePolicy):
        def resolve(self, background, options):
            return BLUE

Declare it for automatic discovery in a downstream ``pyproject.toml``::

    [project.entry-points."contrastkit.policies"]
    "link:always-blue" = "my_package.policies:AlwaysBlue"

then at runtime::

    policy_registry.load_entrypoints("contrastkit.policies")
"""
from __future__ import annotations

import importlib.metadata
import logging
from abc import ABC
from collections.abc import Callable
from typing import Generic, TypeVar

from contrastkit.errors import PolicyAlreadyRegisteredError, PolicyNotFoundError
from contrastkit.roles import ContrastRole

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=ABC)


class PolicyRegistry(Generic[T]):
    """Type-safe registry of policy classes, keyed by role and name.

    Parameters
    ----------
    base_class:
        The abstract base class all policies must subclass.
    name:
        A human-readable name for this registry (used in log messages).
    """

    def __init__(self, base_class: type[T], name: str) -> None:
        self._base_class = base_class
        self._name = name
        self._policies: dict[ContrastRole, dict[str, type[T]]] = {
            role: {} for role in ContrastRole
        }

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(
        self, role: ContrastRole | str, name: str
    ) -> Callable[[type[T]], type[T]]:
        """Return a class decorator that registers the decorated class.

        Raises
        ------
        PolicyAlreadyRegisteredError
            If ``name`` is already in use for ``role``.
        TypeError
            If the decorated class does not subclass ``base_class``.
        """

        def decorator(cls: type[T]) -> type[T]:
            self.register_class(role, name, cls)
            return cls

        return decorator

    def register_class(self, role: ContrastRole | str, name: str, cls: type[T]) -> None:
        """Register ``cls`` under ``name`` for ``role`` without decorator syntax."""
        resolved = ContrastRole.parse(role)
        bucket = self._policies[resolved]
        if name in bucket:
            raise PolicyAlreadyRegisteredError(name, resolved.value)
        if not (isinstance(cls, type) and issubclass(cls, self._base_class)):
            raise TypeError(
                f"Cannot register {cls!r} under {name!r}: "
                f"it must be a subclass of {self._base_class.__name__}."
            )
        bucket[name] = cls
        logger.debug(
            "Registered policy %r -> %s for role %r in registry %r",
            name,
            cls.__qualname__,
            resolved.value,
            self._name,
        )

    def deregister(self, role: ContrastRole | str, name: str) -> None:
        """Remove a policy from the registry.

        Raises
        ------
        PolicyNotFoundError
            If ``name`` is not currently registered for ``role``.
        """
        resolved = ContrastRole.parse(role)
        bucket = self._policies[resolved]
        if name not in bucket:
            raise PolicyNotFoundError(name, resolved.value, sorted(bucket))
        del bucket[name]
        logger.debug(
            "Deregistered policy %r for role %r from registry %r",
            name,
            resolved.value,
            self._name,
        )

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, role: ContrastRole | str, name: str) -> type[T]:
        """Return the class registered under ``name`` for ``role``.

        Raises
        ------
        PolicyNotFoundError
            If no policy is registered under that name.
        """
        resolved = ContrastRole.parse(role)
        bucket = self._policies[resolved]
        try:
            return bucket[name]
        except KeyError:
            raise PolicyNotFoundError(name, resolved.value, sorted(bucket)) from None

    def list_policies(self, role: ContrastRole | str) -> list[str]:
        """Return the policy names registered for ``role``, sorted."""
        return sorted(self._policies[ContrastRole.parse(role)])

    def as_table(self) -> dict[ContrastRole, list[str]]:
        """Return every role with its sorted policy names."""
        return {role: sorted(bucket) for role, bucket in self._policies.items()}

    def __contains__(self, key: object) -> bool:
        """Support ``(role, "name") in registry``."""
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        role, name = key
        try:
            resolved = ContrastRole.parse(role)
        except ValueError:
            return False
        return name in self._policies[resolved]

    def __len__(self) -> int:
        """Return the total number of registered policies across roles."""
        return sum(len(bucket) for bucket in self._policies.values())

    def __repr__(self) -> str:
        table = {role.value: names for role, names in self.as_table().items()}
        return (
            f"PolicyRegistry(name={self._name!r}, "
            f"base_class={self._base_class.__name__}, "
            f"policies={table})"
        )

    # ------------------------------------------------------------------
    # Entry-point loading
    # ------------------------------------------------------------------

    def load_entrypoints(self, group: str) -> None:
        """Discover and register policies declared as package entry-points.

        Each entry-point name must have the form ``"<role>:<policy-name>"``.
        Malformed names, import failures and duplicate names are logged and
        skipped, so repeated calls are idempotent.
        """
        for ep in importlib.metadata.entry_points(group=group):
            role_text, sep, policy_name = ep.name.partition(":")
            if not sep or not policy_name:
                logger.warning(
                    "Entry-point %r in group %r is not named '<role>:<name>'; skipping.",
                    ep.name,
                    group,
                )
                continue
            try:
                role = ContrastRole.parse(role_text)
            except ValueError:
                logger.warning(
                    "Entry-point %r names unknown role %r; skipping.", ep.name, role_text
                )
                continue
            if policy_name in self._policies[role]:
                logger.debug(
                    "Entry-point %r already registered in %r; skipping.",
                    ep.name,
                    self._name,
                )
                continue
            try:
                cls = ep.load()
            except Exception:
                logger.exception(
                    "Failed to load entry-point %r from group %r; skipping.",
                    ep.name,
                    group,
                )
                continue
            try:
                self.register_class(role, policy_name, cls)
            except (PolicyAlreadyRegisteredError, TypeError):
                logger.warning(
                    "Entry-point %r loaded but could not be registered "
                    "in registry %r; skipping.",
                    ep.name,
                    self._name,
                )
