"""Exception types for contrast-kit.

The numeric core never raises for finite inputs. Errors only surface at
the boundaries: constructing or parsing a color, loading configuration,
and looking up role policies by name.
"""
from __future__ import annotations


class ContrastKitError(Exception):
    """Base class for all contrast-kit errors."""


class InvalidColorError(ContrastKitError, ValueError):
    """Raised when a color cannot be built from the given value.

    Parameters
    ----------
    value:
        The offending input (a component tuple or a text form).
    reason:
        Human-readable explanation.
    """

    def __init__(self, value: object, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid color {value!r}: {reason}")


class ConfigError(ContrastKitError, ValueError):
    """Raised when contrast options cannot be loaded or are malformed."""

    def __init__(self, message: str, source: str | None = None) -> None:
        self.source = source
        prefix = f"{source}: " if source else ""
        super().__init__(f"{prefix}{message}")


class PolicyNotFoundError(ContrastKitError, KeyError):
    """Raised when a requested policy name is not registered for a role."""

    def __init__(self, name: str, role: str, available: list[str]) -> None:
        self.policy_name = name
        self.role = role
        self.available = available
        super().__init__(
            f"Policy {name!r} is not registered for role {role!r}. "
            f"Available policies: {', '.join(available) or '(none)'}."
        )

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class PolicyAlreadyRegisteredError(ContrastKitError, ValueError):
    """Raised when attempting to register a policy name twice for one role."""

    def __init__(self, name: str, role: str) -> None:
        self.policy_name = name
        self.role = role
        super().__init__(
            f"Policy {name!r} is already registered for role {role!r}. "
            "Use a unique name or explicitly deregister the existing entry first."
        )


__all__ = [
    "ContrastKitError",
    "InvalidColorError",
    "ConfigError",
    "PolicyNotFoundError",
    "PolicyAlreadyRegisteredError",
]
