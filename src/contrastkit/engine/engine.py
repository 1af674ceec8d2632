"""Contrast engine: resolve foreground colors for a background.

The ``ContrastEngine`` looks up the configured policy for each role,
runs it, and in strict mode re-checks the derived roles (secondary,
link, neon link) against their threshold, falling back to the primary
policy's choice, taken at that threshold, when the check fails.

Usage
-----
::

    from contrastkit.color import Color
    from contrastkit.engine import ContrastEngine, ContrastRole

    engine = ContrastEngine()
    text = engine.resolve(Color(0.1, 0.2, 0.3), ContrastRole.PRIMARY)
    palette = engine.palette(Color(0.1, 0.2, 0.3))
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from contrastkit.color.model import Color
from contrastkit.config.options import ContrastOptions
from contrastkit.engine.luminance import has_good_contrast, ratio_function
from contrastkit.engine.policies import (
    RolePolicy,
    link_threshold,
    policy_registry,
    primary_threshold,
)
from contrastkit.plugins.registry import PolicyRegistry
from contrastkit.roles import ContrastRole

logger = logging.getLogger(__name__)

# Roles whose result is derived rather than a black/white decision
STRICT_CHECKED_ROLES: frozenset[ContrastRole] = frozenset(
    {ContrastRole.SECONDARY, ContrastRole.LINK, ContrastRole.NEON_LINK}
)


@dataclass(frozen=True)
class ContrastResult:
    """The outcome of resolving one role for one background.

    Parameters
    ----------
    role:
        The requested role.
    background:
        The background the foreground was chosen for.
    color:
        The chosen foreground.
    policy:
        Name of the policy that produced ``color`` before any fallback.
    threshold:
        The contrast floor that applied to this role.
    ratio:
        Contrast of ``color`` over ``background`` using the configured formula.
    fell_back:
        ``True`` when strict mode replaced the policy's color.
    """

    role: ContrastRole
    background: Color
    color: Color
    policy: str
    threshold: float
    ratio: float
    fell_back: bool = False

    @property
    def passes(self) -> bool:
        """Return True if ``ratio`` meets ``threshold``."""
        return self.ratio >= self.threshold


class ContrastEngine:
    """Resolve foreground colors for the four roles.

    Parameters
    ----------
    options:
        Role thresholds, policy names and strict mode.  Defaults to
        ``ContrastOptions()``.
    registry:
        Where policy names are looked up.  Defaults to the built-in
        ``policy_registry``.
    """

    def __init__(
        self,
        options: ContrastOptions | None = None,
        registry: PolicyRegistry[RolePolicy] | None = None,
    ) -> None:
        self._options: ContrastOptions = options if options is not None else ContrastOptions()
        self._registry: PolicyRegistry[RolePolicy] = (
            registry if registry is not None else policy_registry
        )

    @property
    def options(self) -> ContrastOptions:
        return self._options

    def threshold_for(self, role: ContrastRole | str) -> float:
        """Return the contrast floor that applies to ``role``."""
        resolved = ContrastRole.parse(role)
        if resolved in (ContrastRole.PRIMARY, ContrastRole.SECONDARY):
            return primary_threshold(self._options)
        return link_threshold(self._options)

    def policy_for(self, role: ContrastRole | str) -> RolePolicy:
        """Instantiate the configured policy for ``role``.

        Raises
        ------
        PolicyNotFoundError
            If the configured name is not registered for ``role``.
        """
        resolved = ContrastRole.parse(role)
        cls = self._registry.get(resolved, self._options.policy_name(resolved))
        return cls(self._registry)

    def evaluate(self, background: Color, role: ContrastRole | str) -> ContrastResult:
        """Resolve ``role`` for ``background`` and report how it scores."""
        resolved = ContrastRole.parse(role)
        options = self._options
        threshold = self.threshold_for(resolved)
        color = self.policy_for(resolved).resolve(background, options)
        fell_back = False

        if (
            options.strict
            and resolved in STRICT_CHECKED_ROLES
            and not has_good_contrast(color, background, threshold, ratio=options.ratio)
        ):
            # Primary decision taken at this role's threshold
            fallback = self.policy_for(ContrastRole.PRIMARY).resolve(
                background, options.replace(threshold=threshold)
            )
            logger.debug(
                "Strict mode: %s color %s fails %.2f on %s; falling back to %s",
                resolved.value,
                color,
                threshold,
                background,
                fallback,
            )
            color = fallback
            fell_back = True

        return ContrastResult(
            role=resolved,
            background=background,
            color=color,
            policy=options.policy_name(resolved),
            threshold=threshold,
            ratio=ratio_function(options.ratio)(color, background),
            fell_back=fell_back,
        )

    def resolve(self, background: Color, role: ContrastRole | str) -> Color:
        """Return the foreground color for ``role`` on ``background``."""
        return self.evaluate(background, role).color

    def palette(self, background: Color) -> dict[ContrastRole, ContrastResult]:
        """Evaluate every role for ``background``, in declaration order."""
        return {role: self.evaluate(background, role) for role in ContrastRole}


def contrasting_color(
    background: Color,
    role: ContrastRole | str = ContrastRole.PRIMARY,
    options: ContrastOptions | None = None,
) -> Color:
    """Return the foreground color for ``role`` on ``background``.

    Parameters
    ----------
    background:
        The color the foreground will be drawn on.
    role:
        Which foreground to compute.  Defaults to primary text.
    options:
        Thresholds, policy names and strict mode.  Defaults apply when
        omitted.
    """
    return ContrastEngine(options).resolve(background, role)


def contrasting_palette(
    background: Color, options: ContrastOptions | None = None
) -> dict[ContrastRole, Color]:
    """Return the foreground color for every role on ``background``."""
    engine = ContrastEngine(options)
    return {role: engine.resolve(background, role) for role in ContrastRole}
