"""Built-in role policies.

A policy maps a background color to a foreground color for one role.
Policies are stateless; the engine instantiates the class registered in
``policy_registry`` (or its own registry) and calls
:meth:`RolePolicy.resolve`.  Secondary policies derive their color from
whichever primary policy the options name.

=========== ================= ============================================
Role        Policy name       Behavior
=========== ================= ============================================
primary     ``black-white``   white on dark backgrounds, black otherwise
secondary   ``shifted``       primary color with each channel shifted
secondary   ``binary``        the primary color, unchanged
link        ``luminance``     blue on light backgrounds, yellow on dark
link        ``fixed-candidate`` blue if it passes the link threshold,
                              yellow otherwise
neon-link   ``boost``         background with saturation and brightness
                              boosted
=========== ================= ============================================
"""
from __future__ import annotations

from abc import ABC, abstractmethod

from contrastkit.color.model import Color
from contrastkit.color.palette import BLACK, BLUE, WHITE, YELLOW
from contrastkit.config.options import ContrastOptions
from contrastkit.engine.luminance import has_good_contrast, is_dark, relative_luminance
from contrastkit.plugins.registry import PolicyRegistry
from contrastkit.roles import ContrastRole


class RolePolicy(ABC):
    """Base class for all role policies.

    Parameters
    ----------
    registry:
        Registry used to look up the primary policy for roles derived
        from it.  Defaults to the built-in ``policy_registry``.
    """

    def __init__(self, registry: PolicyRegistry[RolePolicy] | None = None) -> None:
        self._registry = registry

    @property
    def registry(self) -> PolicyRegistry[RolePolicy]:
        return self._registry if self._registry is not None else policy_registry

    def primary_color(self, background: Color, options: ContrastOptions) -> Color:
        """Resolve the configured primary policy for ``background``."""
        cls = self.registry.get(ContrastRole.PRIMARY, options.primary_policy)
        return cls(self._registry).resolve(background, options)

    @abstractmethod
    def resolve(self, background: Color, options: ContrastOptions) -> Color:
        """Return the foreground color for ``background``."""


policy_registry: PolicyRegistry[RolePolicy] = PolicyRegistry(RolePolicy, "policies")


def primary_threshold(options: ContrastOptions) -> float:
    """Threshold for the black/white decision, honoring an explicit override."""
    return options.threshold if options.threshold is not None else options.primary_threshold


def link_threshold(options: ContrastOptions) -> float:
    return options.threshold if options.threshold is not None else options.link_threshold


def black_or_white(background: Color, threshold: float) -> Color:
    """White when ``background`` is dark at ``threshold``, black otherwise."""
    return WHITE if is_dark(background, threshold) else BLACK


# ---------------------------------------------------------------------------
# Primary
# ---------------------------------------------------------------------------


@policy_registry.register(ContrastRole.PRIMARY, "black-white")
class BlackWhitePolicy(RolePolicy):
    """Pure white or pure black, decided by the background luminance."""

    def resolve(self, background: Color, options: ContrastOptions) -> Color:
        return black_or_white(background, primary_threshold(options))


# ---------------------------------------------------------------------------
# Secondary
# ---------------------------------------------------------------------------


@policy_registry.register(ContrastRole.SECONDARY, "shifted")
class ShiftedSecondaryPolicy(RolePolicy):
    """The primary color with every RGB channel moved by ``secondary_delta``.

    Channels are clamped, so with the default positive delta a white
    primary stays white and a black primary becomes a dark gray.
    """

    def resolve(self, background: Color, options: ContrastOptions) -> Color:
        return self.primary_color(background, options).shifted(options.secondary_delta)


@policy_registry.register(ContrastRole.SECONDARY, "binary")
class BinarySecondaryPolicy(RolePolicy):
    """The primary color, unchanged."""

    def resolve(self, background: Color, options: ContrastOptions) -> Color:
        return self.primary_color(background, options)


# ---------------------------------------------------------------------------
# Link
# ---------------------------------------------------------------------------


@policy_registry.register(ContrastRole.LINK, "luminance")
class LuminanceLinkPolicy(RolePolicy):
    """Pick the link color from the background luminance alone.

    Backgrounds brighter than ``cutoff`` get the dark candidate.
    """

    cutoff: float = 0.5
    dark_candidate: Color = BLUE
    light_candidate: Color = YELLOW

    def resolve(self, background: Color, options: ContrastOptions) -> Color:
        if relative_luminance(background) > self.cutoff:
            return self.dark_candidate
        return self.light_candidate


@policy_registry.register(ContrastRole.LINK, "fixed-candidate")
class FixedCandidateLinkPolicy(RolePolicy):
    """Use ``candidate`` when it meets the link threshold, else ``fallback``.

    The fallback is returned unchecked.
    """

    candidate: Color = BLUE
    fallback: Color = YELLOW

    def resolve(self, background: Color, options: ContrastOptions) -> Color:
        if has_good_contrast(
            self.candidate, background, link_threshold(options), ratio=options.ratio
        ):
            return self.candidate
        return self.fallback


# ---------------------------------------------------------------------------
# Neon link
# ---------------------------------------------------------------------------


@policy_registry.register(ContrastRole.NEON_LINK, "boost")
class BoostNeonLinkPolicy(RolePolicy):
    """Saturate and brighten the background itself.

    Hue and alpha are kept.  The result is not checked against the
    background; use strict mode for that.
    """

    def resolve(self, background: Color, options: ContrastOptions) -> Color:
        hue, saturation, brightness, alpha = background.to_hsba()
        boost = options.neon_boost
        return Color.from_hsba(
            hue,
            min(max(saturation + boost, 0.0), 1.0),
            min(max(brightness + boost, 0.0), 1.0),
            alpha,
        )
