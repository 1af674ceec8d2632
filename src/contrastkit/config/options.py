"""Options controlling how the contrast engine resolves each role.

``ContrastOptions`` is a frozen dataclass so one instance can be shared
freely between callers.  Options can also be loaded from a YAML file::

    # contrast.yaml
    contrast:
      primary_threshold: 7.0
      link_policy: fixed-candidate
      strict: true

    from contrastkit.config import load_options
    options = load_options("contrast.yaml")
"""
from __future__ import annotations

import dataclasses
import logging
import math
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from contrastkit.errors import ConfigError
from contrastkit.roles import ContrastRole

logger = logging.getLogger(__name__)

AA_LARGE: float = 3.0
AA_NORMAL: float = 4.5
AAA_NORMAL: float = 7.0

RATIO_FORMULAS: tuple[str, ...] = ("asymmetric", "wcag")

# Option field naming the policy used for each role
POLICY_FIELDS: dict[ContrastRole, str] = {
    ContrastRole.PRIMARY: "primary_policy",
    ContrastRole.SECONDARY: "secondary_policy",
    ContrastRole.LINK: "link_policy",
    ContrastRole.NEON_LINK: "neon_policy",
}


@dataclass(frozen=True)
class ContrastOptions:
    """Tunable parameters for role resolution.

    Parameters
    ----------
    threshold:
        Explicit contrast floor for the requested role.  Overrides the
        role's own default threshold when set.
    primary_threshold:
        Floor used for the primary dark/light decision.
    primary_policy:
        Name of the primary policy (``"black-white"``).
    secondary_policy:
        Name of the secondary policy (``"shifted"`` or ``"binary"``).
    secondary_delta:
        Channel shift applied by the ``"shifted"`` secondary policy.
    link_policy:
        Name of the link policy (``"luminance"`` or ``"fixed-candidate"``).
    link_threshold:
        Floor used by ``"fixed-candidate"`` and by strict link checks.
    neon_policy:
        Name of the neon link policy (``"boost"``).
    neon_boost:
        Amount added to saturation and brightness for neon links.
    strict:
        Re-validate derived roles and fall back to black/white on failure.
    ratio:
        Contrast formula used for validation: ``"asymmetric"`` or ``"wcag"``.
    """

    threshold: float | None = None
    primary_threshold: float = AA_NORMAL
    primary_policy: str = "black-white"
    secondary_policy: str = "shifted"
    secondary_delta: float = 0.2
    link_policy: str = "luminance"
    link_threshold: float = AA_NORMAL
    neon_policy: str = "boost"
    neon_boost: float = 0.7
    strict: bool = False
    ratio: str = "asymmetric"

    def __post_init__(self) -> None:
        numeric = {
            "primary_threshold": self.primary_threshold,
            "secondary_delta": self.secondary_delta,
            "link_threshold": self.link_threshold,
            "neon_boost": self.neon_boost,
        }
        if self.threshold is not None:
            numeric["threshold"] = self.threshold
        for name, value in numeric.items():
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(f"{name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise ConfigError(f"{name} must be finite, got {value!r}")
        if not isinstance(self.strict, bool):
            raise ConfigError(f"strict must be a boolean, got {self.strict!r}")
        for name in POLICY_FIELDS.values():
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise ConfigError(f"{name} must be a non-empty string, got {value!r}")
        if self.ratio not in RATIO_FORMULAS:
            raise ConfigError(
                f"ratio must be one of {', '.join(RATIO_FORMULAS)}, got {self.ratio!r}"
            )

    def policy_name(self, role: ContrastRole) -> str:
        """Return the configured policy name for ``role``."""
        return getattr(self, POLICY_FIELDS[role])

    def replace(self, **changes: Any) -> "ContrastOptions":
        """Return a copy with ``changes`` applied; ``None`` values are ignored."""
        effective = {key: value for key, value in changes.items() if value is not None}
        return dataclasses.replace(self, **effective)

    def to_dict(self) -> dict[str, Any]:
        """Return the options as a plain dict."""
        return dataclasses.asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any], source: str | None = None) -> "ContrastOptions":
        """Build options from a mapping, rejecting unknown keys.

        Keys may use dashes or underscores (``link-policy`` or ``link_policy``).
        """
        known = {f.name for f in fields(cls)}
        normalized: dict[str, Any] = {}
        for key, value in data.items():
            name = str(key).replace("-", "_")
            if name not in known:
                raise ConfigError(
                    f"Unknown option {key!r}. Known options: {', '.join(sorted(known))}",
                    source=source,
                )
            normalized[name] = value
        try:
            return cls(**normalized)
        except ConfigError as exc:
            if source is None:
                raise
            raise ConfigError(str(exc), source=source) from exc


def load_options(path: str | Path) -> ContrastOptions:
    """Load ``ContrastOptions`` from a YAML file.

    The file holds a mapping of option names, optionally nested under a
    top-level ``contrast`` key.  An empty file yields the defaults.

    Raises
    ------
    ConfigError
        If the file cannot be read, is not valid YAML, or holds unknown
        or mistyped options.
    """
    source = str(path)
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config: {exc}", source=source) from exc

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML: {exc}", source=source) from exc

    if data is None:
        data = {}
    if isinstance(data, dict) and "contrast" in data:
        data = data["contrast"] or {}
    if not isinstance(data, dict):
        raise ConfigError("Top-level YAML value must be a mapping", source=source)

    options = ContrastOptions.from_dict(data, source=source)
    logger.debug("Loaded contrast options from %s: %r", source, options)
    return options
