"""Serialization of contrast results to plain dicts, JSON and YAML.

Usage
-----
::

    from contrastkit.engine import ContrastEngine
    from contrastkit.export import PaletteSerializer

    results = ContrastEngine().palette(background)
    print(PaletteSerializer().to_yaml(background, results))
"""
from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

import yaml

from contrastkit.color.model import Color
from contrastkit.engine.engine import ContrastResult
from contrastkit.engine.luminance import relative_luminance
from contrastkit.roles import ContrastRole

_PRECISION = 6


def _round_all(values: tuple[float, ...]) -> list[float]:
    return [round(v, _PRECISION) for v in values]


class PaletteSerializer:
    """Convert a background and its resolved roles into a plain structure."""

    def color_to_dict(self, color: Color) -> dict[str, Any]:
        return {
            "hex": color.to_hex(),
            "rgba": _round_all(color.to_rgba()),
            "hsba": _round_all(color.to_hsba()),
            "luminance": round(relative_luminance(color), _PRECISION),
        }

    def result_to_dict(self, result: ContrastResult) -> dict[str, Any]:
        data = self.color_to_dict(result.color)
        data.update(
            {
                "policy": result.policy,
                "ratio": round(result.ratio, _PRECISION),
                "threshold": result.threshold,
                "passes": result.passes,
                "fell_back": result.fell_back,
            }
        )
        return data

    def to_dict(
        self, background: Color, results: Mapping[ContrastRole, ContrastResult]
    ) -> dict[str, Any]:
        """Return ``{"background": {...}, "roles": {role: {...}}}``."""
        return {
            "background": self.color_to_dict(background),
            "roles": {
                role.value: self.result_to_dict(result) for role, result in results.items()
            },
        }

    # ------------------------------------------------------------------
    # JSON / YAML helpers
    # ------------------------------------------------------------------

    def to_json(
        self,
        background: Color,
        results: Mapping[ContrastRole, ContrastResult],
        indent: int = 2,
    ) -> str:
        """Serialize a palette to a JSON string."""
        return json.dumps(self.to_dict(background, results), indent=indent, ensure_ascii=False)

    def to_yaml(
        self, background: Color, results: Mapping[ContrastRole, ContrastResult]
    ) -> str:
        """Serialize a palette to a YAML string."""
        return yaml.safe_dump(
            self.to_dict(background, results),
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )
