"""Export of contrast results to JSON and YAML."""
from __future__ import annotations

from contrastkit.export.serializer import PaletteSerializer

__all__ = ["PaletteSerializer"]
