"""CLI package.

The ``cli`` sub-package contains the Click application. Commands import
engine modules lazily so ``--help`` stays fast.
"""
from __future__ import annotations
