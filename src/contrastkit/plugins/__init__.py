"""Plugin subsystem for contrast-kit.

Third-party role policies register through ``importlib.metadata``
entry-points in the "contrastkit.policies" group.

Example
-------
Declare a policy in pyproject.toml:

.. code-block:: toml

    [project.entry-points."contrastkit.policies"]
    "link:always-blue" = "my_package.policies:AlwaysBlue"
"""
from __future__ import annotations

from contrastkit.plugins.registry import PolicyRegistry

__all__ = ["PolicyRegistry"]
