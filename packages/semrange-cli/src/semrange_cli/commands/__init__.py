# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from .. import main as _main  # noqa: F401  load main first to avoid a circular import
from . import validate, compare, bump, satisfies

__all__ = ["validate", "compare", "bump", "satisfies"]
