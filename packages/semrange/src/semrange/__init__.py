# SPDX-License-Identifier: MIT
"""Semantic version parsing, comparison and range constraints.

This package parses and compares versions following Semantic Versioning 2.0.0,
and evaluates boolean constraint expressions against them.

Example:
    >>> from semrange import parse_version, is_valid_version, compare_versions
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.pre_release_version
    'alpha.1'
    >>>
    >>> is_valid_version("1.0.0")
    True
    >>>
    >>> compare_versions("1.0.0", "2.0.0")
    -1
    >>>
    >>> version.satisfies(">=1.0.0 & <2.0.0")
    True
"""

__version__ = "0.1.0"

from .errors import (
    ParseError,
    UnexpectedCharacterError,
    LexerError,
    UnexpectedTokenError,
    InvalidOperationError,
)
from .identifiers import Identifier, IdentifierKind, MetadataVersion
from .normal import NormalVersion, MAX_COMPONENT
from .version import (
    Version,
    VersionBuilder,
    parse_version,
    try_parse_version,
    is_valid_version,
)
from .compare import (
    compare_versions,
    compare_versions_with_builds,
    version_key,
    build_aware_key,
    sort_versions,
    filter_satisfying,
    max_satisfying,
    min_satisfying,
)
from .expr import Expression, parse_constraint

__all__ = [
    # Errors
    "ParseError",
    "UnexpectedCharacterError",
    "LexerError",
    "UnexpectedTokenError",
    "InvalidOperationError",
    # Version model
    "Identifier",
    "IdentifierKind",
    "MetadataVersion",
    "NormalVersion",
    "MAX_COMPONENT",
    "Version",
    "VersionBuilder",
    # Version parsing
    "parse_version",
    "try_parse_version",
    "is_valid_version",
    # Version comparison
    "compare_versions",
    "compare_versions_with_builds",
    "version_key",
    "build_aware_key",
    "sort_versions",
    "filter_satisfying",
    "max_satisfying",
    "min_satisfying",
    # Constraints
    "Expression",
    "parse_constraint",
]
