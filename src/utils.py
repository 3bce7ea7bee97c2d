"""Shared utilities for modgraph-core."""

from __future__ import annotations

DEFAULT_SEPARATOR = "."


def short_name(identifier: str, separator: str = DEFAULT_SEPARATOR) -> str:
    """Return the last segment of a namespaced module identifier.

    Args:
        identifier: Fully qualified identifier (e.g., "app.users.UserModule")
        separator: Namespace separator used by the host

    Returns:
        Display label (e.g., "UserModule")

    Examples:
        >>> short_name("app.users.UserModule")
        'UserModule'
        >>> short_name("App\\\\Users\\\\UserModule", "\\\\")
        'UserModule'
        >>> short_name("UserModule")
        'UserModule'
    """
    if not separator:
        return identifier
    return identifier.rsplit(separator, 1)[-1]


def qualified_name(obj: type) -> str:
    """Return the dotted import path of a class."""
    return f"{obj.__module__}.{obj.__qualname__}"
