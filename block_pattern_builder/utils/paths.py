"""
Path and URI string helpers.

Both filesystem paths and URIs are joined with "/" so the same helpers
serve Plugin.path() and Plugin.uri().
"""

from __future__ import annotations


def untrailingslashit(value: str) -> str:
    """Remove trailing forward and back slashes."""
    return value.rstrip("/\\")


def leadingslashit(value: str) -> str:
    """Return value with exactly one leading slash.

    Examples:
        >>> leadingslashit("js/app.js")
        '/js/app.js'
        >>> leadingslashit("//js/app.js")
        '/js/app.js'
        >>> leadingslashit("")
        '/'
    """
    return "/" + value.lstrip("/")


def join(base: str, file: str = "") -> str:
    """Join a relative file onto base.

    Leading slashes are stripped from file first; when nothing is left the
    base is returned unchanged.
    """
    file = file.lstrip("/")
    return f"{base}/{file}" if file else base
