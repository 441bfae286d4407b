"""Page title validation."""

_TITLE_CHARS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789_-")


def is_bad_title(title: str) -> bool:
    """True if *title* holds any character outside ``[A-Za-z0-9_-]``.

    Rejects all non-ASCII titles and anything usable for path traversal
    (``.``, ``/``).  The empty string is not bad by this predicate.
    """
    return any(c not in _TITLE_CHARS for c in title)
