"""Conversion of arbitrary names into DNS-safe labels."""

import string

_ALLOWED = frozenset(string.ascii_lowercase + string.digits)


def dns_name(name: str) -> str:
    """Return a DNS-safe version of ``name``.

    Every character that is not ``[a-z0-9]`` after lower-casing is replaced
    by ``-``. When the first character is replaced, ``a`` is put in front of
    it; when the last character is replaced, ``z`` is appended, because a
    DNS label may neither start nor end with a dash.
    """
    result: list[str] = []
    total = len(name)

    for position, char in enumerate(name.lower()):
        if char in _ALLOWED:
            result.append(char)
            continue

        if position == 0:
            result.append("a")
        result.append("-")

        if len(result) == total:
            # The replaced character was the last one: a label can't end with a dash.
            result.append("z")

    return "".join(result)