"""Helpers for reading and rewriting page[...] query parameters in a URL string."""

from __future__ import annotations

import re


def has_param(url: str, name: str) -> bool:
    """Return True if the literal parameter name occurs anywhere in the URL.

    This is a substring check, not a parsed-query lookup: a parameter such as
    ``xpage[limit]`` also counts as present for ``page[limit]``.
    """
    return name in url


def append_param(url: str, param: str) -> str:
    """Append ``param`` as a new query parameter, starting the query if needed."""
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{param}"


def get_page_param(name: str, url: str) -> int:
    """Return the digits following ``page[<name>]=``, or 0 when absent or non-numeric."""
    match = re.search(rf"page\[{re.escape(name)}\]=(\d+)", url)
    if match is None:
        return 0
    return int(match.group(1))


def replace_param(url: str, param: str, value: str | int) -> str:
    """Replace the value of ``param`` in place, keeping the key where it is.

    Only an occurrence that starts a query parameter is matched, so a longer
    name such as ``mypage[offset]`` is left alone. The first such occurrence
    is rewritten; later ``&param=...`` duplicates are dropped so the
    parameter appears at most once. URLs without the parameter are returned
    unchanged.
    """
    escaped = re.escape(param)
    match = re.search(rf"(?:^|(?<=[?&])){escaped}=[^&]*", url)
    if match is None:
        return url
    head = f"{url[:match.start()]}{param}={value}"
    tail = re.sub(rf"&{escaped}=[^&]*", "", url[match.end():])
    return head + tail
