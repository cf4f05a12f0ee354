"""URL to file-path resolution for the view and asset schemes.

Only spaces are decoded: literal ``%20`` sequences and raw whitespace
become a single space each. Every other percent-escape is passed
through unresolved, so ``view:///caf%C3%A9`` looks for a file literally
named ``caf%C3%A9``.

``urlsplit`` deletes tabs and newlines, so whitespace inside the URL is
escaped before it is split: ``view:///my<TAB>page`` resolves to
``my page``, not ``mypage``.

``format_view_url`` does not quote the view id. An id containing ``#``
or ``?`` is cut short when the URL is parsed back, so view ids should
stick to path-safe characters.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from urllib.parse import parse_qs, urlencode, urlsplit

_SPACE_RE = re.compile(r"(?:\s|%20)")
_WHITESPACE_RE = re.compile(r"\s")


def decode_spaces(path: str) -> str:
    """Replace ``%20`` and whitespace characters with a literal space."""
    return _SPACE_RE.sub(" ", path)


def resolve_path(url: str) -> str:
    """Return the filesystem-relative path a view or asset URL points at.

    Scheme, host, and query are ignored. The leading separator is stripped
    so the result joins cleanly under a root directory. No extension is
    added; that is the caller's job.

    Raises whatever ``urllib.parse.urlsplit`` raises for malformed URLs.
    """
    # urlsplit would delete inner tabs and newlines; outer whitespace is dropped either way
    path = urlsplit(_WHITESPACE_RE.sub("%20", url.strip())).path
    return decode_spaces(path.lstrip("/"))


def resolve_host(url: str) -> str:
    """Return the (lower-cased) host segment of *url*, or ``""`` if absent."""
    return urlsplit(url).hostname or ""


def format_view_url(
    scheme: str,
    view_id: str,
    query: Mapping[str, object] | None = None,
) -> str:
    """Compose ``scheme:///view_id?query`` for a navigation.

    The triple slash marks an empty host, so the whole view id is the path.
    """
    url = f"{scheme}:///{view_id.lstrip('/')}"
    if query:
        url = f"{url}?{urlencode({k: str(v) for k, v in query.items()})}"
    return url


class QueryParams(Mapping[str, str]):
    """Immutable query string parameters of a view URL.

    ``__getitem__`` returns the first value for a key.
    """

    _data: dict[str, list[str]]

    __slots__ = ("_data",)

    def __init__(self, query_string: str = "") -> None:
        self._data = parse_qs(query_string, keep_blank_values=True)

    @classmethod
    def from_url(cls, url: str) -> QueryParams:
        return cls(urlsplit(url).query)

    def __getitem__(self, key: str) -> str:
        return self._data[key][0]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"QueryParams({self.without()!r})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        values = self._data.get(key)
        if values:
            return values[0]
        return default

    def without(self, *keys: str) -> dict[str, str]:
        """Return a plain dict of first values, minus *keys*."""
        return {k: self[k] for k in self if k not in keys}
