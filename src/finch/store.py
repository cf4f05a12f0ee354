"""View-data store — navigation-time data, keyed by view id.

``ViewRenderer.navigate()`` writes an entry; the dispatcher reads it when
the host later requests that view. The last write for a view id wins.

By default entries live as long as the store. With ``max_entries`` set,
the entry written least recently is evicted once the cap is exceeded.
"""

from collections import OrderedDict
from typing import Any


class ViewDataStore:
    """Mapping of view id to the data supplied when it was navigated to."""

    __slots__ = ("_entries", "_max_entries")

    def __init__(self, max_entries: int | None = None) -> None:
        self._entries: OrderedDict[str, Any] = OrderedDict()
        self._max_entries = max_entries

    def put(self, view_id: str, data: Any) -> None:
        """Insert or replace the entry for *view_id*."""
        self._entries[view_id] = data
        self._entries.move_to_end(view_id)
        if self._max_entries is not None:
            while len(self._entries) > self._max_entries:
                self._entries.popitem(last=False)

    def get(self, view_id: str, default: Any = None) -> Any:
        return self._entries.get(view_id, default)

    def __contains__(self, view_id: object) -> bool:
        return view_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ViewDataStore({list(self._entries)!r})"
