"""Linear undo/redo history of whole-document snapshots."""

from photosquid.core.ocean import Ocean

DEFAULT_MAX_ENTRIES = 100


class History:
    """Bounded list of Ocean snapshots with a cursor.

    Every stored snapshot is an independent clone, and so is every snapshot
    handed back, so nothing outside the history can alter its entries.

    Args:
        max_entries: Number of snapshots kept before the oldest is evicted
    """

    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES) -> None:
        self.max_entries = max(2, max_entries)
        self._entries: list[Ocean] = []
        self._cursor = 0

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def cursor(self) -> int:
        return self._cursor

    def push(self, ocean: Ocean) -> None:
        """Record a snapshot, discarding any redo entries.

        The first push also records an empty document so the first change
        can be undone.
        """
        if not self._entries:
            self._entries.append(Ocean())
            self._cursor = 0
        else:
            del self._entries[self._cursor + 1 :]

        while len(self._entries) >= self.max_entries:
            self._entries.pop(0)
            self._cursor -= 1

        self._entries.append(ocean.clone())
        self._cursor = len(self._entries) - 1

    def can_undo(self) -> bool:
        return self._cursor > 0

    def can_redo(self) -> bool:
        return self._cursor + 1 < len(self._entries)

    def undo(self) -> Ocean | None:
        """Step back. Returns the snapshot to restore, or None at the start."""
        if not self.can_undo():
            return None
        self._cursor -= 1
        return self._entries[self._cursor].clone()

    def redo(self) -> Ocean | None:
        """Step forward. Returns the snapshot to restore, or None at the end."""
        if not self.can_redo():
            return None
        self._cursor += 1
        return self._entries[self._cursor].clone()
