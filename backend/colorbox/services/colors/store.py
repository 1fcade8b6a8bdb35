"""
Color list state.

A ColorCollection is the explicit state container for one user's working
set: the ordered color list, display names, the uploaded image reference
and the extraction flag. Entries get a stable id at insertion and names are
keyed by that id, so removing a color never moves another color's label.

SessionStore keeps collections in memory, keyed by session id.
"""
from dataclasses import dataclass
from threading import Lock
from typing import Dict, Iterable, List, Optional

from colorbox.utils.ids import generate_color_id, generate_session_id
from colorbox.utils.logging import get_logger
from colorbox.utils.metrics import get_metrics
from .validation import AddResult, try_add


@dataclass(frozen=True)
class ColorEntry:
    """A color committed to a list."""
    id: str
    value: str


class ColorCollection:
    """Ordered, duplicate-free list of canonical colors with display names."""

    def __init__(self, session_id: Optional[str] = None):
        self.session_id = session_id or generate_session_id()
        self._entries: List[ColorEntry] = []
        self._names: Dict[str, str] = {}
        self.uploaded_image: Optional[str] = None
        self.extracting: bool = False

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, color: str) -> bool:
        return any(entry.value == color for entry in self._entries)

    def values(self) -> List[str]:
        """Canonical strings in display order."""
        return [entry.value for entry in self._entries]

    def entries(self) -> List[ColorEntry]:
        return list(self._entries)

    def get(self, color_id: str) -> ColorEntry:
        for entry in self._entries:
            if entry.id == color_id:
                return entry
        raise KeyError(color_id)

    def index_of(self, color_id: str) -> int:
        for index, entry in enumerate(self._entries):
            if entry.id == color_id:
                return index
        raise KeyError(color_id)

    def add(self, raw: str) -> AddResult:
        """
        Normalize, validate and append a color.

        Returns:
            The AddResult; the list only changes when it is accepted
        """
        result = try_add(raw, self.values())
        metrics = get_metrics()

        if not result.accepted:
            metrics.increment_rejected_count(result.rejection.value)
            get_logger().info(f"Color rejected: {result.message}", extra={
                "session_id": self.session_id,
                "input": raw,
                "rejection": result.rejection.value
            })
            return result

        self._entries.append(ColorEntry(id=generate_color_id(), value=result.color))
        metrics.increment_added_count()
        return result

    def extend(self, colors: Iterable[str]) -> List[AddResult]:
        """Merge colors one by one, in order, through add()."""
        return [self.add(color) for color in colors]

    def find(self, color: str) -> ColorEntry:
        """Entry holding a canonical string; unique by construction."""
        for entry in self._entries:
            if entry.value == color:
                return entry
        raise KeyError(color)

    def remove(self, color_id: str) -> ColorEntry:
        """Remove an entry by id along with its name."""
        entry = self.get(color_id)
        self._entries.remove(entry)
        self._names.pop(color_id, None)
        return entry

    def remove_at(self, index: int) -> ColorEntry:
        """Remove the entry at a display position."""
        return self.remove(self._entries[index].id)

    def clear(self):
        """Discard every color, name and the uploaded image."""
        self._entries.clear()
        self._names.clear()
        self.uploaded_image = None

    def rename(self, color_id: str, name: str):
        self.get(color_id)
        self._names[color_id] = name

    def display_name(self, color_id: str) -> str:
        """User label, or "color <position>" when none was set."""
        if color_id in self._names:
            return self._names[color_id]
        return f"color {self.index_of(color_id) + 1}"


class SessionStore:
    """In-memory registry of collections."""

    def __init__(self):
        self._lock = Lock()
        self._sessions: Dict[str, ColorCollection] = {}

    def create(self) -> ColorCollection:
        collection = ColorCollection()
        with self._lock:
            self._sessions[collection.session_id] = collection
        get_logger().debug(f"Created session {collection.session_id}")
        return collection

    def get(self, session_id: str) -> ColorCollection:
        with self._lock:
            return self._sessions[session_id]

    def delete(self, session_id: str):
        with self._lock:
            self._sessions.pop(session_id, None)

    def reset(self):
        """Forget every session (for testing)."""
        with self._lock:
            self._sessions.clear()


# Global session store
_store: Optional[SessionStore] = None


def get_session_store() -> SessionStore:
    """Get or create global session store."""
    global _store
    if _store is None:
        _store = SessionStore()
    return _store
