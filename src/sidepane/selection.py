"""Selection history shared between the editor and the companion.

The editor records every text selection it sees; the companion asks for the
most recent one even after focus has moved elsewhere. History is kept as a
small JSON file so both sides can reach it across processes.

PUBLIC API:
  - Position: Line/character position (zero-based)
  - Selection: One recorded text selection
  - SelectionStore: Bounded, file-backed selection history
  - SelectionStoreError: Store could not be read or written
"""

import json
import logging
import os
import tempfile
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

__all__ = ["Position", "Selection", "SelectionStore", "SelectionStoreError"]

logger = logging.getLogger(__name__)


class SelectionStoreError(Exception):
    """Raised when the selection history cannot be loaded or saved."""

    pass


@dataclass(frozen=True)
class Position:
    line: int
    character: int

    def to_dict(self) -> dict[str, int]:
        return {"line": self.line, "character": self.character}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Position":
        return cls(line=int(data["line"]), character=int(data["character"]))


@dataclass(frozen=True)
class Selection:
    """A text selection in a file.

    Serialized with the camelCase keys the companion expects:
    text, filePath, fileUrl, selection.{start,end,isEmpty}.
    """

    text: str
    file_path: str
    start: Position
    end: Position

    @property
    def file_url(self) -> str:
        return Path(self.file_path).absolute().as_uri()

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    def to_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "filePath": self.file_path,
            "fileUrl": self.file_url,
            "selection": {
                "start": self.start.to_dict(),
                "end": self.end.to_dict(),
                "isEmpty": self.is_empty,
            },
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Selection":
        """Parse a serialized selection.

        Raises:
            KeyError, TypeError, ValueError: On malformed data
        """
        rng = data["selection"]
        return cls(
            text=str(data["text"]),
            file_path=str(data["filePath"]),
            start=Position.from_dict(rng["start"]),
            end=Position.from_dict(rng["end"]),
        )


class SelectionStore:
    """Newest-last selection history persisted as a JSON list.

    A missing file is an empty history. A file that cannot be read or parsed
    is an error, never silently treated as empty.
    """

    def __init__(self, path: Path, history_size: int = 50):
        self.path = Path(path)
        self.history_size = history_size
        self._lock = threading.Lock()

    def load(self) -> list[Selection]:
        """Read the full history, oldest first.

        Raises:
            SelectionStoreError: If the file is unreadable or malformed
        """
        if not self.path.exists():
            return []

        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise SelectionStoreError(f"Failed to read selection store {self.path}: {e}") from e

        if not isinstance(raw, list):
            raise SelectionStoreError(f"Selection store {self.path} is not a list")

        try:
            return [Selection.from_dict(item) for item in raw]
        except (KeyError, TypeError, ValueError) as e:
            raise SelectionStoreError(f"Malformed entry in selection store {self.path}: {e}") from e

    def _save(self, selections: list[Selection]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=".selections-", suffix=".json")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump([s.to_dict() for s in selections], f, indent=2)
            os.replace(tmp, self.path)
        except OSError as e:
            raise SelectionStoreError(f"Failed to write selection store {self.path}: {e}") from e

    def record(self, selection: Selection) -> None:
        """Append a selection, dropping the oldest beyond history_size."""
        with self._lock:
            history = self.load()
            history.append(selection)
            self._save(history[-self.history_size :])
        logger.debug(f"Recorded selection in {selection.file_path} ({len(selection.text)} chars)")

    def get_latest_selection(self) -> Optional[Selection]:
        """Most recent selection, or None if nothing was ever recorded."""
        history = self.load()
        return history[-1] if history else None

    def clear(self) -> None:
        with self._lock:
            self._save([])
