"""Host-side document and workspace records."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class Cursor:
    """0-based cursor position as reported by the host editor."""

    line: int = 0
    character: int = 0


@dataclass
class ActiveDocument:
    """The document focused in the host editor.

    ``path`` is ``None`` for untitled buffers that were never written to disk.
    """

    path: Path | None
    cursor: Cursor = field(default_factory=Cursor)
    is_dirty: bool = False


@dataclass(frozen=True)
class WorkspaceFolder:
    name: str
    path: Path

    def contains(self, target: Path) -> bool:
        return target == self.path or self.path in target.parents
