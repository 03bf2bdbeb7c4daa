"""Note reading - read_note tool implementation.

Pure filesystem I/O. No collection dependency.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path

from smartsearch.config.constants import FRAGMENT_DELIMITER, MAX_NOTE_CHARS
from smartsearch.core.errors import NoteError


@dataclass(frozen=True, slots=True)
class NoteContent:
    """Result of a note read."""

    path: str  # Vault-relative, fragment stripped
    content: str
    truncated: bool


def extract_note_path(note_path: str) -> str:
    """Strip a section fragment: ``notes/a.md#Heading`` -> ``notes/a.md``."""
    return note_path.split(FRAGMENT_DELIMITER, 1)[0]


def validate_path_in_vault(vault_root: Path, user_path: str) -> Path:
    """Validate that user_path is within vault_root, preventing traversal attacks.

    Args:
        vault_root: Vault root directory
        user_path: User-provided path (may be relative or absolute)

    Returns:
        Resolved absolute path if valid

    Raises:
        NoteError: If path escapes vault_root
    """
    resolved_root = vault_root.resolve()
    full_path = (vault_root / user_path).resolve()

    if not full_path.is_relative_to(resolved_root):
        raise NoteError.outside_vault(user_path, str(resolved_root))

    return full_path


class NoteReader:
    """Reads note text from the vault with truncation."""

    def __init__(self, vault_root: Path, *, max_chars: int = MAX_NOTE_CHARS) -> None:
        self._vault_root = vault_root
        self._max_chars = max_chars

    def read(self, note_path: str) -> NoteContent:
        """Read a note (or the note owning a section path).

        Raises:
            NoteError: If the path escapes the vault, the note does not exist,
                or it cannot be read as UTF-8 text.
        """
        file_path = extract_note_path(note_path)
        full_path = validate_path_in_vault(self._vault_root, file_path)

        try:
            raw = full_path.read_text(encoding="utf-8")
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as e:
            raise NoteError.not_found(file_path) from e
        except UnicodeDecodeError as e:
            raise NoteError.unreadable(file_path, "not valid UTF-8") from e
        except OSError as e:
            raise NoteError.unreadable(file_path, e.strerror or type(e).__name__) from e

        if len(raw) > self._max_chars:
            return NoteContent(path=file_path, content=raw[: self._max_chars], truncated=True)
        return NoteContent(path=file_path, content=raw, truncated=False)

    async def aread(self, note_path: str) -> NoteContent:
        """Read a note in a worker thread so the event loop stays free."""
        return await asyncio.to_thread(self.read, note_path)
