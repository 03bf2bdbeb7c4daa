"""Vault note reading."""

from smartsearch.files.ops import NoteContent, NoteReader, extract_note_path, validate_path_in_vault

__all__ = ["NoteContent", "NoteReader", "extract_note_path", "validate_path_in_vault"]
