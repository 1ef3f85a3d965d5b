"""Directory listing and file reading capability used by the tree walker."""

from __future__ import annotations

import os
from typing import List, Protocol

from .model import DirEntry, EntryKind


class FileSystem(Protocol):
	def list_dir(self, path: str) -> List[DirEntry]:
		...

	def read_bytes(self, path: str) -> bytes:
		...


class LocalFileSystem:
	"""FileSystem backed by the local disk. Errors surface as OSError."""

	def list_dir(self, path: str) -> List[DirEntry]:
		entries: List[DirEntry] = []
		with os.scandir(path) as it:
			for entry in it:
				entries.append(DirEntry(name=entry.name, kind=_entry_kind(entry)))
		return entries

	def read_bytes(self, path: str) -> bytes:
		with open(path, "rb") as fh:
			return fh.read()


def _entry_kind(entry: os.DirEntry) -> EntryKind:
	if entry.is_symlink():
		return EntryKind.SYMLINK
	if entry.is_dir(follow_symlinks=False):
		return EntryKind.DIRECTORY
	if entry.is_file(follow_symlinks=False):
		return EntryKind.FILE
	return EntryKind.OTHER
