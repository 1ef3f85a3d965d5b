from __future__ import annotations

import os
import posixpath
from concurrent.futures import ThreadPoolExecutor
from typing import List, NamedTuple, Optional

from .config import AnalyzerSettings
from .errors import RootUnavailableError
from .fs import FileSystem, LocalFileSystem
from .log import get_logger
from .model import DirEntry, EntryKind, FileInfo

logger = get_logger("fs_scan")


class _Candidate(NamedTuple):
	path: str
	rel_path: str
	name: str
	extension: str


class _Pending(NamedTuple):
	path: str
	rel_path: str
	depth: int
	entry: DirEntry


def file_extension(filename: str) -> str:
	_, ext = os.path.splitext(filename)
	return ext.lower()


class TreeWalker:
	"""Walks a project tree and loads the contents of relevant files.

	Directories are listed on the calling thread so excluded subtrees are
	pruned before anything beneath them is touched. File contents are then read
	on a bounded thread pool and returned in walk order.
	"""

	def __init__(self, settings: Optional[AnalyzerSettings] = None, fs: Optional[FileSystem] = None) -> None:
		self.settings = settings or AnalyzerSettings()
		self.fs = fs or LocalFileSystem()

	def walk(self, root: str) -> List[FileInfo]:
		candidates = self._collect(root)
		if not candidates:
			return []
		workers = min(self.settings.max_workers, len(candidates))
		with ThreadPoolExecutor(max_workers=workers) as pool:
			loaded = list(pool.map(self._load, candidates))
		return [info for info in loaded if info is not None]

	def _collect(self, root: str) -> List[_Candidate]:
		try:
			root_entries = self.fs.list_dir(root)
		except OSError as exc:
			raise RootUnavailableError(root, str(exc)) from exc

		candidates: List[_Candidate] = []
		stack: List[_Pending] = []
		self._push(stack, root, "", 1, root_entries)

		while stack:
			current = stack.pop()
			name = current.entry.name
			if current.entry.kind == EntryKind.DIRECTORY:
				if name in self.settings.excluded_dirs:
					continue
				if current.depth > self.settings.max_depth:
					logger.debug("Depth limit reached, not descending into %s", current.rel_path)
					continue
				try:
					entries = self.fs.list_dir(current.path)
				except OSError as exc:
					logger.warning("Skipping unreadable directory %s: %s", current.rel_path, exc)
					continue
				self._push(stack, current.path, current.rel_path, current.depth + 1, entries)
			elif current.entry.kind == EntryKind.FILE:
				ext = file_extension(name)
				if ext in self.settings.supported_extensions:
					candidates.append(_Candidate(current.path, current.rel_path, name, ext))
		return candidates

	@staticmethod
	def _push(stack: List[_Pending], dir_path: str, rel_dir: str, depth: int, entries: List[DirEntry]) -> None:
		# Reversed so the first entry by name is popped first (pre-order).
		for entry in sorted(entries, key=lambda e: e.name, reverse=True):
			rel_path = posixpath.join(rel_dir, entry.name) if rel_dir else entry.name
			stack.append(_Pending(os.path.join(dir_path, entry.name), rel_path, depth, entry))

	def _load(self, candidate: _Candidate) -> Optional[FileInfo]:
		try:
			raw = self.fs.read_bytes(candidate.path)
		except OSError as exc:
			logger.warning("Skipping unreadable file %s: %s", candidate.rel_path, exc)
			return None
		try:
			content = raw.decode("utf-8")
		except UnicodeDecodeError:
			logger.warning("Skipping %s: content is not valid UTF-8", candidate.rel_path)
			return None
		return FileInfo(
			path=candidate.rel_path,
			name=candidate.name,
			extension=candidate.extension,
			content=content,
		)


def scan_repository(
	root: str,
	settings: Optional[AnalyzerSettings] = None,
	fs: Optional[FileSystem] = None,
) -> List[FileInfo]:
	return TreeWalker(settings=settings, fs=fs).walk(root)
