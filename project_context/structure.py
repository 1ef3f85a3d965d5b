from __future__ import annotations

import posixpath
from typing import Dict, List

from .model import DirectoryNode, FileInfo, FileNode


TREE_HIDDEN_NAMES = frozenset({"node_modules", "dist"})

TREE_FILE_EXTENSIONS = frozenset({".js", ".ts", ".py", ".java", ".html", ".css"})


def render_folder_structure(files: List[FileInfo]) -> str:
	"""Flat listing of files grouped by their parent directory.

	Root-level files are grouped under ".".
	"""
	groups: Dict[str, Dict[str, None]] = {}
	for f in files:
		directory = posixpath.dirname(f.path) or "."
		groups.setdefault(directory, {}).setdefault(f.name)

	return "".join(
		f"\n- {directory}/: Contains {', '.join(names)}" for directory, names in groups.items()
	)


def build_tree(files: List[FileInfo]) -> DirectoryNode:
	root = DirectoryNode(name="")
	for f in files:
		parts = f.path.split("/")
		cursor = root
		for part in parts[:-1]:
			child = cursor.children.get(part)
			if not isinstance(child, DirectoryNode):
				child = DirectoryNode(name=part)
				cursor.children[part] = child
			cursor = child
		cursor.children[parts[-1]] = FileNode(name=parts[-1], extension=f.extension, path=f.path)
	return root


def render_tree(node: DirectoryNode, depth: int = 0) -> str:
	lines: List[str] = []
	_render_into(node, depth, lines)
	return "".join(lines)


def _render_into(node: DirectoryNode, depth: int, lines: List[str]) -> None:
	indent = "  " * depth
	for name, child in node.children.items():
		if name.startswith(".") or name in TREE_HIDDEN_NAMES:
			continue
		if isinstance(child, FileNode):
			if child.extension in TREE_FILE_EXTENSIONS:
				lines.append(f"{indent}- {name} ({child.extension})\n")
		else:
			lines.append(f"{indent}+ {name}/\n")
			_render_into(child, depth + 1, lines)
