from __future__ import annotations

from typing import Dict, List, Tuple

from .model import FileInfo, PackageManifest


DEPENDENCY_TECHNOLOGIES: Tuple[Tuple[str, str], ...] = (
	("react", "React"),
	("vue", "Vue"),
	("express", "Express"),
	("typescript", "TypeScript"),
)

EXTENSION_TECHNOLOGIES: Tuple[Tuple[str, str], ...] = (
	(".ts", "TypeScript"),
	(".tsx", "TypeScript"),
	(".jsx", "React"),
	(".tsx", "React"),
)

CONTENT_TECHNOLOGIES: Tuple[Tuple[str, str], ...] = (
	("import { Injectable }", "Angular"),
	("express()", "Express"),
)


def detect_technologies(files: List[FileInfo], manifest: PackageManifest) -> List[str]:
	"""Return frameworks and languages signalled by the manifest and files.

	Order is first detection, manifest dependencies before file signals.
	"""
	found: Dict[str, None] = {}

	dependencies = manifest.dependencies or {}
	for package, technology in DEPENDENCY_TECHNOLOGIES:
		if package in dependencies:
			found.setdefault(technology)

	for f in files:
		for ext, technology in EXTENSION_TECHNOLOGIES:
			if f.extension == ext:
				found.setdefault(technology)
		for marker, technology in CONTENT_TECHNOLOGIES:
			if marker in f.content:
				found.setdefault(technology)

	return list(found)
