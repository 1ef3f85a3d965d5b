"""Entry points, configuration files and package.json handling."""

from __future__ import annotations

import json
import os
from typing import Dict, List, Optional

from .fs import FileSystem, LocalFileSystem
from .log import get_logger
from .model import FileInfo, PackageDetails, PackageManifest

logger = get_logger("meta")

MANIFEST_NAME = "package.json"

ENTRY_POINT_NAMES = frozenset({"index.ts", "index.js", "main.ts", "main.js", "app.ts", "app.js"})

CONFIG_SUFFIXES = (".json", ".env", ".yml", ".yaml")


def load_manifest(root: str, fs: Optional[FileSystem] = None) -> PackageManifest:
	"""Read package.json at the root, or an empty manifest if it is unusable."""
	fs = fs or LocalFileSystem()
	path = os.path.join(root, MANIFEST_NAME)
	try:
		raw = fs.read_bytes(path)
	except OSError as exc:
		logger.debug("No readable %s at %s: %s", MANIFEST_NAME, root, exc)
		return PackageManifest()

	try:
		data = json.loads(raw.decode("utf-8"))
	except (UnicodeDecodeError, json.JSONDecodeError) as exc:
		logger.warning("Ignoring malformed %s: %s", path, exc)
		return PackageManifest()

	if not isinstance(data, dict):
		logger.warning("Ignoring %s: top level is not an object", path)
		return PackageManifest()

	return PackageManifest.model_validate(data)


def package_details(manifest: PackageManifest) -> PackageDetails:
	return PackageDetails(
		name=manifest.name or "unknown",
		version=manifest.version or "0.0.0",
		main_dependencies=list(manifest.dependencies or {}),
		dev_dependencies=list(manifest.devDependencies or {}),
	)


def find_entry_points(files: List[FileInfo], manifest: PackageManifest) -> List[str]:
	entry_points: Dict[str, None] = {}
	if manifest.main:
		entry_points[manifest.main] = None
	for f in files:
		if f.name in ENTRY_POINT_NAMES:
			entry_points.setdefault(f.path)
	return list(entry_points)


def identify_config_files(files: List[FileInfo]) -> List[str]:
	return [f.path for f in files if "config" in f.name or f.name.endswith(CONFIG_SUFFIXES)]
