from __future__ import annotations

from typing import Optional

from .config import AnalyzerSettings
from .detect import detect_technologies
from .fs import FileSystem, LocalFileSystem
from .fs_scan import TreeWalker
from .log import get_logger
from .meta import find_entry_points, identify_config_files, load_manifest, package_details
from .model import ProjectContext
from .patterns import analyze_patterns
from .structure import render_folder_structure
from .summarize import compose_summary

logger = get_logger("analyze")


class ProjectAnalyzer:
	"""Builds a ProjectContext for a directory. Holds no state between runs."""

	def __init__(self, settings: Optional[AnalyzerSettings] = None, fs: Optional[FileSystem] = None) -> None:
		self.settings = settings or AnalyzerSettings()
		self.fs = fs or LocalFileSystem()
		self._walker = TreeWalker(settings=self.settings, fs=self.fs)

	def analyze_project(self, root: str) -> ProjectContext:
		files = self._walker.walk(root)
		manifest = load_manifest(root, self.fs)

		folder_structure = render_folder_structure(files)
		technologies = detect_technologies(files, manifest)
		patterns = analyze_patterns(files)
		entry_points = find_entry_points(files, manifest)
		config_files = identify_config_files(files)
		summary = compose_summary(
			technologies,
			patterns,
			folder_structure,
			manifest,
			entry_points,
			config_files,
		)

		logger.info(
			"Analyzed %s: %d files, %d technologies, %d patterns",
			root,
			len(files),
			len(technologies),
			len(patterns),
		)
		return ProjectContext(
			files=files,
			summary=summary,
			main_technologies=technologies,
			folder_structure=folder_structure,
			code_patterns=patterns,
			package_details=package_details(manifest),
			entry_points=entry_points,
			config_files=config_files,
		)


def analyze_project(root: str, settings: Optional[AnalyzerSettings] = None) -> ProjectContext:
	return ProjectAnalyzer(settings=settings).analyze_project(root)
