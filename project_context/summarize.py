from __future__ import annotations

from typing import List

from .model import PackageManifest


def compose_summary(
	technologies: List[str],
	patterns: List[str],
	folder_structure: str,
	manifest: PackageManifest,
	entry_points: List[str],
	config_files: List[str],
) -> str:
	"""Narrative project description handed to the question-answering service."""
	architecture = "strong typed" if "Interface-based Design" in patterns else "dynamic"
	if manifest.dependencies is not None:
		dependencies = ", ".join(manifest.dependencies)
	else:
		dependencies = "No dependencies found"

	parts: List[str] = [
		f"This is a {', '.join(technologies)} project with a {architecture} architecture.",
		"",
		"Project Structure:",
		folder_structure,
		"",
		f"Main Entry Points: {', '.join(entry_points)}",
		"",
		"The project implements the following patterns:",
		", ".join(patterns),
		"",
		f"Configuration files include: {', '.join(config_files)}",
		"",
		"Dependencies are managed through npm/yarn with key dependencies including:",
		dependencies,
	]
	return "\n".join(parts).strip()
