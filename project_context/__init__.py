"""Extracts a structured, summarised view of a JavaScript/TypeScript project.

Modules:
- fs.py: Directory listing and file reading capability.
- fs_scan.py: Tree walk with directory pruning and extension filtering.
- detect.py: Technology detection from package.json and file signals.
- patterns.py: Lexical coding-pattern detection.
- meta.py: package.json loading, entry points and configuration files.
- structure.py: Folder listing and nested project tree.
- summarize.py: Textual project summary.
- analyze.py: ProjectAnalyzer, which ties the above together.
- state.py: Latest context per workspace with change listeners.
- qa.py: Question-answering seam.
"""

from .analyze import ProjectAnalyzer, analyze_project
from .config import AnalyzerSettings
from .errors import InvalidQueryError, ProjectContextError, RootUnavailableError
from .model import FileInfo, PackageDetails, PackageManifest, ProjectContext

__all__ = [
	"AnalyzerSettings",
	"FileInfo",
	"InvalidQueryError",
	"PackageDetails",
	"PackageManifest",
	"ProjectAnalyzer",
	"ProjectContext",
	"ProjectContextError",
	"RootUnavailableError",
	"analyze_project",
]
