from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import (
	BaseModel,
	ConfigDict,
	Field,
	ValidationError,
	ValidatorFunctionWrapHandler,
	field_validator,
)
from pydantic.alias_generators import to_camel


class FileInfo(BaseModel):
	path: str
	name: str
	extension: str
	content: str


class EntryKind(str, Enum):
	FILE = "file"
	DIRECTORY = "directory"
	SYMLINK = "symlink"
	OTHER = "other"


class DirEntry(BaseModel):
	name: str
	kind: EntryKind


class PackageManifest(BaseModel):
	"""The subset of package.json the analyzer reads."""

	model_config = ConfigDict(extra="ignore")

	name: Optional[str] = None
	version: Optional[str] = None
	main: Optional[str] = None
	dependencies: Optional[Dict[str, Any]] = None
	devDependencies: Optional[Dict[str, Any]] = None

	@field_validator("name", "version", "main", "dependencies", "devDependencies", mode="wrap")
	@classmethod
	def _drop_invalid(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
		# A wrongly typed field reads as absent; the other fields are kept.
		try:
			return handler(value)
		except ValidationError:
			return None


class PackageDetails(BaseModel):
	model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

	name: str = "unknown"
	version: str = "0.0.0"
	main_dependencies: List[str] = []
	dev_dependencies: List[str] = []


class ProjectContext(BaseModel):
	model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

	files: List[FileInfo] = []
	summary: str = ""
	main_technologies: List[str] = []
	folder_structure: str = ""
	code_patterns: List[str] = []
	package_details: PackageDetails = PackageDetails()
	entry_points: List[str] = []
	config_files: List[str] = []


class FileNode(BaseModel):
	kind: Literal["file"] = "file"
	name: str
	extension: str
	path: str


class DirectoryNode(BaseModel):
	kind: Literal["directory"] = "directory"
	name: str
	children: Dict[str, "Node"] = {}


Node = Annotated[Union[FileNode, DirectoryNode], Field(discriminator="kind")]

DirectoryNode.model_rebuild()
