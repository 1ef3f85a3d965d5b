"""Settings for the tree walk."""

from __future__ import annotations

import os
from typing import FrozenSet, Optional

from pydantic import BaseModel, Field


DEFAULT_EXCLUDED_DIRS: FrozenSet[str] = frozenset({"node_modules", ".git", "dist", "build", "out"})

DEFAULT_SUPPORTED_EXTENSIONS: FrozenSet[str] = frozenset(
	{".ts", ".js", ".jsx", ".tsx", ".json", ".html", ".css"}
)


class AnalyzerSettings(BaseModel):
	excluded_dirs: FrozenSet[str] = Field(default=DEFAULT_EXCLUDED_DIRS)
	supported_extensions: FrozenSet[str] = Field(default=DEFAULT_SUPPORTED_EXTENSIONS)
	max_workers: int = Field(default=8, ge=1)
	max_depth: int = Field(default=64, ge=1)

	@classmethod
	def from_env(cls) -> "AnalyzerSettings":
		"""Load settings from PROJCTX_* environment variables."""
		def _parse_int(value: Optional[str], fallback: int) -> int:
			try:
				parsed = int(value) if value is not None else fallback
			except ValueError:
				return fallback
			return parsed if parsed >= 1 else fallback

		excluded = set(DEFAULT_EXCLUDED_DIRS)
		extra = os.getenv("PROJCTX_EXTRA_EXCLUDED_DIRS")
		if extra:
			excluded.update(entry.strip() for entry in extra.split(",") if entry.strip())

		return cls(
			excluded_dirs=frozenset(excluded),
			max_workers=_parse_int(os.getenv("PROJCTX_MAX_WORKERS"), 8),
			max_depth=_parse_int(os.getenv("PROJCTX_MAX_DEPTH"), 64),
		)
