from __future__ import annotations

from pathlib import Path
from typing import Callable, Mapping, Union

import pytest


Contents = Union[str, bytes]


@pytest.fixture
def make_repo(tmp_path: Path) -> Callable[[Mapping[str, Contents]], Path]:
	"""Write `relative path -> contents` into a fresh repo directory."""
	root = tmp_path / "repo"
	root.mkdir()

	def _make(files: Mapping[str, Contents]) -> Path:
		for relative, content in files.items():
			path = root / relative
			path.parent.mkdir(parents=True, exist_ok=True)
			if isinstance(content, bytes):
				path.write_bytes(content)
			else:
				path.write_text(content, encoding="utf-8")
		return root

	return _make
