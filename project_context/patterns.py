from __future__ import annotations

from typing import Callable, Dict, List, Tuple

from .model import FileInfo


# Plain substring checks; matches inside comments or strings count too.
PATTERN_RULES: Tuple[Tuple[str, Callable[[str], bool]], ...] = (
	("Class Inheritance", lambda text: "class" in text and "extends" in text),
	("Interface-based Design", lambda text: "interface " in text),
	("Async/Await Pattern", lambda text: "async " in text and "await " in text),
	("Access Modifiers", lambda text: "private " in text or "protected " in text),
	("Error Handling", lambda text: "new Error(" in text),
)


def analyze_patterns(files: List[FileInfo]) -> List[str]:
	found: Dict[str, None] = {}
	for f in files:
		for pattern, matches in PATTERN_RULES:
			if matches(f.content):
				found.setdefault(pattern)
	return list(found)
