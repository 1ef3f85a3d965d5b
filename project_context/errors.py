from __future__ import annotations


class ProjectContextError(Exception):
	"""Base class for errors raised by the project context extractor."""


class RootUnavailableError(ProjectContextError, OSError):
	"""The analysis root could not be listed."""

	def __init__(self, root: str, reason: str = "") -> None:
		self.root = root
		self.reason = reason
		message = f"Cannot list project root {root}"
		if reason:
			message = f"{message}: {reason}"
		super().__init__(message)


class InvalidQueryError(ProjectContextError, ValueError):
	"""A question was empty or otherwise unusable."""
