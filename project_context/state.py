"""Holds the most recent ProjectContext per workspace."""

from __future__ import annotations

import threading
from typing import Callable, Dict, List, Optional

from .log import get_logger
from .model import ProjectContext

logger = get_logger("state")

ContextListener = Callable[[str, ProjectContext], None]


class ContextStore:
	def __init__(self) -> None:
		self._lock = threading.Lock()
		self._contexts: Dict[str, ProjectContext] = {}
		self._listeners: List[ContextListener] = []

	def get(self, workspace: str) -> Optional[ProjectContext]:
		with self._lock:
			return self._contexts.get(workspace)

	def set(self, workspace: str, context: ProjectContext) -> None:
		"""Replace the stored context and notify listeners in subscription order."""
		with self._lock:
			self._contexts[workspace] = context
			listeners = list(self._listeners)
		for listener in listeners:
			try:
				listener(workspace, context)
			except Exception:
				logger.exception("Context listener failed for %s", workspace)

	def subscribe(self, listener: ContextListener) -> Callable[[], None]:
		with self._lock:
			self._listeners.append(listener)

		def _unsubscribe() -> None:
			with self._lock:
				if listener in self._listeners:
					self._listeners.remove(listener)

		return _unsubscribe
