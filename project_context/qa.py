"""Seam for the external question-answering service."""

from __future__ import annotations

import uuid
from typing import Any, Callable, Dict, Optional, Protocol

from .errors import InvalidQueryError
from .model import ProjectContext


class QuestionAnswerer(Protocol):
	def ask(self, query: str, context: ProjectContext) -> str:
		...


def build_query_payload(
	query: str,
	context: Optional[ProjectContext],
	conversation_id: Optional[str] = None,
	user: Optional[str] = None,
) -> Dict[str, Any]:
	"""Request body for a blocking query carrying the serialized project context."""
	if not query or not query.strip():
		raise InvalidQueryError("Query must not be empty")
	return {
		"inputs": {
			"project_context": context.model_dump_json(by_alias=True) if context is not None else "",
		},
		"query": query,
		"response_mode": "blocking",
		"conversation_id": conversation_id or str(uuid.uuid4()),
		"user": user or f"projctx-{uuid.uuid4()}",
	}


class PayloadAnswerer:
	"""QuestionAnswerer that sends a query payload through a transport callable.

	`send` receives the dict from build_query_payload and returns the answer
	text, so an HTTP client (or a fake in tests) plugs in without this package
	owning the network call.
	"""

	def __init__(self, send: Callable[[Dict[str, Any]], str]) -> None:
		self.send = send

	def ask(self, query: str, context: ProjectContext) -> str:
		return self.send(build_query_payload(query, context))
