from __future__ import annotations

import os
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from project_context.analyze import ProjectAnalyzer
from project_context.config import AnalyzerSettings
from project_context.errors import InvalidQueryError, RootUnavailableError
from project_context.fs_scan import scan_repository
from project_context.model import DirectoryNode, ProjectContext
from project_context.qa import QuestionAnswerer
from project_context.state import ContextStore
from project_context.structure import build_tree, render_tree


class AnalyzeRequest(BaseModel):
	root_path: str


class TreeResponse(BaseModel):
	tree: DirectoryNode
	text: str


class AskRequest(BaseModel):
	root_path: str
	query: str


class AskResponse(BaseModel):
	answer: str


def _resolve_root(root_path: str) -> str:
	root = os.path.abspath(root_path)
	if not os.path.isdir(root):
		raise HTTPException(status_code=400, detail=f"Invalid root_path: {root}")
	return root


def create_app(
	store: Optional[ContextStore] = None,
	answerer: Optional[QuestionAnswerer] = None,
	settings: Optional[AnalyzerSettings] = None,
) -> FastAPI:
	app = FastAPI(title="Project Context Extractor")
	app.state.store = store or ContextStore()
	app.state.answerer = answerer
	app.state.settings = settings or AnalyzerSettings.from_env()

	@app.post("/analyze", response_model=ProjectContext)
	def analyze(req: AnalyzeRequest) -> ProjectContext:
		root = _resolve_root(req.root_path)
		try:
			context = ProjectAnalyzer(settings=app.state.settings).analyze_project(root)
		except RootUnavailableError as exc:
			raise HTTPException(status_code=400, detail=str(exc))
		app.state.store.set(root, context)
		return context

	@app.get("/context", response_model=ProjectContext)
	def get_context(root_path: str) -> ProjectContext:
		context = app.state.store.get(os.path.abspath(root_path))
		if context is None:
			raise HTTPException(status_code=404, detail="No context has been computed for this root")
		return context

	@app.post("/tree", response_model=TreeResponse)
	def tree(req: AnalyzeRequest) -> TreeResponse:
		root = _resolve_root(req.root_path)
		try:
			files = scan_repository(root, settings=app.state.settings)
		except RootUnavailableError as exc:
			raise HTTPException(status_code=400, detail=str(exc))
		node = build_tree(files)
		return TreeResponse(tree=node, text=render_tree(node))

	@app.post("/ask", response_model=AskResponse)
	def ask(req: AskRequest) -> AskResponse:
		if app.state.answerer is None:
			raise HTTPException(status_code=503, detail="No question-answering service configured")
		if not req.query.strip():
			raise HTTPException(status_code=400, detail="Query must not be empty")
		context = app.state.store.get(os.path.abspath(req.root_path))
		if context is None:
			raise HTTPException(status_code=404, detail="Analyze the project before asking questions")
		try:
			answer = app.state.answerer.ask(req.query, context)
		except InvalidQueryError as exc:
			raise HTTPException(status_code=400, detail=str(exc))
		return AskResponse(answer=answer)

	return app


app = create_app()
