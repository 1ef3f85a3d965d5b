from __future__ import annotations

import argparse
import os
import sys

import uvicorn

from project_context.analyze import ProjectAnalyzer
from project_context.config import AnalyzerSettings
from project_context.errors import RootUnavailableError
from project_context.fs_scan import scan_repository
from project_context.log import configure_logging
from project_context.structure import build_tree, render_tree


def cmd_analyze(args: argparse.Namespace) -> int:
	root = os.path.abspath(args.path)
	context = ProjectAnalyzer(settings=AnalyzerSettings.from_env()).analyze_project(root)
	if args.summary_only:
		print(context.summary)
	else:
		print(context.model_dump_json(by_alias=True, indent=2))
	return 0


def cmd_tree(args: argparse.Namespace) -> int:
	root = os.path.abspath(args.path)
	files = scan_repository(root, settings=AnalyzerSettings.from_env())
	print(render_tree(build_tree(files)), end="")
	return 0


def cmd_serve(args: argparse.Namespace) -> int:
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)
	return 0


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="projctx")
	parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
	sub = parser.add_subparsers(dest="cmd", required=True)

	pa = sub.add_parser("analyze", help="Analyze a project and print its context JSON")
	pa.add_argument("path", help="Path to project root")
	pa.add_argument("--summary-only", action="store_true", help="Print only the text summary")
	pa.set_defaults(func=cmd_analyze)

	pt = sub.add_parser("tree", help="Print the nested project tree")
	pt.add_argument("path", help="Path to project root")
	pt.set_defaults(func=cmd_tree)

	ps = sub.add_parser("serve", help="Run FastAPI server")
	ps.add_argument("--host", default="127.0.0.1")
	ps.add_argument("--port", type=int, default=8000)
	ps.add_argument("--reload", action="store_true")
	ps.set_defaults(func=cmd_serve)
	return parser


def main(argv: list[str] | None = None) -> int:
	args = build_parser().parse_args(argv)
	configure_logging(verbose=args.verbose)
	try:
		return args.func(args)
	except RootUnavailableError as exc:
		print(f"error: {exc}", file=sys.stderr)
		return 1


if __name__ == "__main__":
	sys.exit(main())
