# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Command-line front-end: parse MIB files and summarize them.

Exit status is 0 when every file parses and 1 otherwise. With --json, a
single JSON document (files + diagnostics + exit_code) is printed to stdout;
otherwise summaries go to stdout and diagnostics to stderr.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import List

from mibparse.core.diagnostics import Diagnostic
from mibparse.core.span import Span
from mibparse.parser import parse_file
from mibparse.parser.errors import ParseError
from mibparse.parser.model import Assignment, Document, IntegerValue, RawValue, StringValue
from mibparse.parser.options import ParseOptions

logger = logging.getLogger(__name__)

_LEVELS = {
	"debug": logging.DEBUG,
	"info": logging.INFO,
	"warn": logging.WARNING,
	"warning": logging.WARNING,
	"error": logging.ERROR,
}


def _configure_logging(level_name: str | None) -> None:
	"""Configure the `mibparse` logger from --log-level or MIBPARSE_LOG_LEVEL."""
	level_name = (level_name or os.getenv("MIBPARSE_LOG_LEVEL", "warning")).lower()
	level = _LEVELS.get(level_name, logging.WARNING)
	root = logging.getLogger("mibparse")
	root.setLevel(level)
	if not root.handlers:
		handler = logging.StreamHandler()
		handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
		root.addHandler(handler)
		root.propagate = False


def _value_to_json(assignment: Assignment):
	value = assignment.value
	if value is None:
		return None
	if isinstance(value, IntegerValue):
		return {"kind": "integer", "value": value.value, "radix": value.radix}
	if isinstance(value, StringValue):
		return {"kind": "string", "value": value.value}
	if isinstance(value, RawValue):
		return {"kind": "raw", "text": value.text}
	raise TypeError(f"unexpected value {value!r}")


def _document_to_json(doc: Document, source: Path) -> dict:
	return {
		"file": str(source),
		"modules": [
			{
				"name": module.name,
				"assignments": [
					{
						"name": a.name,
						"type": a.type.rule,
						"value": _value_to_json(a),
					}
					for a in module.assignments
				],
			}
			for module in doc.modules
		],
	}


def _describe_value(assignment: Assignment) -> str:
	value = assignment.value
	if isinstance(value, IntegerValue):
		return str(value.value)
	if isinstance(value, StringValue):
		return json.dumps(value.value)
	if isinstance(value, RawValue):
		return " ".join(value.text.split())
	return "-"


def _print_summary(doc: Document, source: Path) -> None:
	for module in doc.modules:
		print(f"{source}: {module.name}: {len(module.assignments)} assignments")
		for a in module.assignments:
			kind = "type" if a.is_type_assignment else "value"
			print(f"  {a.name} [{kind}] {a.type.rule} = {_describe_value(a)}")


def main(argv: list[str] | None = None) -> int:
	parser = argparse.ArgumentParser(prog="mibparse", description="Parse SNMP MIB modules")
	parser.add_argument("source", type=Path, nargs="+", help="Path(s) to MIB source file(s)")
	parser.add_argument(
		"--pretty-print",
		dest="pretty_print",
		action="store_true",
		default=None,
		help="Dump the generic parse tree to stderr before reduction (or set MIBPARSE_PRETTY_PRINT)",
	)
	parser.add_argument(
		"--json",
		action="store_true",
		help="Emit parsed modules and diagnostics as JSON",
	)
	parser.add_argument(
		"--log-level",
		choices=sorted(_LEVELS),
		help="Logging level for the mibparse logger (or set MIBPARSE_LOG_LEVEL)",
	)
	args = parser.parse_args(argv)
	_configure_logging(args.log_level)

	options = ParseOptions.from_env()
	if args.pretty_print is not None:
		options = ParseOptions(pretty_print=args.pretty_print)

	files: List[dict] = []
	diagnostics: List[Diagnostic] = []
	for source in args.source:
		try:
			doc = parse_file(source, options)
		except ParseError as err:
			diagnostics.append(err.to_diagnostic())
			continue
		except (OSError, UnicodeDecodeError) as err:
			diagnostics.append(
				Diagnostic(message=f"cannot read source: {err}", phase="io", span=Span(file=str(source)))
			)
			continue
		logger.info("%s: %d module(s)", source, len(doc.modules))
		if args.json:
			files.append(_document_to_json(doc, source))
		else:
			_print_summary(doc, source)

	exit_code = 1 if any(d.severity == "error" for d in diagnostics) else 0
	if args.json:
		payload = {
			"exit_code": exit_code,
			"files": files,
			"diagnostics": [d.to_json() for d in diagnostics],
		}
		print(json.dumps(payload))
	else:
		for diag in diagnostics:
			print(diag.render(), file=sys.stderr)
	return exit_code


__all__ = ["main"]
