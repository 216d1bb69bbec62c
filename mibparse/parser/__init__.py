# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
MIB front-end: recognizer + reducer.

`parse` runs both stages over already-decoded text; `parse_file` adds
UTF-8 loading for callers that start from a path. Errors from either stage
propagate as `ParseError` subclasses; there is no partial result.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from .errors import ParseError
from .model import Document
from .options import ParseOptions
from .printer import print_tree
from .recognizer import recognize
from .reducer import reduce_tree

logger = logging.getLogger(__name__)


def parse(text: str, options: Optional[ParseOptions] = None) -> Document:
	"""
	Parse MIB source text into a `Document`.

	With `options.pretty_print`, the generic parse tree is dumped once before
	reduction; this never changes the result.
	"""
	if options is None:
		options = ParseOptions()
	tree = recognize(text)
	if options.pretty_print:
		print_tree(tree, file=options.pretty_print_file or sys.stderr)
	doc = reduce_tree(tree, text)
	logger.debug(
		"parsed %d module(s), %d assignment(s)",
		len(doc.modules),
		sum(len(m.assignments) for m in doc.modules),
	)
	return doc


def parse_file(path: Path | str, options: Optional[ParseOptions] = None) -> Document:
	"""Read `path` as UTF-8 and parse it; errors carry the file name in their span."""
	path = Path(path)
	logger.debug("loading %s", path)
	source = path.read_text(encoding="utf-8")
	try:
		return parse(source, options)
	except ParseError as err:
		err.span = err.span.in_file(str(path))
		raise


__all__ = ["ParseOptions", "parse", "parse_file", "recognize", "reduce_tree"]
