# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Readable dump of a generic parse tree, mainly for debug purposes.

One node per line, children indented two spaces per level. Identifier and
number leaves print their text, quoted strings print their content on one
line; every other node prints as `<<rule_name>>`.
"""

from __future__ import annotations

import sys
from typing import Iterator, TextIO

from lark import Token, Tree

from .literals import render_string


def print_tree(tree: Tree, file: TextIO | None = None) -> None:
	if file is None:
		file = sys.stderr
	for line in _lines(tree, 0):
		print(line, file=file)


def format_tree(tree: Tree) -> str:
	return "\n".join(_lines(tree, 0)) + "\n"


def _lines(node: Tree, level: int) -> Iterator[str]:
	yield " " * (level * 2) + _describe(node)
	for child in node.children:
		if isinstance(child, Tree):
			yield from _lines(child, level + 1)


def _describe(node: Tree) -> str:
	rule = node.data.value if isinstance(node.data, Token) else node.data
	tok = next((c for c in node.children if isinstance(c, Token)), None)
	if tok is not None:
		if rule in ("identifier", "number_string"):
			return tok.value
		if rule == "quoted_string":
			return render_string(tok.value[1:-1])
	return f"<<{rule}>>"


__all__ = ["format_tree", "print_tree"]
