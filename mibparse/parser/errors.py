# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Parse errors raised by the MIB front-end.

All errors derive from `ParseError`, a `ValueError` subclass, and carry a
best-effort `span` so callers can convert them into a structured
`Diagnostic` instead of crashing. Parsing is fail-fast: the first error from
either the recognizer or a literal decoder aborts the whole parse.
"""

from __future__ import annotations

from typing import Iterable, Optional

from mibparse.core.diagnostics import Diagnostic
from mibparse.core.span import Span


class ParseError(ValueError):
	"""Base class for every error `parse()` can raise."""

	code = "E-PARSE"
	phase = "parse"

	def __init__(self, message: str, *, span: Optional[Span] = None) -> None:
		super().__init__(message)
		self.message = message
		self.span = span if span is not None else Span()

	def notes(self) -> list[str]:
		return []

	def to_diagnostic(self) -> Diagnostic:
		return Diagnostic(
			message=self.message,
			code=self.code,
			phase=self.phase,
			severity="error",
			span=self.span,
			notes=self.notes(),
		)

	def __str__(self) -> str:
		return f"{self.span}: {self.message}"


class MibSyntaxError(ParseError):
	"""
	Input does not match the MIB grammar.

	`expected` lists the terminals the grammar would have accepted at the
	offending position (rendered as their literal text where they have one).
	The originating lark exception is chained as `__cause__`.
	"""

	code = "E-SYNTAX"
	phase = "syntax"

	def __init__(self, message: str, *, span: Optional[Span] = None, expected: Iterable[str] = ()) -> None:
		super().__init__(message, span=span)
		self.expected = tuple(sorted(set(expected)))

	def notes(self) -> list[str]:
		if not self.expected:
			return []
		return [f"expected one of: {', '.join(self.expected)}"]


class LiteralDecodeError(ParseError):
	"""
	A number/hex/binary literal has digits invalid for its radix or does not
	fit in 64 unsigned bits. The conversion failure is chained as `__cause__`.
	"""

	code = "E-LITERAL"
	phase = "literal"

	def __init__(self, message: str, *, text: str, span: Optional[Span] = None) -> None:
		super().__init__(message, span=span)
		self.text = text


class ReductionError(ParseError):
	"""The reducer met a rule or child shape it has no case for."""

	code = "E-REDUCE"
	phase = "reduce"


__all__ = ["ParseError", "MibSyntaxError", "LiteralDecodeError", "ReductionError"]
