# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Lightweight source span representation used by parse errors and diagnostics.

A Span carries optional file/line/column info plus the character offsets into
the parsed text. Lark tokens and tree metadata expose the same attribute
names, so both can be turned into a Span with `Span.from_loc`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Span:
	"""Represents a source span (best-effort file/line/column plus offsets)."""

	file: Optional[str] = None
	line: Optional[int] = None
	column: Optional[int] = None
	end_line: Optional[int] = None
	end_column: Optional[int] = None
	position: Optional[int] = None
	end_position: Optional[int] = None

	@classmethod
	def from_loc(cls, loc: Any) -> "Span":
		"""
		Construct a Span from a lark `Token` or tree `Meta`.

		If `loc` is already a Span, it is returned unchanged. Metadata of an
		empty rule carries no positions and yields an unknown Span.
		"""
		if loc is None:
			return cls()
		if isinstance(loc, cls):
			return loc
		if getattr(loc, "empty", False):
			return cls()
		return cls(
			line=getattr(loc, "line", None),
			column=getattr(loc, "column", None),
			end_line=getattr(loc, "end_line", None),
			end_column=getattr(loc, "end_column", None),
			position=getattr(loc, "start_pos", None),
			end_position=getattr(loc, "end_pos", None),
		)

	@classmethod
	def at_offset(cls, text: str, offset: int) -> "Span":
		"""Point span for a character offset in `text` (1-based line/column)."""
		offset = max(0, min(offset, len(text)))
		line = text.count("\n", 0, offset) + 1
		column = offset - (text.rfind("\n", 0, offset) + 1) + 1
		return cls(line=line, column=column, position=offset, end_position=offset)

	def in_file(self, file: Optional[str]) -> "Span":
		return Span(
			file=file,
			line=self.line,
			column=self.column,
			end_line=self.end_line,
			end_column=self.end_column,
			position=self.position,
			end_position=self.end_position,
		)

	def __str__(self) -> str:
		file = self.file or "<input>"
		line = "?" if self.line is None else self.line
		column = "?" if self.column is None else self.column
		return f"{file}:{line}:{column}"


__all__ = ["Span"]
