# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Decoders for MIB literal tokens.

Numeric literals decode to unsigned 64-bit integers. Quoted strings decode
by collapsing `""` to `"` and joining soft-wrapped lines: any blanks around a
line break are dropped and the break becomes a single `\\n`.
"""

from __future__ import annotations

import re
from typing import Optional

from mibparse.core.span import Span

from .errors import LiteralDecodeError

U64_MAX = (1 << 64) - 1

_DIGITS = {
	2: re.compile(r"[01]+"),
	10: re.compile(r"[0-9]+"),
	16: re.compile(r"[0-9A-Fa-f]+"),
}

_WRAPPED_LINE_BREAK = re.compile(r"[ \t]*\r?\n[ \t]*")


def _to_u64(digits: str, radix: int, *, text: str, span: Optional[Span]) -> int:
	# int() alone would also accept signs, underscores and surrounding blanks.
	if not digits:
		cause: Exception = ValueError("cannot parse integer from empty string")
	elif _DIGITS[radix].fullmatch(digits) is None:
		cause = ValueError("invalid digit found in string")
	else:
		value = int(digits, radix)
		if value <= U64_MAX:
			return value
		cause = OverflowError("number too large to fit in target type")
	raise LiteralDecodeError(
		f"invalid base-{radix} literal {text!r}: {cause}",
		text=text,
		span=span,
	) from cause


def decode_number(text: str, *, span: Optional[Span] = None) -> int:
	return _to_u64(text, 10, text=text, span=span)


def decode_hex(text: str, *, span: Optional[Span] = None) -> int:
	"""`'DEADBEEF'H` -> 0xDEADBEEF (leading quote and `'H` marker stripped)."""
	return _to_u64(text[1:-2], 16, text=text, span=span)


def decode_binary(text: str, *, span: Optional[Span] = None) -> int:
	"""`'11110000'B` -> 240 (leading quote and `'B` marker stripped)."""
	return _to_u64(text[1:-2], 2, text=text, span=span)


def unescape_string(raw: str) -> str:
	"""Normalize the raw content between the quotes of a quoted string."""
	raw = raw.replace('""', '"')
	return _WRAPPED_LINE_BREAK.sub("\n", raw)


def decode_quoted_string(text: str) -> str:
	return unescape_string(text[1:-1])


def render_string(raw: str) -> str:
	"""
	One-line rendering of raw string content for diagnostics: re-quoted, with
	wrapped line breaks shown as a literal `\\n`.
	"""
	return '"' + _WRAPPED_LINE_BREAK.sub(r"\\n", raw) + '"'


__all__ = [
	"U64_MAX",
	"decode_binary",
	"decode_hex",
	"decode_number",
	"decode_quoted_string",
	"render_string",
	"unescape_string",
]
