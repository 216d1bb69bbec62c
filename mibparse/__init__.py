# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
mibparse: SNMP/SMI MIB module parser.

Parses MIB module source text into a typed model:

  text -> recognizer (Lark grammar) -> parse tree -> reducer -> Document

The public entry point is `parse`; the two stages are available separately
under `mibparse.parser` for tooling that wants the raw tree.
"""

from mibparse.parser import parse, parse_file
from mibparse.parser.errors import LiteralDecodeError, MibSyntaxError, ParseError, ReductionError
from mibparse.parser.model import (
	Assignment,
	Document,
	IntegerValue,
	Module,
	RawValue,
	StringValue,
	TypeDescriptor,
	Value,
)
from mibparse.parser.options import ParseOptions

__all__ = [
	"Assignment",
	"Document",
	"IntegerValue",
	"LiteralDecodeError",
	"MibSyntaxError",
	"Module",
	"ParseError",
	"ParseOptions",
	"RawValue",
	"ReductionError",
	"StringValue",
	"TypeDescriptor",
	"Value",
	"parse",
	"parse_file",
]
