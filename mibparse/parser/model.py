# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Typed model produced by reducing a MIB parse tree.

Types and most value forms are deliberately opaque: a `TypeDescriptor` keeps
the identity of the matched type alternative plus its source text, and a
`RawValue` keeps the matched text of a value expression. Only literal values
(numbers, hex/binary strings, quoted strings) are decoded.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class TypeDescriptor:
	rule: str
	text: str


@dataclass(frozen=True)
class RawValue:
	text: str


@dataclass(frozen=True)
class IntegerValue:
	value: int
	radix: int = 10


@dataclass(frozen=True)
class StringValue:
	value: str


Value = Union[RawValue, IntegerValue, StringValue]


@dataclass(frozen=True)
class Assignment:
	"""A value assignment (`value` set) or a type assignment (`value` is None)."""

	name: str
	type: TypeDescriptor
	value: Optional[Value] = None

	@property
	def is_type_assignment(self) -> bool:
		return self.value is None


@dataclass(frozen=True)
class Module:
	name: str
	assignments: Tuple[Assignment, ...] = ()

	def assignment(self, name: str) -> Optional[Assignment]:
		"""First assignment bound to `name`, in declaration order."""
		return next((a for a in self.assignments if a.name == name), None)


@dataclass(frozen=True)
class Document:
	modules: Tuple[Module, ...] = ()


__all__ = [
	"Assignment",
	"Document",
	"IntegerValue",
	"Module",
	"RawValue",
	"StringValue",
	"TypeDescriptor",
	"Value",
]
