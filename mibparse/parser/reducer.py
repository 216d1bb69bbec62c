# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Tree reducer: turns a recognized MIB parse tree into the typed model.

There is exactly one reduction per grammar rule (a method named after the
rule). Composite reductions match on the ordered tuple of their children's
rule tags and reduce only the children whose structure they need; opaque
rules (types, import/export sections, macro clauses) reduce to their matched
source text or rule identity without descending.
"""

from __future__ import annotations

from typing import Any, List, Tuple

from lark import Token, Tree

from mibparse.core.span import Span

from . import literals
from .errors import ReductionError
from .model import Assignment, Document, IntegerValue, Module, RawValue, StringValue, TypeDescriptor, Value
from .recognizer import LITERAL_RULES, RULES

_MODULE_BODY_SHAPES = {
	("assignment_list",),
	("export_list", "assignment_list"),
	("import_list", "assignment_list"),
	("export_list", "import_list", "assignment_list"),
}

_RADIX = {
	"number_string": 10,
	"hex_string": 16,
	"binary_string": 2,
}


class MibReducer:
	"""Reduces parse trees of one source `text` (needed for raw spans)."""

	def __init__(self, text: str) -> None:
		self._text = text

	def reduce(self, node: Tree) -> Any:
		rule = _name(node)
		reduction = getattr(self, rule, None) if rule in RULES else None
		if reduction is None:
			raise ReductionError(f"no reduction for rule '{rule}'", span=_span(node))
		return reduction(node)

	# Module structure

	def document(self, node: Tree) -> Document:
		shape = _shape(node)
		if not shape or any(kind != "module_definition" for kind in shape):
			raise _mismatch(node)
		return Document(modules=tuple(self.reduce(child) for child in _subtrees(node)))

	def module_definition(self, node: Tree) -> Module:
		if _shape(node) != ("module_identifier", "module_body"):
			raise _mismatch(node)
		ident, body = _subtrees(node)
		return Module(name=self.reduce(ident), assignments=self.reduce(body))

	def module_identifier(self, node: Tree) -> str:
		shape = _shape(node)
		children = _subtrees(node)
		if shape == ("identifier",):
			return self.reduce(children[0])
		if shape == ("identifier", "object_identifier_value"):
			return f"{self.reduce(children[0])}={self.reduce(children[1])}"
		raise _mismatch(node)

	def module_body(self, node: Tree) -> Tuple[Assignment, ...]:
		if _shape(node) not in _MODULE_BODY_SHAPES:
			raise _mismatch(node)
		# Export/import sections reduce to their rule identity and are dropped.
		reduced = [self.reduce(child) for child in _subtrees(node)]
		return reduced[-1]

	def export_list(self, node: Tree) -> str:
		return _name(node)

	def import_list(self, node: Tree) -> str:
		return _name(node)

	def assignment_list(self, node: Tree) -> Tuple[Assignment, ...]:
		if any(kind != "assignment" for kind in _shape(node)):
			raise _mismatch(node)
		return tuple(self.reduce(child) for child in _subtrees(node))

	def assignment(self, node: Tree) -> Assignment:
		if _shape(node) not in {("value_assignment",), ("type_assignment",)}:
			raise _mismatch(node)
		return self.reduce(_subtrees(node)[0])

	def value_assignment(self, node: Tree) -> Assignment:
		if _shape(node) != ("identifier", "some_type", "value"):
			raise _mismatch(node)
		ident, type_node, value_node = _subtrees(node)
		return Assignment(
			name=self.reduce(ident),
			type=self.reduce(type_node),
			value=self.reduce(value_node),
		)

	def type_assignment(self, node: Tree) -> Assignment:
		if _shape(node) != ("identifier", "some_type"):
			raise _mismatch(node)
		ident, type_node = _subtrees(node)
		return Assignment(name=self.reduce(ident), type=self.reduce(type_node), value=None)

	# Types and values

	def some_type(self, node: Tree) -> TypeDescriptor:
		shape = _shape(node)
		if len(shape) != 1:
			raise _mismatch(node)
		return TypeDescriptor(rule=shape[0], text=self._source(node))

	def value(self, node: Tree) -> Value:
		shape = _shape(node)
		if len(shape) != 1:
			raise _mismatch(node)
		kind = shape[0]
		if kind not in LITERAL_RULES:
			return RawValue(self._source(node))
		decoded = self.reduce(_subtrees(node)[0])
		if kind == "quoted_string":
			return StringValue(decoded)
		return IntegerValue(decoded, radix=_RADIX[kind])

	def object_identifier_value(self, node: Tree) -> str:
		return self._source(node)

	# Literal leaves

	def identifier(self, node: Tree) -> str:
		return _token(node).value

	def number_string(self, node: Tree) -> int:
		tok = _token(node)
		return literals.decode_number(tok.value, span=Span.from_loc(tok))

	def hex_string(self, node: Tree) -> int:
		tok = _token(node)
		return literals.decode_hex(tok.value, span=Span.from_loc(tok))

	def binary_string(self, node: Tree) -> int:
		tok = _token(node)
		return literals.decode_binary(tok.value, span=Span.from_loc(tok))

	def quoted_string(self, node: Tree) -> str:
		return literals.decode_quoted_string(_token(node).value)

	# Opaque rules: kept as matched source text, never decomposed.

	def _opaque(self, node: Tree) -> str:
		return self._source(node)

	import_clause = symbol_list = symbol = macro_keyword = _opaque
	integer_type = octet_string_type = object_identifier_type = bits_type = null_type = _opaque
	defined_type = sequence_type = sequence_of_type = choice_type = named_type = _opaque
	tagged_type = tag = tag_class = tag_mode = _opaque
	named_number_list = named_number = signed_number = _opaque
	constraint_list = constraint = size_constraint = range_constraint = range_value = _opaque
	module_identity_type = object_identity_type = object_type_type = _opaque
	notification_type_type = trap_type_type = textual_convention_type = _opaque
	object_group_type = notification_group_type = module_compliance_type = agent_capabilities_type = _opaque
	snmp_update_part = snmp_organization_part = snmp_contact_part = snmp_description_part = _opaque
	snmp_revision_part = snmp_reference_part = snmp_display_part = snmp_units_part = _opaque
	snmp_product_release_part = snmp_status_part = snmp_access_part = access_keyword = _opaque
	snmp_syntax_part = snmp_write_syntax_part = snmp_index_part = index_item = snmp_defval_part = _opaque
	snmp_objects_part = snmp_notifications_part = snmp_enterprise_part = snmp_variables_part = _opaque
	snmp_module_part = module_reference = snmp_mandatory_part = _opaque
	compliance_part = compliance_group = compliance_object = _opaque
	snmp_supports_part = snmp_variation_part = snmp_creation_part = identifier_list = _opaque
	oid_component = bits_value = negative_number = _opaque

	def _source(self, node: Tree) -> str:
		meta = node.meta
		if meta.empty:
			return ""
		return self._text[meta.start_pos:meta.end_pos]


def reduce_tree(tree: Tree, text: str) -> Any:
	"""Reduce `tree` (recognized from `text`) with the reduction for its root rule."""
	return MibReducer(text).reduce(tree)


def _subtrees(node: Tree) -> List[Tree]:
	return [child for child in node.children if isinstance(child, Tree)]


def _shape(node: Tree) -> Tuple[str, ...]:
	return tuple(_name(child) for child in _subtrees(node))


def _token(node: Tree) -> Token:
	tok = next((c for c in node.children if isinstance(c, Token)), None)
	if tok is None:
		raise ReductionError(f"{_name(node)} node missing token child", span=_span(node))
	return tok


def _mismatch(node: Tree) -> ReductionError:
	return ReductionError(
		f"unexpected children for rule '{_name(node)}': {_shape(node)}",
		span=_span(node),
	)


def _span(node: Tree) -> Span:
	return Span.from_loc(getattr(node, "meta", None))


def _name(node: Tree | Token) -> str:
	if isinstance(node, Tree):
		data = node.data
		if isinstance(data, Token):
			return data.value
		return data
	if isinstance(node, Token):
		return node.type
	return str(node)


__all__ = ["MibReducer", "reduce_tree"]
