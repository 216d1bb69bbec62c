# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Grammar recognizer: matches MIB text against `grammar.lark`.

The MIB grammar has optional import/export sections and macro bodies whose
clauses are mostly optional, so it is run with Lark's Earley parser over the
basic lexer rather than LALR. Every rule may be used as a start rule, which
lets callers and tests recognize fragments (a single assignment, a quoted
string, ...).

A standalone `identifier` fragment is matched by its own small parser: it
accepts any letter-led run of letters, digits, `-` and `_` unchanged,
keyword text and `--` included. Inside larger rules keywords stay reserved
and `--` opens a comment.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from lark import Lark, Tree
from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken
from lark.lexer import PatternStr

from mibparse.core.span import Span

from .errors import MibSyntaxError

logger = logging.getLogger(__name__)

_GRAMMAR_PATH = Path(__file__).with_name("grammar.lark")
_GRAMMAR_SRC = _GRAMMAR_PATH.read_text()

# Named rules of grammar.lark, in grammar order.
RULES = (
	"document",
	"module_definition",
	"module_identifier",
	"module_body",
	"export_list",
	"import_list",
	"import_clause",
	"symbol_list",
	"symbol",
	"macro_keyword",
	"assignment_list",
	"assignment",
	"value_assignment",
	"type_assignment",
	"some_type",
	"integer_type",
	"octet_string_type",
	"object_identifier_type",
	"bits_type",
	"null_type",
	"defined_type",
	"sequence_type",
	"sequence_of_type",
	"choice_type",
	"named_type",
	"tagged_type",
	"tag",
	"tag_class",
	"tag_mode",
	"named_number_list",
	"named_number",
	"signed_number",
	"constraint_list",
	"constraint",
	"size_constraint",
	"range_constraint",
	"range_value",
	"module_identity_type",
	"object_identity_type",
	"object_type_type",
	"notification_type_type",
	"trap_type_type",
	"textual_convention_type",
	"object_group_type",
	"notification_group_type",
	"module_compliance_type",
	"agent_capabilities_type",
	"snmp_update_part",
	"snmp_organization_part",
	"snmp_contact_part",
	"snmp_description_part",
	"snmp_revision_part",
	"snmp_reference_part",
	"snmp_display_part",
	"snmp_units_part",
	"snmp_product_release_part",
	"snmp_status_part",
	"snmp_access_part",
	"access_keyword",
	"snmp_syntax_part",
	"snmp_write_syntax_part",
	"snmp_index_part",
	"index_item",
	"snmp_defval_part",
	"snmp_objects_part",
	"snmp_notifications_part",
	"snmp_enterprise_part",
	"snmp_variables_part",
	"snmp_module_part",
	"module_reference",
	"snmp_mandatory_part",
	"compliance_part",
	"compliance_group",
	"compliance_object",
	"snmp_supports_part",
	"snmp_variation_part",
	"snmp_creation_part",
	"identifier_list",
	"value",
	"object_identifier_value",
	"oid_component",
	"bits_value",
	"negative_number",
	"identifier",
	"number_string",
	"hex_string",
	"binary_string",
	"quoted_string",
)

# Leaf rules whose reduction decodes the matched token.
LITERAL_RULES = frozenset({"number_string", "hex_string", "binary_string", "quoted_string"})

_PARSER = Lark(
	_GRAMMAR_SRC,
	parser="earley",
	lexer="basic",
	start=list(RULES),
	propagate_positions=True,
	maybe_placeholders=False,
)

_IDENTIFIER_GRAMMAR = r"""
identifier: IDENTIFIER
IDENTIFIER: /[A-Za-z][A-Za-z0-9_-]*/
%import common.WS
%ignore WS
"""

_IDENTIFIER_PARSER = Lark(
	_IDENTIFIER_GRAMMAR,
	parser="lalr",
	lexer="basic",
	start="identifier",
	propagate_positions=True,
	maybe_placeholders=False,
)


def recognize(text: str, start: str = "document") -> Tree:
	"""
	Match `text` against the grammar starting at rule `start`.

	Returns a tree whose root is `start` and which covers the whole input, or
	raises `MibSyntaxError`. No partial tree is ever returned.
	"""
	if start not in RULES:
		raise ValueError(f"unknown start rule '{start}'")
	logger.debug("recognizing %d characters from rule %s", len(text), start)
	parser = _IDENTIFIER_PARSER if start == "identifier" else _PARSER
	try:
		return parser.parse(text, start=start)
	except UnexpectedInput as err:
		raise _syntax_error(err, text) from err


def _syntax_error(err: UnexpectedInput, text: str) -> MibSyntaxError:
	# The LALR fragment parser reports end of input as a `$END` token.
	at_end = isinstance(err, UnexpectedToken) and err.token.type == "$END"
	if isinstance(err, UnexpectedEOF) or at_end:
		span = Span.at_offset(text, len(text))
		return MibSyntaxError(
			"unexpected end of input",
			span=span,
			expected=_describe_terminals(err.expected),
		)
	pos = err.pos_in_stream
	span = Span.at_offset(text, len(text) if pos is None or pos < 0 else pos)
	if isinstance(err, UnexpectedToken):
		token = err.token
		return MibSyntaxError(
			f"unexpected {token.value!r}",
			span=span,
			expected=_describe_terminals(err.expected),
		)
	if isinstance(err, UnexpectedCharacters):
		return MibSyntaxError(
			f"unexpected character {err.char!r}",
			span=span,
			expected=_describe_terminals(err.allowed or ()),
		)
	return MibSyntaxError(str(err), span=span)


def _describe_terminals(names: Iterable[str]) -> list[str]:
	"""Terminal names as users know them: keywords/punctuation by their text."""
	described = []
	for name in names:
		if name == "$END":
			described.append("end of input")
			continue
		try:
			pattern = _PARSER.get_terminal(name).pattern
		except KeyError:
			described.append(name)
			continue
		if isinstance(pattern, PatternStr):
			described.append(f'"{pattern.value}"')
		else:
			described.append(name)
	return described


__all__ = ["LITERAL_RULES", "RULES", "recognize"]
