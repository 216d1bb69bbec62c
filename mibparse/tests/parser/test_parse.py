# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import io
from pathlib import Path

import pytest

from mibparse import (
	IntegerValue,
	LiteralDecodeError,
	MibSyntaxError,
	ParseOptions,
	RawValue,
	StringValue,
	parse,
	parse_file,
)


def test_synology_disk_mib(synology_mib: str) -> None:
	doc = parse(synology_mib)
	assert len(doc.modules) == 1
	module = doc.modules[0]
	assert module.name == "SYNOLOGY-DISK-MIB"
	assert [a.name for a in module.assignments] == [
		"synoDisk",
		"synology",
		"diskTable",
		"diskEntry",
		"DiskEntry",
		"diskIndex",
		"diskID",
		"diskModel",
		"diskStatus",
		"synoDiskConformance",
		"synoDiskCompliances",
		"synoDiskGroups",
		"synoDiskStdCompliance",
		"synoDiskGroup",
		"synoDiskOptionalGroup",
	]

	syno_disk = module.assignment("synoDisk")
	assert syno_disk.type.rule == "module_identity_type"
	assert syno_disk.value == RawValue("{ synology 2 }")

	synology = module.assignment("synology")
	assert synology.type.rule == "object_identifier_type"
	assert synology.type.text == "OBJECT IDENTIFIER"
	assert synology.value == RawValue("{ enterprises 6574 }")

	entry = module.assignment("DiskEntry")
	assert entry.is_type_assignment
	assert entry.type.rule == "sequence_type"

	status = module.assignment("diskStatus")
	assert status.type.rule == "object_type_type"
	assert "DEFVAL      { normal }" in status.type.text
	assert status.value == RawValue("{ diskEntry 5 }")

	assert module.assignment("synoDiskStdCompliance").type.rule == "module_compliance_type"
	assert module.assignment("synoDiskGroup").type.rule == "object_group_type"
	assert module.assignment("nope") is None


def test_example_types_mib(example_types_mib: str) -> None:
	(module,) = parse(example_types_mib).modules
	assert module.name == (
		"EXAMPLE-TYPES-MIB={ iso org(3) dod(6) internet(1) private(4) enterprises(1) 99999 }"
	)
	assert len(module.assignments) == 20

	rules = {a.name: a.type.rule for a in module.assignments}
	assert rules["exampleIdentity"] == "object_identity_type"
	assert rules["DisplayString"] == "textual_convention_type"
	assert rules["MacAddress"] == "octet_string_type"
	assert rules["Gauge"] == "tagged_type"
	assert rules["NetworkAddress"] == "choice_type"
	assert rules["Flags"] == "bits_type"
	assert rules["Signed"] == "integer_type"
	assert rules["exampleNotification"] == "notification_type_type"
	assert rules["exampleNotifications"] == "notification_group_type"
	assert rules["exampleTrap"] == "trap_type_type"
	assert rules["exampleCapabilities"] == "agent_capabilities_type"

	types = [a.name for a in module.assignments if a.is_type_assignment]
	assert types == ["DisplayString", "MacAddress", "Gauge", "NetworkAddress", "Flags", "Signed"]

	assert module.assignment("exampleAnswer").value == IntegerValue(42)
	assert module.assignment("exampleMask").value == IntegerValue(0xFF00, radix=16)
	assert module.assignment("exampleBits").value == IntegerValue(10, radix=2)
	assert module.assignment("exampleGreeting").value == StringValue('say "hi"')
	assert module.assignment("exampleOffset").value == RawValue("-7")
	assert module.assignment("exampleTrap").value == IntegerValue(6)
	assert module.assignment("exampleFlags").value == RawValue("{ exampleRoot 3 }")


def test_multiple_modules_keep_order() -> None:
	doc = parse(
		"""A-MIB DEFINITIONS ::= BEGIN
		a OBJECT IDENTIFIER ::= { iso 1 }
		END
		B-MIB DEFINITIONS ::= BEGIN
		END"""
	)
	assert [m.name for m in doc.modules] == ["A-MIB", "B-MIB"]
	assert doc.modules[1].assignments == ()


def test_overflowing_value_aborts_parse() -> None:
	text = "A-MIB DEFINITIONS ::= BEGIN\nbig INTEGER ::= 18446744073709551616\nEND\n"
	with pytest.raises(LiteralDecodeError) as excinfo:
		parse(text)
	err = excinfo.value
	assert err.span.line == 2
	assert err.span.column == 17
	assert isinstance(err.__cause__, OverflowError)
	assert err.to_diagnostic().phase == "literal"


def test_largest_u64_value_is_accepted() -> None:
	text = "A-MIB DEFINITIONS ::= BEGIN\nbig Counter64 ::= 18446744073709551615\nEND\n"
	(module,) = parse(text).modules
	assert module.assignments[0].value == IntegerValue(2**64 - 1)


def test_syntax_error_has_no_partial_result() -> None:
	with pytest.raises(MibSyntaxError) as excinfo:
		parse("A-MIB DEFINITIONS ::= BEGIN\nx OBJECT IDENTIFIER ::=\nEND\n")
	assert excinfo.value.span.line == 3


def test_pretty_print_does_not_change_result(synology_mib: str) -> None:
	out = io.StringIO()
	doc = parse(synology_mib, ParseOptions(pretty_print=True, pretty_print_file=out))
	assert doc == parse(synology_mib)
	dump = out.getvalue()
	assert dump.startswith("<<document>>\n  <<module_definition>>\n    <<module_identifier>>\n      SYNOLOGY-DISK-MIB\n")
	assert '"Second draft."' in dump


def test_pretty_print_defaults_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
	parse("A-MIB DEFINITIONS ::= BEGIN END", ParseOptions(pretty_print=True))
	captured = capsys.readouterr()
	assert captured.out == ""
	assert captured.err.startswith("<<document>>")


def test_no_dump_without_pretty_print(capsys: pytest.CaptureFixture[str]) -> None:
	parse("A-MIB DEFINITIONS ::= BEGIN END")
	captured = capsys.readouterr()
	assert captured.err == ""


def test_parse_file(synology_mib_path: Path) -> None:
	(module,) = parse_file(synology_mib_path).modules
	assert module.name == "SYNOLOGY-DISK-MIB"


def test_parse_file_errors_carry_file_name(tmp_path: Path) -> None:
	path = tmp_path / "BROKEN-MIB.mib"
	path.write_text("BROKEN-MIB DEFINITIONS ::= BEGIN\n@\nEND\n", encoding="utf-8")
	with pytest.raises(MibSyntaxError) as excinfo:
		parse_file(str(path))
	err = excinfo.value
	assert err.span.file == str(path)
	assert str(err).startswith(f"{path}:2:1: ")


def test_parse_file_missing(tmp_path: Path) -> None:
	with pytest.raises(OSError):
		parse_file(tmp_path / "missing.mib")


@pytest.mark.parametrize(
	("value", "expected"),
	[("1", True), ("true", True), (" Yes ", True), ("on", True), ("0", False), ("", False), ("nope", False)],
)
def test_options_from_env(value: str, expected: bool) -> None:
	assert ParseOptions.from_env({"MIBPARSE_PRETTY_PRINT": value}).pretty_print is expected


def test_options_from_process_env(monkeypatch: pytest.MonkeyPatch) -> None:
	monkeypatch.delenv("MIBPARSE_PRETTY_PRINT", raising=False)
	assert ParseOptions.from_env() == ParseOptions()
	monkeypatch.setenv("MIBPARSE_PRETTY_PRINT", "1")
	assert ParseOptions.from_env().pretty_print
