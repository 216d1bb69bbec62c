# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional, TextIO

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ParseOptions:
	"""
	Options for a single `parse()` call.

	`pretty_print` dumps the generic parse tree before reduction to
	`pretty_print_file` (standard error when unset). It never changes the
	returned model or whether parsing succeeds.
	"""

	pretty_print: bool = False
	pretty_print_file: Optional[TextIO] = None

	@classmethod
	def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ParseOptions":
		"""Options from `MIBPARSE_PRETTY_PRINT` (default: os.environ)."""
		env = os.environ if environ is None else environ
		flag = env.get("MIBPARSE_PRETTY_PRINT", "").strip().lower()
		return cls(pretty_print=flag in _TRUE_VALUES)


__all__ = ["ParseOptions"]
