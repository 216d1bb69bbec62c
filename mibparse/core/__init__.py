"""
mibparse.core: shared location and diagnostic types.

Modules:
  - span: source span attached to parse errors
  - diagnostics: presentation-neutral Diagnostic record used by the CLI
"""

__all__ = [
    "diagnostics",
    "span",
]
