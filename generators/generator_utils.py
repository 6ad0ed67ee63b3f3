"""
Shared utilities for the TypeScript generators.
Handles display-name derivation, the @Translate directive and debug output.
"""
import re
import sys
from typing import Optional

# @Translate: <token>, first occurrence only, case-sensitive, ASCII word characters
TRANSLATE_DIRECTIVE = re.compile(r'@Translate: (\w+)', re.ASCII)

_WORD_START = re.compile(r'(?:^|\s|_)[a-z]')


def format_enum_name(name: str) -> str:
    """
    Converts an enum member name to a human-readable label, e.g. "READY_TO_START" => "Ready To Start".
    """
    name = name.lower()
    name = _WORD_START.sub(lambda m: m.group(0).upper(), name)
    return name.replace('_', ' ')


def extract_translate_directive(comment: Optional[str]) -> Optional[str]:
    """Return the token of the first '@Translate: <token>' in the comment, or None."""
    if not comment:
        return None
    match = TRANSLATE_DIRECTIVE.search(comment)
    if match:
        return match.group(1)
    return None


def debug_print(verbose: bool, message: str) -> None:
    if verbose:
        print(f"[DEBUG] {message}", file=sys.stderr)
