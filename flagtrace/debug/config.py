"""
FlagTrace Debug Flag File Parsing

The flag file format is deliberately simple:

    flag1=1,flag2=3
    flag3=true,flag4=false

Records are separated by newlines and/or commas. Values are `true`, `false`
or a base-10 integer; anything that does not start with digits reads as 0.
"""
import re
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from flagtrace.src.core.errors import MalformedConfigEntry
from flagtrace.src.core.models import RawFlagValue

TOKEN_SEPARATOR = re.compile(r"[\n,]+")
LEADING_INT = re.compile(r"\s*([+-]?\d+)")

MALFORMED_POLICIES = ("raise", "skip")


def parse_int_lenient(raw: str) -> int:
    """Leading sign and digits, ignoring trailing junk. No digits -> 0."""
    match = LEADING_INT.match(raw)
    return int(match.group(1)) if match else 0


def parse_flag_value(raw: str) -> RawFlagValue:
    if raw == "true":
        return True
    if raw == "false":
        return False
    return parse_int_lenient(raw)


def iter_flag_tokens(text: str) -> Iterator[str]:
    for token in TOKEN_SEPARATOR.split(text.strip()):
        token = token.strip()
        if token:
            yield token


def parse_flag_text(
    text: str,
    on_malformed: str = "raise",
    path: Optional[Path] = None,
) -> Tuple[List[Tuple[str, RawFlagValue]], List[str]]:
    """
    Parse flag file text into (key, value) pairs.

    Args:
        text: Raw file contents
        on_malformed: "raise" to fail on a token without '=', "skip" to collect it
        path: Source file, only used in error messages

    Returns:
        (pairs, skipped) where skipped holds the malformed tokens
    """
    if on_malformed not in MALFORMED_POLICIES:
        raise ValueError(f"on_malformed must be one of {MALFORMED_POLICIES}, got {on_malformed!r}")

    pairs = []
    skipped = []
    for token in iter_flag_tokens(text):
        if "=" not in token:
            if on_malformed == "raise":
                raise MalformedConfigEntry(token, path)
            skipped.append(token)
            continue
        key, raw_value = token.split("=", 1)
        pairs.append((key.strip(), parse_flag_value(raw_value.strip())))
    return pairs, skipped
