import re
from typing import Callable, Optional, Sequence, Tuple, TypeVar, Union

T = TypeVar("T")

PatternLike = Union[str, re.Pattern]

# Plain digits, or digits grouped by thousands with a single separator
# (smartctl prints "1,234,567" or "1.234.567" depending on locale).
_COUNT_PATTERNS = (
    re.compile(r"\d+"),
    re.compile(r"\d{1,3}(?:,\d{3})+"),
    re.compile(r"\d{1,3}(?:\.\d{3})+"),
)


def _compile(pattern: PatternLike) -> "re.Pattern[str]":
    if isinstance(pattern, str):
        return re.compile(pattern, re.MULTILINE)
    return pattern


def extract_groups(text: str, pattern: PatternLike) -> Optional[Tuple[str, ...]]:
    """Return all capture groups of the first match of pattern in text."""
    match = _compile(pattern).search(text)
    if not match:
        return None
    return match.groups()


def extract(text: str, pattern: PatternLike) -> Optional[str]:
    """
    Return capture group 1 of the first match of pattern in text, stripped.

    String patterns are compiled with re.MULTILINE so that ^ and $ anchor to
    single lines of a tool report.
    """
    groups = extract_groups(text, pattern)
    if not groups or groups[0] is None:
        return None
    value = groups[0].strip()
    return value or None


def first_match(
    text: str,
    attempts: Sequence[Tuple[PatternLike, Callable[[str], T]]],
) -> Optional[T]:
    """
    Apply (pattern, converter) attempts in order and return the first value
    that both matches and converts.

    A converter raising ValueError makes that attempt count as a miss, so a
    garbled value never populates a field and the next attempt is tried.
    """
    for pattern, convert in attempts:
        raw = extract(text, pattern)
        if raw is None:
            continue
        try:
            return convert(raw)
        except ValueError:
            continue
    return None


def parse_count(raw: str) -> int:
    """Parse a non-negative integer that may carry thousands separators."""
    value = raw.strip()
    if not any(p.fullmatch(value) for p in _COUNT_PATTERNS):
        raise ValueError(f"not a counter value: {raw!r}")
    return int(re.sub(r"[,.]", "", value))
