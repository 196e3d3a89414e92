"""
Splitting of version strings into comparable segments.

A version string is lowercased and split on '=', '.' and '_' into tokens.
Each token contributes exactly two segments: a qualifier half followed by a
numeric half. Either half may be the default segment, rank 0 with an empty
label, which is also what a shorter version is padded with when compared.
"""
import logging
import re

from dataclasses import dataclass
from typing import List, Tuple

log = logging.getLogger(__name__)

SEPARATORS = '=._'
_separator_re = re.compile(f"[{re.escape(SEPARATORS)}]")

QUALIFIER_RANKS = {
    'snapshot': -5,
    'alpha': -4,
    'beta': -3,
    'rc': -2,
    'cr': -2,
}
UNKNOWN_QUALIFIER_RANK = -1

# Numeric segments are bounded by a signed 64-bit integer
MAX_NUMBER = 2 ** 63 - 1


class NumericOverflow(ValueError):
    pass


@dataclass(frozen=True, order=True)
class Segment:
    """
    One comparable unit of a version. Segments order by rank first and by
    label only when ranks tie.
    """

    rank: int = 0
    label: str = ''

    @classmethod
    def number(cls, value: int) -> 'Segment':
        return cls(rank=value)

    @classmethod
    def qualifier(cls, text: str) -> 'Segment':
        return cls(rank=qualifier_rank(text), label=text)


DEFAULT = Segment()


def qualifier_rank(text: str) -> int:
    return QUALIFIER_RANKS.get(text, UNKNOWN_QUALIFIER_RANK)


def _is_digit(char: str) -> bool:
    return '0' <= char <= '9'


def parse_number(digits: str) -> Segment:
    significant = digits.lstrip("0") or "0"
    # int() refuses very long digit strings, so check the length first
    if len(significant) > len(str(MAX_NUMBER)) or int(significant) > MAX_NUMBER:
        raise NumericOverflow(
            f"Numeric segment {digits!r} does not fit in a signed 64-bit integer")
    return Segment.number(int(significant))


def parse_part(part: str) -> Tuple[Segment, Segment]:
    """
    part: A single lowercased token, e.g. "1", "beta" or "alpha3"

    A token is split into a qualifier and a numeric half only when it is an
    entirely non-digit prefix followed by a digit suffix. If digits are
    followed by anything else (e.g. "a1b2" or "0-rc") the whole token is a
    qualifier and there is no numeric half.

    :returns: a (qualifier, number) pair of Segments; a missing half is the
              default Segment
    """
    if not part:
        return DEFAULT, DEFAULT
    suffix_start = None
    for index, char in enumerate(part):
        if _is_digit(char):
            if suffix_start is None:
                suffix_start = index
        elif suffix_start is not None:
            suffix_start = None
            break

    if suffix_start is None:
        return Segment.qualifier(part), DEFAULT
    prefix, digits = part[:suffix_start], part[suffix_start:]
    qualifier = Segment.qualifier(prefix) if prefix else DEFAULT
    return qualifier, parse_number(digits)


def split_tokens(vstring: str) -> List[str]:
    return _separator_re.split(vstring.lower())


def parse_segments(vstring: str) -> Tuple[Segment, ...]:
    segments = []
    for token in split_tokens(vstring):
        segments.extend(parse_part(token))
    log.debug("Parsed %r into %d segments", vstring, len(segments))
    return tuple(segments)
