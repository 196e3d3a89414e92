from functools import total_ordering
from itertools import zip_longest
from typing import Tuple

from vsort.segment import DEFAULT, Segment, parse_segments


@total_ordering
class Version:
    """
    A version string paired with the segments it compares by.

    Segments are compared position by position, the shorter version being
    padded with default segments. When every position ties, the version with
    fewer segments is the lesser one, so "1.0" < "1.0.0". The original string
    is kept for display only and takes no part in comparisons.
    """

    __slots__ = ('original', 'segments')

    def __init__(self, original: str, segments: Tuple[Segment, ...]):
        self.original = original
        self.segments = tuple(segments)

    @classmethod
    def parse(cls, vstring: str) -> 'Version':
        return cls(vstring, parse_segments(vstring))

    def __str__(self) -> str:
        return self.original

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self.original}')"

    def __eq__(self, other) -> bool:
        if isinstance(other, str):
            other = Version.parse(other)
        elif not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) == 0

    def __lt__(self, other) -> bool:
        if isinstance(other, str):
            other = Version.parse(other)
        elif not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) < 0

    def __hash__(self) -> int:
        return hash(self.segments)


def parse(vstring: str) -> Version:
    return Version.parse(vstring)


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def compare(a: Version, b: Version) -> int:
    """
    :returns: -1, 0 or 1 as a is less than, equal to or greater than b
    """
    for left, right in zip_longest(a.segments, b.segments, fillvalue=DEFAULT):
        result = _cmp(left, right)
        if result:
            return result
    return _cmp(len(a.segments), len(b.segments))
