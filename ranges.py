from collections.abc import Sequence
import decorator
import intervaltree
import string
from typing import Callable, Iterable, Iterator, NamedTuple, Optional

import config


CODE_POINT_MIN = 0
CODE_POINT_MAX = 0x10FFFF


class Interval(NamedTuple):
    start: int
    end: int
    label: str


class ParseError(ValueError):
    """A record that does not match the range grammar.

    The whole compilation is aborted when one of these is raised,
    since a partial interval set cannot cover the code point space."""

    def __init__(self, line: str, reason: str, line_number: Optional[int] = None):
        super().__init__(line, reason, line_number)
        self.line = line
        self.reason = reason
        self.line_number = line_number

    def __str__(self) -> str:
        if self.line_number is None:
            return '%s: %r' % (self.reason, self.line)
        return 'line %d: %s: %r' % (self.line_number, self.reason, self.line)


@decorator.decorator
def reports_line(func, line, *args, **kwargs):
    """Turn a ValueError raised for a record into a ParseError naming it."""
    try:
        return func(line, *args, **kwargs)
    except ParseError:
        raise
    except ValueError as error:
        raise ParseError(line, str(error)) from error


def parse_code_point(digits: str) -> int:
    if not digits or any(digit not in string.hexdigits for digit in digits):
        raise ValueError('invalid hex digits %r' % digits)
    code_point = int(digits, base=16)
    if code_point > CODE_POINT_MAX:
        raise ValueError('code point %s out of range' % digits)
    return code_point


@reports_line
def parse_line(line: str) -> Interval:
    """Parse one record of the form HHHH[..HHHH]; Label[ # comment].

    Blank lines and comment lines must be filtered out beforehand,
    see records()."""
    record = line.split('#', 1)[0]
    chars, sep, label = record.partition(';')
    label = label.strip()
    if not sep or not label:
        raise ParseError(line, 'missing label')
    first, sep, last = chars.strip().partition('..')
    start = parse_code_point(first.strip())
    end = parse_code_point(last.strip()) if sep else start
    if start > end:
        raise ParseError(line, 'range start after range end')
    return Interval(start, end, label)


def records(lines: Iterable[str]) -> Iterator[tuple[int, str]]:
    """Yield (line number, line) for every line that holds a record."""
    for line_number, line in enumerate(lines, start=1):
        line = line.rstrip('\r\n')
        if not line.strip() or line.startswith('#'):
            continue
        yield line_number, line


def parse_lines(lines: Iterable[str],
                parse: Callable[[str], Interval] = parse_line) -> list[Interval]:
    intervals = []
    for line_number, line in records(lines):
        try:
            intervals.append(parse(line))
        except ParseError as error:
            error.line_number = line_number
            raise
    config.log('PARSE', 'parsed %d intervals' % len(intervals))
    return intervals


class IntervalTable(Sequence):
    """A normalized, gap-free cover of the code point space.

    The intervals are sorted, contiguous and disjoint, no two neighbors
    share a label, and together they span exactly
    CODE_POINT_MIN..CODE_POINT_MAX."""

    def __init__(self, intervals: Iterable[Interval], sentinel: str):
        self._intervals = tuple(intervals)
        self.sentinel = sentinel
        self._tree = intervaltree.IntervalTree.from_tuples(
            (interval.start, interval.end + 1, interval.label)
            for interval in self._intervals)

    def __getitem__(self, index):
        return self._intervals[index]

    def __len__(self) -> int:
        return len(self._intervals)

    def __repr__(self) -> str:
        return 'IntervalTable(%r, %r)' % (list(self._intervals), self.sentinel)

    def label_at(self, code_point: int) -> str:
        if not CODE_POINT_MIN <= code_point <= CODE_POINT_MAX:
            raise ValueError('not a code point: %d' % code_point)
        intervals = self._tree[code_point]
        if len(intervals) != 1:
            # this should never happen
            raise ValueError('%d intervals for code point %X' % (len(intervals), code_point))
        return intervals.pop().data

    def labels(self) -> list[str]:
        """Return the distinct labels in order of first occurrence.

        The sentinel label is not included."""
        labels = dict.fromkeys(interval.label for interval in self._intervals)
        labels.pop(self.sentinel, None)
        return list(labels)


def _append(table: list[Interval], interval: Interval) -> None:
    if table and table[-1].label == interval.label:
        # merge adjacent runs with the same label
        table[-1] = table[-1]._replace(end=interval.end)
    else:
        table.append(interval)


def normalize(intervals: Iterable[Interval], sentinel: str) -> IntervalTable:
    """Sort, gap-fill and merge intervals into an IntervalTable.

    Code points not covered by any interval are assigned to
    sentinel-labeled intervals. The input must not contain
    overlapping intervals; this is not checked."""
    table: list[Interval] = []
    last_end = CODE_POINT_MIN - 1
    gaps = 0
    for interval in sorted(intervals, key=lambda interval: interval.start):
        if interval.start > last_end + 1:
            _append(table, Interval(last_end + 1, interval.start - 1, sentinel))
            gaps += 1
        _append(table, interval)
        last_end = interval.end
    if last_end < CODE_POINT_MAX:
        _append(table, Interval(last_end + 1, CODE_POINT_MAX, sentinel))
        gaps += 1
    config.log('NORMALIZE', '%d intervals after filling %d gaps with %r' % (len(table), gaps, sentinel))
    return IntervalTable(table, sentinel)
