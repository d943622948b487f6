from typing import Callable, Iterable, Mapping, NamedTuple

import identifiers
from identifiers import TaggedInterval
import ranges
from ranges import Interval, IntervalTable


class PropertyKind(NamedTuple):
    """A range-based property listing and how to compile it.

    The same interval compiler serves every kind; kinds only differ in
    the record grammar, the label and identifier of the filler for
    unlisted code points, and the compatibility overrides."""
    name: str
    filename: str
    sentinel: str
    sentinel_identifier: str
    overrides: Mapping[str, str]
    parse: Callable[[str], Interval] = ranges.parse_line


# sentinel identifier 'null' is emitted as is, no upper-case label can produce it
BLOCKS = PropertyKind(name='blocks',
                      filename='Blocks.txt',
                      sentinel='unassigned',
                      sentinel_identifier='null',
                      overrides=identifiers.BLOCK_OVERRIDES)

SCRIPTS = PropertyKind(name='scripts',
                       filename='Scripts.txt',
                       sentinel='Unknown',
                       sentinel_identifier='UNKNOWN',
                       overrides={})

KINDS = {kind.name: kind for kind in (BLOCKS, SCRIPTS)}


class Compilation(NamedTuple):
    kind: PropertyKind
    table: IntervalTable
    tagged: list[TaggedInterval]
    new_identifiers: list[tuple[str, str]]


def compile_table(lines: Iterable[str],
                  kind: PropertyKind,
                  is_known: Callable[[str], bool] = identifiers.never_known) -> Compilation:
    """Compile the lines of a property listing.

    Raises ranges.ParseError if any record is malformed;
    nothing is compiled in that case."""
    intervals = ranges.parse_lines(lines, parse=kind.parse)
    table = ranges.normalize(intervals, kind.sentinel)
    tagged, new_identifiers = identifiers.map_identifiers(table,
                                                          kind.sentinel_identifier,
                                                          kind.overrides,
                                                          is_known)
    return Compilation(kind, table, tagged, new_identifiers)
