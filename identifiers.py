from typing import Callable, Iterable, Mapping, NamedTuple, Optional

import config
from ranges import IntervalTable


# identifiers that were established before the Unicode block names changed
BLOCK_OVERRIDES = {
    'GREEK_AND_COPTIC': 'GREEK',
    'CYRILLIC_SUPPLEMENT': 'CYRILLIC_SUPPLEMENTARY',
    'COMBINING_DIACRITICAL_MARKS_FOR_SYMBOLS': 'COMBINING_MARKS_FOR_SYMBOLS',
}


class TaggedInterval(NamedTuple):
    start: int
    end: int
    label: str
    identifier: str


def candidate_identifier(label: str) -> str:
    return label.upper().replace(' ', '_').replace('-', '_')


def identifier_for(label: str, overrides: Optional[Mapping[str, str]] = None) -> str:
    identifier = candidate_identifier(label)
    if overrides:
        return overrides.get(identifier, identifier)
    return identifier


def never_known(identifier: str) -> bool:
    return False


def known_identifiers(names: Iterable[str]) -> Callable[[str], bool]:
    """Return an is_known oracle for a fixed collection of identifiers."""
    return frozenset(names).__contains__


def map_identifiers(table: IntervalTable,
                    sentinel_identifier: str,
                    overrides: Optional[Mapping[str, str]] = None,
                    is_known: Callable[[str], bool] = never_known,
                    ) -> tuple[list[TaggedInterval], list[tuple[str, str]]]:
    """Derive the identifier of every interval of a normalized table.

    Returns the table with each interval tagged by its identifier,
    and the (label, identifier) pairs that need a new declaration,
    in order of first occurrence. Identifiers for which is_known
    returns True are not new; if several labels result in the same
    identifier, only the first of them is kept. A label whose identifier
    equals the sentinel identifier is never new either."""
    tagged = []
    for interval in table:
        if interval.label == table.sentinel:
            tagged.append(TaggedInterval(*interval, sentinel_identifier))
        else:
            tagged.append(TaggedInterval(*interval, identifier_for(interval.label, overrides)))
    new_identifiers = []
    seen = {sentinel_identifier}
    for label in table.labels():
        identifier = identifier_for(label, overrides)
        if identifier in seen:
            continue
        seen.add(identifier)
        if is_known(identifier):
            config.log('IDENTIFIERS', '%s is already known' % identifier)
            continue
        new_identifiers.append((label, identifier))
    config.log('IDENTIFIERS', '%d new identifiers' % len(new_identifiers))
    return tagged, new_identifiers
