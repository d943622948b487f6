from identifiers import TaggedInterval


def script_aliases(lines):
    """Read the script aliases from the lines of PropertyValueAliases.txt.

    Returns a list of (short name, long names) tuples, one per
    "sc ;" record, in file order."""
    aliases = []
    for line in lines:
        line = line.split('#', 1)[0]
        fields = [field.strip() for field in line.split(';')]
        if len(fields) < 3 or fields[0] != 'sc':
            continue
        aliases.append((fields[1], tuple(fields[2:])))
    return aliases


def alias_entries(tagged: list[TaggedInterval], aliases) -> list[tuple[str, str]]:
    """Map upper-case short script names to the identifiers in a table.

    Every interval whose label is one of the long names of an alias
    record contributes one entry; the result is deduplicated and sorted."""
    entries = set()
    for interval in tagged:
        for short_name, long_names in aliases:
            if interval.label in long_names:
                entries.add((short_name.upper(), interval.identifier))
                break
    return sorted(entries)
