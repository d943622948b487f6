from ranges import CODE_POINT_MAX


def to_hex(code_point: int) -> str:
    """Format a code point as upper-case hex with 4, 5 or 6 digits."""
    if code_point < 0 or code_point > CODE_POINT_MAX:
        raise ValueError('invalid code point %d' % code_point)
    return '%04X' % code_point


def _range(interval) -> str:
    if interval.start == interval.end:
        return to_hex(interval.start)
    return '%s..%s' % (to_hex(interval.start), to_hex(interval.end))


def block_starts(compilation):
    lines = []
    for interval in compilation.tagged:
        start = to_hex(interval.start)
        if interval.label == compilation.kind.sentinel:
            comment = ' ' * (len(start) * 2 + 4) + interval.label
        else:
            comment = '%s..%s; %s' % (start, to_hex(interval.end), interval.label)
        lines.append('        0x%s,%s// %s' % (start, ' ' * (7 - len(start)), comment))
    return lines


def block_identifiers(compilation):
    return ['        %s,' % interval.identifier for interval in compilation.tagged]


def block_constant(label, identifier, since):
    spaced = label.upper()
    names = list(dict.fromkeys([identifier, spaced, spaced.replace(' ', '')]))
    return ('        /**\n'
            '         * Constant for the "%s" Unicode\n'
            '         * character block.\n'
            '         * @since %s\n'
            '         */\n'
            '        public static final UnicodeBlock %s =\n'
            '            new UnicodeBlock(%s);\n'
            % (label, since, identifier,
               (',\n' + ' ' * 29).join('"%s"' % name for name in names)))


def block_tables(compilation, since):
    """Render the block start and block tables and the new block constants."""
    lines = block_starts(compilation)
    lines += block_identifiers(compilation)
    lines += [block_constant(label, identifier, since)
              for label, identifier in compilation.new_identifiers]
    return '\n'.join(lines) + '\n'


def script_constant(label, identifier, since=None):
    lines = ['        /**',
             '         * Unicode script "%s".' % label.replace('_', ' ')]
    if since is not None:
        lines.append('         * @since %s' % since)
    lines += ['         */',
              '        %s' % identifier]
    return '\n'.join(lines)


def script_starts(compilation):
    lines = []
    for interval in compilation.tagged:
        start = to_hex(interval.start)
        last = to_hex(interval.end)
        if interval.start != interval.end:
            comment = '%s..%s; ' % (start, last)
        else:
            comment = start + ' ' * (len(last) + 2) + '; '
        lines.append('            0x%s,%s// %s%s' % (start, ' ' * (11 - len(start)), comment, interval.identifier))
    return lines


def script_identifiers(compilation):
    return ['            %s,%s// %s' % (interval.identifier, ' ' * (29 - len(interval.identifier)), _range(interval))
            for interval in compilation.tagged]


def script_tables(compilation, since, aliases=(), alias_entries=()):
    """Render the new script constants, the script tables and the alias map.

    aliases is the full list of script alias records, alias_entries
    the (short name, identifier) pairs to put into the map."""
    kind = compilation.kind
    lines = [script_constant(label, identifier, since) + ',\n'
             for label, identifier in compilation.new_identifiers]
    lines += [script_constant(kind.sentinel, kind.sentinel_identifier) + ';',
              '',
              '        private static final int[] scriptStarts = {']
    lines += script_starts(compilation)
    lines += ['        };',
              '',
              '        private static final Character.UnicodeScript[] scripts = {']
    lines += script_identifiers(compilation)
    lines += ['        };',
              '',
              '        private static final HashMap<String, Character.UnicodeScript> aliases;',
              '        static {',
              '            aliases = new HashMap<>((int)(%d / 0.75f + 1.0f));' % (len(aliases) + 1)]
    lines += ['            aliases.put("%s", %s);' % (short_name, identifier)
              for short_name, identifier in alias_entries]
    lines += ['        }']
    return '\n'.join(lines) + '\n'


def python_module(compilation):
    """Render a Python module looking up labels with an interval tree."""
    sentinel = compilation.kind.sentinel
    lines = ['#!/usr/bin/python3',
             '',
             'import intervaltree',
             '',
             '',
             '_tree = intervaltree.IntervalTree()']
    lines += ['_tree[%d:%d] = %r' % (interval.start, interval.end + 1, interval.label)
              for interval in compilation.table
              if interval.label != sentinel]
    lines.append('''

def lookup(chr):
    """Return the %(kind)s label of the given character.

    If the character is not covered by any range,
    %(sentinel)r is returned."""
    intervals = _tree[ord(chr)]
    if len(intervals) == 1:
        return intervals.pop().data
    elif not intervals:
        return %(sentinel)r
    else:
        # this should never happen
        raise ValueError('more than one label for character ' + chr)


def all_labels():
    """Return a set of all labels known to this module.

    This does not include the %(sentinel)r default label."""
    return set(i.data for i in _tree)''' % {'kind': compilation.kind.name, 'sentinel': sentinel})
    return '\n'.join(lines) + '\n'


def tz_data_provider(pairs):
    """Render the shortTZID test data provider for (short ID, zone) pairs."""
    lines = ['    @DataProvider(name="shortTZID")',
             '    Object[][] shortTZID() {',
             '        return new Object[][] {',
             "            // LDML's short ID, Expected Zone,",
             '            // Based on timezone.xml from CLDR']
    lines += ['            {"%s", "%s"},' % pair for pair in pairs]
    lines += ['        };',
              '    }']
    return '\n'.join(lines) + '\n'
