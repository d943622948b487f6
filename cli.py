"""Command line interface for compiling Unicode property tables."""

import argparse
import sys

import aliases
import config
import emitter
import identifiers
import properties
import ranges
import sources
import tzshortids


def is_known_for(kind, args):
    names = config.known_identifiers(kind.name)
    for path in args.known:
        names += config.read_known_file(path)
    return identifiers.known_identifiers(names)


def run_property(args):
    kind = args.kind
    lines = sources.read_lines(args.source, kind.filename)
    compilation = properties.compile_table(lines, kind, is_known_for(kind, args))
    if args.format == 'python':
        return emitter.python_module(compilation)
    since = args.since or config.get('SINCE')
    if kind is properties.BLOCKS:
        return emitter.block_tables(compilation, since)
    alias_records = []
    if args.aliases:
        alias_records = aliases.script_aliases(sources.read_lines(args.aliases, 'PropertyValueAliases.txt'))
    return emitter.script_tables(compilation,
                                 since,
                                 alias_records,
                                 aliases.alias_entries(compilation.tagged, alias_records))


def run_tzids(args):
    xml = '\n'.join(sources.read_lines(args.source, 'timezone.xml'))
    return emitter.tz_data_provider(tzshortids.short_ids(xml))


def build_parser():
    parser = argparse.ArgumentParser(prog='unicodetables',
                                     description='Compile Unicode property listings into source tables.')
    parser.add_argument('--config', metavar='PATH',
                        help='YAML configuration file (default: config.yaml, if present)')
    subparsers = parser.add_subparsers(dest='command', required=True)

    for kind in properties.KINDS.values():
        subparser = subparsers.add_parser(kind.name, help='compile %s' % kind.filename)
        subparser.add_argument('source',
                               help='%s, a directory containing it, or a URL' % kind.filename)
        subparser.add_argument('--since', help='version for @since tags of new constants')
        subparser.add_argument('--known', metavar='FILE', action='append', default=[],
                               help='file listing identifiers that are already defined, one per line')
        subparser.add_argument('--format', choices=['java', 'python'], default='java')
        subparser.add_argument('-o', '--output', metavar='FILE', help='write to FILE instead of stdout')
        if kind is properties.SCRIPTS:
            subparser.add_argument('--aliases', metavar='SOURCE',
                                   help='PropertyValueAliases.txt, a directory containing it, or a URL')
        subparser.set_defaults(func=run_property, kind=kind)

    subparser = subparsers.add_parser('tzids', help='extract short time zone IDs from timezone.xml')
    subparser.add_argument('source', help='timezone.xml, a directory containing it, or a URL')
    subparser.add_argument('-o', '--output', metavar='FILE', help='write to FILE instead of stdout')
    subparser.set_defaults(func=run_tzids)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        config.load(args.config or 'config.yaml', silent=args.config is None)
        text = args.func(args)
    except (ranges.ParseError, config.ConfigError) as error:
        print('unicodetables: error: %s' % error, file=sys.stderr)
        return 1
    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(text)
    else:
        sys.stdout.write(text)
    return 0


if __name__ == '__main__':
    sys.exit(main())
