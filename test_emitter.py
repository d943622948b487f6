import pytest

import emitter
import properties


@pytest.fixture
def blocks():
    return properties.compile_table(['0000..007F; Basic Latin', '0370..03FF; Greek and Coptic'],
                                    properties.BLOCKS)


@pytest.fixture
def scripts():
    return properties.compile_table(['0041..005A    ; Latin # L&  [26] LATIN CAPITAL LETTER A..LATIN CAPITAL LETTER Z',
                                     '0530          ; Armenian',
                                     '10300..1031F  ; Old_Italic'],
                                    properties.SCRIPTS)


@pytest.mark.parametrize('code_point, expected', [
    (0x0000, '0000'),
    (0x00E9, '00E9'),
    (0xFFFF, 'FFFF'),
    (0x10000, '10000'),
    (0xFFFFF, 'FFFFF'),
    (0x100000, '100000'),
    (0x10FFFF, '10FFFF'),
])
def test_to_hex(code_point, expected):
    actual = emitter.to_hex(code_point)
    assert expected == actual


@pytest.mark.parametrize('code_point', [-1, 0x110000])
def test_to_hex_invalid(code_point):
    with pytest.raises(ValueError):
        emitter.to_hex(code_point)


def test_block_starts(blocks):
    assert [
        '        0x0000,   // 0000..007F; Basic Latin',
        '        0x0080,   // ' + ' ' * 12 + 'unassigned',
        '        0x0370,   // 0370..03FF; Greek and Coptic',
        '        0x0400,   // ' + ' ' * 12 + 'unassigned',
    ] == emitter.block_starts(blocks)


def test_block_identifiers(blocks):
    assert [
        '        BASIC_LATIN,',
        '        null,',
        '        GREEK,',
        '        null,',
    ] == emitter.block_identifiers(blocks)


@pytest.mark.parametrize('label, identifier, expected', [
    ('Greek and Coptic', 'GREEK', '''        /**
         * Constant for the "Greek and Coptic" Unicode
         * character block.
         * @since 22
         */
        public static final UnicodeBlock GREEK =
            new UnicodeBlock("GREEK",
                             "GREEK AND COPTIC",
                             "GREEKANDCOPTIC");
'''),
    ('Tags', 'TAGS', '''        /**
         * Constant for the "Tags" Unicode
         * character block.
         * @since 22
         */
        public static final UnicodeBlock TAGS =
            new UnicodeBlock("TAGS");
'''),
])
def test_block_constant(label, identifier, expected):
    actual = emitter.block_constant(label, identifier, '22')
    assert expected == actual


def test_block_tables(blocks):
    text = emitter.block_tables(blocks, '22')
    lines = text.split('\n')
    assert emitter.block_starts(blocks) == lines[:4]
    assert emitter.block_identifiers(blocks) == lines[4:8]
    assert 'public static final UnicodeBlock BASIC_LATIN =' in text
    assert 'public static final UnicodeBlock GREEK =' in text
    assert text.endswith(');\n')


def test_script_starts(scripts):
    starts = emitter.script_starts(scripts)
    assert '            0x0000,       // 0000..0040; UNKNOWN' == starts[0]
    assert '            0x0041,       // 0041..005A; LATIN' == starts[1]
    assert '            0x0530,       // 0530      ; ARMENIAN' == starts[3]
    assert '            0x10300,      // 10300..1031F; OLD_ITALIC' == starts[5]


def test_script_identifiers(scripts):
    identifiers = emitter.script_identifiers(scripts)
    assert '            LATIN,' + ' ' * 24 + '// 0041..005A' == identifiers[1]
    assert '            ARMENIAN,' + ' ' * 21 + '// 0530' == identifiers[3]


def test_script_tables(scripts):
    text = emitter.script_tables(scripts, '22',
                                 [('Latn', ('Latin',)), ('Zzzz', ('Unknown',))],
                                 [('LATN', 'LATIN'), ('ZZZZ', 'UNKNOWN')])
    assert text.startswith('''        /**
         * Unicode script "Latin".
         * @since 22
         */
        LATIN,

        /**
         * Unicode script "Armenian".
''')
    assert '''         * Unicode script "Old Italic".
         * @since 22
         */
        OLD_ITALIC,

        /**
         * Unicode script "Unknown".
         */
        UNKNOWN;

        private static final int[] scriptStarts = {
            0x0000,''' in text
    assert '''        };

        private static final Character.UnicodeScript[] scripts = {
            UNKNOWN,''' in text
    assert text.endswith('''            aliases = new HashMap<>((int)(3 / 0.75f + 1.0f));
            aliases.put("LATN", LATIN);
            aliases.put("ZZZZ", UNKNOWN);
        }
''')


def test_python_module(scripts):
    source = emitter.python_module(scripts)
    namespace = {}
    exec(source, namespace)
    assert 'Latin' == namespace['lookup']('A')
    assert 'Armenian' == namespace['lookup']('\u0530')
    assert 'Old_Italic' == namespace['lookup']('\U00010300')
    assert 'Unknown' == namespace['lookup']('a')
    assert {'Latin', 'Armenian', 'Old_Italic'} == namespace['all_labels']()


def test_tz_data_provider():
    assert '''    @DataProvider(name="shortTZID")
    Object[][] shortTZID() {
        return new Object[][] {
            // LDML's short ID, Expected Zone,
            // Based on timezone.xml from CLDR
            {"adalv", "Europe/Andorra"},
            {"usnyc", "America/New_York"},
        };
    }
''' == emitter.tz_data_provider([('adalv', 'Europe/Andorra'), ('usnyc', 'America/New_York')])
