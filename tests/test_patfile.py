import pytest

from conftest import data_path
from patfile import (
    find_pattern_file,
    parse_pattern_text,
    parse_tex_patterns,
    read_pattern_file,
)
from pattern_store import UnrecognizedSection

PATTERN_TEXT = '''
// comment "not a pattern"
patterns {
    ".ach4" "a1b"
    `2bc`
}
/* block comment
   exceptions "no-pe" */
exceptions
    "ta-ble",
    "pro-ject"
patterns "c3d"
'''

TEX_TEXT = r'''
% hyph-xx.tex
% \patterns{ignored}
\message{Hyphenation patterns for xx}
\patterns{ % comment inside the group
.ach4 a1b
2bc
}
\hyphenation{
ta-ble pro-ject
}
'''


class TestParsePatternText:
    def test_sections(self):
        source = parse_pattern_text(PATTERN_TEXT)
        assert source.patterns == ['.ach4', 'a1b', '2bc', 'c3d']
        assert source.exceptions == ['ta-ble', 'pro-ject']

    def test_empty(self):
        source = parse_pattern_text('')
        assert source.patterns == []
        assert source.exceptions == []

    def test_unrecognized_identifier(self):
        with pytest.raises(UnrecognizedSection, match='line 3'):
            parse_pattern_text('patterns "a1b"\n\nhyphenation "ta-ble"\n')

    def test_string_outside_section(self):
        with pytest.raises(UnrecognizedSection):
            parse_pattern_text('"a1b" patterns "b1c"')


class TestParseTex:
    def test_groups(self):
        source = parse_tex_patterns(TEX_TEXT)
        assert source.patterns == ['.ach4', 'a1b', '2bc']
        assert source.exceptions == ['ta-ble', 'pro-ject']


class TestFiles:
    def test_read_english(self):
        source = read_pattern_file(data_path('patterns-en'))
        assert len(source.patterns) == 4447
        assert source.patterns[0] == '.ach4'
        assert 'hy3ph' in source.patterns
        assert source.exceptions[-1] == 'ta-ble'

    def test_read_tex(self, tmp_path):
        path = tmp_path / 'hyph-xx.tex'
        path.write_text(TEX_TEXT, encoding='utf-8')
        source = read_pattern_file(str(path))
        assert source.patterns == ['.ach4', 'a1b', '2bc']

    def test_find_in_directory(self, tmp_path):
        (tmp_path / 'hyph-xx.tex').write_text(TEX_TEXT, encoding='utf-8')
        assert find_pattern_file('xx', str(tmp_path)) == str(tmp_path / 'hyph-xx.tex')

    def test_find_prefers_pattern_file(self, tmp_path):
        (tmp_path / 'hyph-xx.tex').write_text(TEX_TEXT, encoding='utf-8')
        (tmp_path / 'patterns-xx').write_text(PATTERN_TEXT, encoding='utf-8')
        assert find_pattern_file('xx', str(tmp_path)) == str(tmp_path / 'patterns-xx')

    def test_find_uses_environment(self, monkeypatch):
        monkeypatch.setenv('HYPH_PATTERNS_DIR', data_path(''))
        assert find_pattern_file('en') == data_path('patterns-en')

    def test_not_found(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            find_pattern_file('zz', str(tmp_path))
