# Reading hyphenation pattern files into plain lists of pattern and
# exception strings.
#
# Two formats are understood:
#
#   patterns-<lang>     identifiers 'patterns' / 'exceptions' select a section,
#                       followed by "quoted" or `raw` strings; // and /* */
#                       comments, braces and other punctuation are ignored
#   hyph-<lang>.tex     TeX files with \patterns{...} and \hyphenation{...}

import logging
import os
from typing import List, NamedTuple

import regex

from pattern_store import EXCEPTIONS, PATTERNS, UnrecognizedSection

logger = logging.getLogger(__name__)

DEFAULT_PATTERNS_DIR = '.'

TOKEN_RE = regex.compile(r'''
      (?P<comment> //[^\n]* | /\*.*?\*/ | %[^\n]* )
    | (?P<string> "[^"\n]*" | `[^`]*` )
    | (?P<ident> [\p{L}_][\p{L}\p{N}_]* )
    | .
''', regex.VERBOSE | regex.DOTALL)

TEX_GROUP_RE = regex.compile(r'\\(patterns|hyphenation)\s*\{([^}]*)\}')


class PatternSource(NamedTuple):
    patterns: List[str]
    exceptions: List[str]


def parse_pattern_text(text: str) -> PatternSource:
    sections = {PATTERNS: [], EXCEPTIONS: []}
    which = None
    for m in TOKEN_RE.finditer(text):
        if m.group('ident') is not None:
            ident = m.group('ident')
            if ident not in sections:
                line = text.count('\n', 0, m.start()) + 1
                raise UnrecognizedSection(f"Unrecognized identifier {ident!r} at line {line}")
            which = ident
        elif m.group('string') is not None:
            if which is None:
                line = text.count('\n', 0, m.start()) + 1
                raise UnrecognizedSection(f"String outside of a section at line {line}")
            # trim the quotes from around the string
            sections[which].append(m.group('string')[1:-1])
    return PatternSource(sections[PATTERNS], sections[EXCEPTIONS])


def parse_tex_patterns(text: str) -> PatternSource:
    lines = []
    for line in text.splitlines():
        # drop comments
        lines.append(line.split('%', 1)[0])
    text = '\n'.join(lines)

    patterns, exceptions = [], []
    for m in TEX_GROUP_RE.finditer(text):
        if m.group(1) == 'patterns':
            patterns.extend(m.group(2).split())
        else:
            exceptions.extend(m.group(2).split())
    return PatternSource(patterns, exceptions)


def read_pattern_file(path: str) -> PatternSource:
    with open(path, 'r', encoding='utf-8') as f:
        text = f.read()
    if path.endswith('.tex'):
        source = parse_tex_patterns(text)
    else:
        source = parse_pattern_text(text)
    logger.info("Read %d patterns and %d exceptions from %s",
                len(source.patterns), len(source.exceptions), path)
    return source


def find_pattern_file(language: str, directory: str = None) -> str:
    directory = directory or os.getenv('HYPH_PATTERNS_DIR', DEFAULT_PATTERNS_DIR)
    for name in (f"patterns-{language}", f"hyph-{language}.tex"):
        path = os.path.join(directory, name)
        if os.path.exists(path):
            return path
    raise FileNotFoundError(f"no pattern file for language {language!r} in {directory}")
