# Liang-style hyphenation pattern storage: a trie of pattern keys plus the
# exception dictionary for one language.

import logging
from types import MappingProxyType
from typing import Dict, Iterable, List, Optional, Tuple, Union

import regex

logger = logging.getLogger(__name__)

PATTERNS = 'patterns'
EXCEPTIONS = 'exceptions'

# letters/marks or the '.' boundary, each optionally preceded by one digit,
# with an optional trailing digit
PATTERN_RE = regex.compile(r'(?:[0-9]?[\p{L}\p{M}.])+[0-9]?')


class PatternLoadError(ValueError):
    pass


class MissingInput(PatternLoadError):
    pass


class InvalidPatternSyntax(PatternLoadError):
    pass


class UnrecognizedSection(PatternLoadError):
    pass


def parse_pattern(pattern: str) -> Tuple[str, List[int]]:
    """Split a pattern source like 'a1bc3d4' into its key 'abcd' and the
    weight list [0, 1, 0, 3, 4], one weight per gap of the key."""
    if not pattern or not PATTERN_RE.fullmatch(pattern):
        raise InvalidPatternSyntax(f"invalid hyphenation pattern {pattern!r}")
    chars = regex.sub(r'[0-9]', '', pattern)
    points = [int(d or 0) for d in regex.split(r'[^0-9]', pattern)]
    return chars, points


def exception_key(exception: str) -> str:
    if not exception:
        raise InvalidPatternSyntax("empty hyphenation exception")
    return exception.replace('-', '')


class PatternStore:
    """Compiled patterns and exceptions for a single language.

    Populated once through load_patterns() or load_sections(); after that it
    is only read, so one instance can serve any number of threads.
    """

    def __init__(self, language: Optional[str] = None):
        self.language = language
        self.tree: Dict = {}
        self.size = 0
        self._exceptions: Dict[str, str] = {}

    @property
    def exceptions(self):
        return MappingProxyType(self._exceptions)

    def __len__(self):
        return self.size

    def __contains__(self, key):
        return self.weights_for(key) is not None

    def _is_loaded(self, language):
        return self.language == language and self.size != 0

    def load_patterns(self, language: str, patterns: Optional[Iterable[str]],
                      exceptions: Optional[Iterable[str]] = ()):
        if self._is_loaded(language):
            # already set up for this language
            logger.debug("Patterns for %r already loaded, skipping", language)
            return
        if patterns is None:
            raise MissingInput(f"no hyphenation patterns given for language {language!r}")

        tree, size = self._build_tree(patterns)
        exc = {}
        for exception in exceptions or ():
            exc[exception_key(exception)] = exception

        self.language = language
        self.tree = tree
        self.size = size
        self._exceptions = exc
        logger.info("Loaded %d patterns and %d exceptions for %r", size, len(exc), language)

    def load_sections(self, language: str,
                      sections: Union[Dict[str, Iterable[str]], Iterable[Tuple[str, Iterable[str]]]]):
        """Load from tagged sections, e.g. [('patterns', [...]), ('exceptions', [...])].
        A tag may appear more than once; its entries accumulate in order."""
        if isinstance(sections, dict):
            sections = sections.items()
        collected = {PATTERNS: None, EXCEPTIONS: []}
        for tag, entries in sections:
            if tag not in collected:
                raise UnrecognizedSection(f"unrecognized section {tag!r}")
            if collected[tag] is None:
                collected[tag] = []
            collected[tag].extend(entries)
        self.load_patterns(language, collected[PATTERNS], collected[EXCEPTIONS])

    @staticmethod
    def _build_tree(patterns):
        # Each character finds a dict another level down in the tree, and
        # terminal nodes keep the weights under the None key.
        tree = {}
        size = 0
        for pattern in patterns:
            chars, points = parse_pattern(pattern)
            t = tree
            for c in chars:
                if c not in t:
                    t[c] = {}
                t = t[c]
            if None not in t:
                size += 1
            t[None] = points
        return tree, size

    def match_substrings(self, query: str, start: int = 0) -> List[Tuple[int, List[int]]]:
        """Every stored key that is a prefix of query[start:], as
        (key length, weights) pairs, shortest first."""
        matches = []
        t = self.tree
        for i, c in enumerate(query[start:], 1):
            t = t.get(c)
            if t is None:
                break
            if None in t:
                matches.append((i, t[None]))
        return matches

    def weights_for(self, key: str) -> Optional[List[int]]:
        t = self.tree
        for c in key:
            t = t.get(c)
            if t is None:
                return None
        return t.get(None)

    def lookup_exception(self, word: str) -> Optional[str]:
        return self._exceptions.get(word)
