# Adapted from https://nedbatchelder.com/code/modules/hyphenate.py

from typing import List, Optional, Tuple

from patfile import find_pattern_file, read_pattern_file
from pattern_store import PatternStore
from segment import segment

BOUNDARY = '.'
DEFAULT_HYPHEN = '-'


class Hyphenator:
    def __init__(self, store: PatternStore):
        self.store = store

    @classmethod
    def from_file(cls, path: str, language: Optional[str] = None):
        source = read_pattern_file(path)
        store = PatternStore()
        store.load_patterns(language or path, source.patterns, source.exceptions)
        return cls(store)

    @classmethod
    def for_language(cls, language: str, directory: Optional[str] = None):
        """Load patterns-<language> (or hyph-<language>.tex) from directory,
        which defaults to $HYPH_PATTERNS_DIR."""
        return cls.from_file(find_pattern_file(language, directory), language)

    def points(self, word: str) -> List[int]:
        """Maximum pattern weight of the gap after each character of word."""
        work = BOUNDARY + word + BOUNDARY
        # points[k] is the gap after work[k]
        points = [0] * len(work)
        for i in range(len(work)):
            for _, p in self.store.match_substrings(work, i):
                # p[j] is the gap before work[i+j]
                for j in range(len(p)):
                    k = i + j - 1
                    if k >= 0 and p[j] > points[k]:
                        points[k] = p[j]
        # trim the values for the beginning and ending dots
        return points[1:-1]

    def _pieces(self, word):
        markers = self.points(word)
        pieces = ['']
        for g, c in enumerate(word):
            pieces[-1] += c
            # never between (or after) the last two characters; odd values
            # allow a break, even ones suppress it
            if g < len(markers) - 2 and markers[g] % 2:
                pieces.append('')
        return pieces

    def split_word(self, word: str) -> List[str]:
        """Given a word, returns a list of pieces, broken at the possible
        hyphenation points."""
        exception = self.store.lookup_exception(word)
        if exception is not None:
            return exception.split(DEFAULT_HYPHEN)
        return self._pieces(word)

    def hyphenate_word(self, word: str, hyphen: str = DEFAULT_HYPHEN) -> str:
        exception = self.store.lookup_exception(word)
        if exception is not None:
            if hyphen != DEFAULT_HYPHEN:
                exception = exception.replace(DEFAULT_HYPHEN, hyphen)
            return exception
        return hyphen.join(self._pieces(word))

    def hyphenate(self, text: str, hyphen: str = DEFAULT_HYPHEN) -> Tuple[str, bool]:
        out = []
        for run in segment(text):
            if run.is_word:
                out.append(self.hyphenate_word(run.text, hyphen))
            else:
                out.append(run.text)
        return ''.join(out), True
