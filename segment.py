# Splits text into word runs and single-character runs of everything else.

from typing import Iterator, NamedTuple

import regex

WORD_RE = regex.compile(r'([\p{L}\p{M}]+)|.', regex.DOTALL)


class Segment(NamedTuple):
    is_word: bool
    text: str


def segment(text: str) -> Iterator[Segment]:
    """Yield the runs of text in order. Joining their .text gives back the
    input unchanged."""
    for m in WORD_RE.finditer(text):
        yield Segment(m.group(1) is not None, m.group())


def words(text: str):
    return [s.text for s in segment(text) if s.is_word]
