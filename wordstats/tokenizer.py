from __future__ import annotations

from string import ascii_lowercase, ascii_uppercase
from typing import Iterable, Iterator

from .config import TokenizerConfig

TERMINATORS = ".!?"
APOSTROPHE = "'"

_FOLD = str.maketrans(ascii_uppercase, ascii_lowercase)


def next_word(
    line: str,
    pos: int = 0,
    *,
    terminators: str = TERMINATORS,
    keep_apostrophes: bool = True,
) -> tuple[str, int]:
    """Find the next word in ``line`` starting at ``pos``.

    Returns ``(word, new_pos)`` where ``new_pos`` is the index the next
    call should resume from. ASCII letters are folded to lowercase and,
    together with apostrophes, accumulate into the word. A terminator
    ends a pending word without being consumed; with nothing pending it
    is returned as a one-character word. Any other character ends a
    pending word or is skipped.

    An empty word means the rest of the line holds no more words, in
    which case ``new_pos`` is ``len(line)`` (or ``pos`` if it was already
    past the end).
    """
    if pos < 0:
        raise ValueError(f"Negative scan position: {pos}")

    chars: list[str] = []
    i = pos
    n = len(line)
    while i < n:
        c = line[i].translate(_FOLD)
        if c in ascii_lowercase or (keep_apostrophes and c == APOSTROPHE):
            chars.append(c)
        elif c in terminators:
            if chars:
                return "".join(chars), i
            return c, i + 1
        elif chars:
            return "".join(chars), i
        i += 1
    return "".join(chars), i


def iter_words(
    line: str, *, terminators: str = TERMINATORS, keep_apostrophes: bool = True
) -> Iterator[str]:
    pos = 0
    while True:
        word, pos = next_word(line, pos, terminators=terminators, keep_apostrophes=keep_apostrophes)
        if not word:
            return
        yield word


class WordTokenizer:
    """Line tokenizer driven by :class:`TokenizerConfig`.

    Each call to :meth:`iter_words` starts a fresh scan of its line, so a
    line can be tokenized any number of times.
    """

    def __init__(self, cfg: TokenizerConfig | None = None):
        self.cfg = cfg or TokenizerConfig()

    def iter_words(self, line: str) -> Iterator[str]:
        return iter_words(
            line.rstrip("\r\n"),
            terminators=self.cfg.terminators,
            keep_apostrophes=self.cfg.keep_apostrophes,
        )

    def tokenize_lines(self, lines: Iterable[str]) -> Iterator[str]:
        for line in lines:
            yield from self.iter_words(line)

    def tokenize(self, text: str) -> list[str]:
        return list(self.tokenize_lines(text.splitlines()))


def tokenize(text: str) -> list[str]:
    return WordTokenizer().tokenize(text)


__all__ = ["TERMINATORS", "next_word", "iter_words", "WordTokenizer", "tokenize"]
