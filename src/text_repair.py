from collections import deque
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

from config import BULLETS
from .spell_checker import comparison_form
from .text_processing import normalize_text, split_text_into_lines, split_line_into_words

# Comparison forms shorter than this are always treated as fragments
MIN_WORD_LENGTH = 3


def is_suspect(token: str, dictionary) -> bool:
    """A token is suspect when it is too short or not a recognized word."""
    word = comparison_form(token)
    return len(word) < MIN_WORD_LENGTH or not dictionary.is_known(word)


def merge_misspelled_words(words: Sequence[str], dictionary) -> List[str]:
    """
    Rejoin words that PDF extraction split into several tokens.

    A suspect token is glued to its successor when the combination is a known
    word. The glued token goes back to the front of the queue, so a result that
    is still suspect can absorb the next fragment too (``"i" "n" "tern"`` ->
    ``"intern"``).
    Short tokens are always suspect, so a stray letter next to a fragment is
    merged even when it is itself a valid word.
    """
    pending = deque(words)
    merged = []
    while pending:
        token = pending.popleft()
        if pending and is_suspect(token, dictionary):
            candidate = token + pending[0]
            if dictionary.is_known(comparison_form(candidate)):
                pending[0] = candidate
                continue
        merged.append(token)
    return merged


def misspelling_at_line_break(line1: str, line2: str, dictionary) -> bool:
    """
    Check whether a word was broken across the boundary between two lines.

    Only the last token of ``line1`` and the first token of ``line2`` are
    considered, and only once.
    """
    first_words = split_line_into_words(line1)
    second_words = split_line_into_words(line2)
    if not first_words or not second_words:
        return False

    last_word = first_words[-1]
    if not is_suspect(last_word, dictionary):
        return False
    return dictionary.is_known(comparison_form(last_word + second_words[0]))


def is_bulleted_line(line: str, bullets: Sequence[str] = BULLETS) -> bool:
    return line.strip().startswith(tuple(bullets))


@dataclass
class _PendingLine:
    text: str
    bulleted: bool
    last_bullet: bool = False

    def absorb(self, other: "_PendingLine", separator: str) -> None:
        self.text = self.text + separator + other.text
        # The guard follows the content of the last bulleted line
        self.last_bullet = self.last_bullet or other.last_bullet


def merge_broken_lines(lines: Sequence[str], dictionary, bullets: Sequence[str] = BULLETS,
                       collector=None) -> List[str]:
    """
    Rejoin lines that were broken apart during extraction.

    Two kinds of breaks are repaired, in this order, for every line:

    1. A bulleted line followed by a non-blank line that is not bulleted is a wrapped
       list item, and the continuation is joined with a single space. The
       last bulleted line of the chunk is never extended this way so that a
       trailing footer or heading is not swallowed by the final bullet.
    2. A line ending in a suspect token that forms a known word with the
       first token of the next line is joined to it without a separator.

    After any merge the same line is examined again, so a list item can
    absorb several continuation lines. Once a line is final its remaining
    unknown words are handed to ``collector``.
    """
    pending = deque(_PendingLine(line, is_bulleted_line(line, bullets)) for line in lines)
    bulleted = [entry for entry in pending if entry.bulleted]
    if bulleted:
        bulleted[-1].last_bullet = True

    repaired = []
    while pending:
        current = pending.popleft()
        while pending:
            merged = False
            following = pending[0]
            # A blank line ends the list item
            if (current.bulleted and not current.last_bullet and not following.bulleted
                    and following.text.strip()):
                current.absorb(pending.popleft(), " ")
                merged = True

            if pending and misspelling_at_line_break(current.text, pending[0].text, dictionary):
                current.absorb(pending.popleft(), "")
                merged = True

            if not merged:
                break

        if collector is not None:
            collector.gather_from_line(current.text)
        repaired.append(current.text)
    return repaired


def repair_text(text: str, dictionary, collector=None, bullets: Sequence[str] = BULLETS) -> str:
    """Normalize, spell-repair and re-flow one chunk of extracted text."""
    lines = [
        " ".join(merge_misspelled_words(split_line_into_words(line), dictionary))
        for line in split_text_into_lines(normalize_text(text))
    ]
    return "\n".join(merge_broken_lines(lines, dictionary, bullets, collector))


def clean_chunks(chunks: List[Dict[str, Any]], dictionary, collector=None,
                 bullets: Sequence[str] = BULLETS) -> List[Dict[str, Any]]:
    """Repair the text of every chunk in place and return the same list."""
    for chunk in chunks:
        chunk["text"] = repair_text(chunk.get("text", ""), dictionary, collector, bullets)
    return chunks
