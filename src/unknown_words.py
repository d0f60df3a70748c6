import threading

from .spell_checker import comparison_form
from .text_processing import split_line_into_words

# Comparison forms this short are never reported
MIN_REPORTED_LENGTH = 4


class UnknownWordCollector:
    """
    Words that stayed unrecognized after repair, gathered across every
    resume in a run so the custom word list can be extended afterwards.
    """

    def __init__(self, dictionary):
        self.dictionary = dictionary
        self._words = []
        self._seen = set()
        self._lock = threading.Lock()

    @property
    def words(self):
        return tuple(self._words)

    def __len__(self):
        return len(self._words)

    def __contains__(self, word):
        return word in self._seen

    def gather_from_line(self, line: str) -> None:
        with self._lock:
            for token in split_line_into_words(line):
                word = comparison_form(token)
                if len(word) < MIN_REPORTED_LENGTH or word in self._seen:
                    continue
                if not self.dictionary.is_known(word):
                    self._seen.add(word)
                    self._words.append(word)

    def output_unknown_words(self, sink=print) -> None:
        if self._words:
            sink(f"Unknown words: {', '.join(self._words)}")
