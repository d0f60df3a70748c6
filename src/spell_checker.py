import json
import re
from typing import Iterable, List

from spellchecker import SpellChecker

from config import SPELLCHECK_LANGUAGE

# Everything except letters and hyphens
WORD_CHAR_REGEX = re.compile(r"[^a-zA-Z-]")


def comparison_form(token: str) -> str:
    """Strip a token down to the characters used for dictionary lookups."""
    return WORD_CHAR_REGEX.sub("", token)


class Dictionary:
    """
    Recognized-word lookups backed by pyspellchecker.

    The base word list comes from pyspellchecker's bundled frequency data for
    ``language``; ``custom_words`` extends it with domain terms (frameworks,
    course codes, company names) that a general dictionary lacks. Lookups are
    case-insensitive. Pass ``language=None`` to start from an empty base list.
    """

    def __init__(self, custom_words: Iterable[str] = (), language=SPELLCHECK_LANGUAGE):
        self._spell = SpellChecker(language=language)
        self.custom_words = [word for word in custom_words if word]
        if self.custom_words:
            self._spell.word_frequency.load_words(self.custom_words)

    def is_known(self, word: str) -> bool:
        if not word:
            return False
        return bool(self._spell.known([word]))

    def __contains__(self, word):
        return self.is_known(word)


def load_custom_words(path: str) -> List[str]:
    """
    Read the custom allow-list: a JSON array of strings.

    Raises:
        FileNotFoundError: the file does not exist
        ValueError: the file is not valid JSON or not an array of strings
    """
    with open(path, "r", encoding="utf-8") as file:
        try:
            words = json.load(file)
        except json.JSONDecodeError as e:
            raise ValueError(f"Custom word list {path} is not valid JSON: {str(e)}") from e

    if not isinstance(words, list) or not all(isinstance(word, str) for word in words):
        raise ValueError(f"Custom word list {path} must be a JSON array of strings")
    return words


def load_dictionary(custom_words_path: str, language=SPELLCHECK_LANGUAGE) -> Dictionary:
    return Dictionary(load_custom_words(custom_words_path), language=language)
