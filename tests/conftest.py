from __future__ import annotations

from types import SimpleNamespace
from typing import Iterable, List

import numpy as np
import pytest

from src.unknown_words import UnknownWordCollector


class FakeDictionary:
    """Case-insensitive word set standing in for the spell checker."""

    def __init__(self, words: Iterable[str]):
        self.words = {word.lower() for word in words}

    def is_known(self, word: str) -> bool:
        return bool(word) and word.lower() in self.words


class FakeEmbeddingModel:
    """Bag-of-letters embeddings: texts sharing letters land close together."""

    dimension = 26

    def encode(self, texts: List[str]):
        vectors = np.zeros((len(texts), self.dimension), dtype="float32")
        for row, text in enumerate(texts):
            for char in text.lower():
                if "a" <= char <= "z":
                    vectors[row, ord(char) - ord("a")] += 1.0
            norm = np.linalg.norm(vectors[row])
            if norm:
                vectors[row] /= norm
        return vectors


class FakeChatModel:
    """Returns scripted replies and records every prompt it receives."""

    def __init__(self, replies: Iterable[str] = ()):
        self.replies = list(replies)
        self.prompts = []

    def invoke(self, prompt):
        self.prompts.append(prompt)
        content = self.replies.pop(0) if self.replies else f"answer {len(self.prompts)}"
        return SimpleNamespace(content=content)


RESUME_WORDS = [
    "a", "i", "in", "and", "the", "of", "to", "for", "with",
    "built", "web", "app", "using", "react", "node", "really", "enjoy",
    "programming", "python", "recommended", "skills", "experience",
    "education", "projects", "led", "team", "designed", "database",
    "developed", "software", "engineering", "university", "student",
    "page", "footer", "managed", "intern", "summer", "java",
]


@pytest.fixture
def dictionary():
    return FakeDictionary(RESUME_WORDS)


@pytest.fixture
def collector(dictionary):
    return UnknownWordCollector(dictionary)


@pytest.fixture
def embedding_model():
    return FakeEmbeddingModel()


@pytest.fixture
def chat_model():
    return FakeChatModel()
