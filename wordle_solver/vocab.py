import os
import random

import more_itertools

from wordle_solver.constraints import Constraints
from wordle_solver.consts import WORD_LENGTH


def default_vocab_path() -> str:
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "data", "dictionary.txt")


def load_words(path: str, word_length: int = WORD_LENGTH) -> list[str]:
    """Reads one word per line, skipping lines of the wrong length or with non-alphabetic characters."""
    words = []
    with open(path, "r") as f:
        for line in f:
            word = line.strip()
            if len(word) != word_length or not word.isalpha():
                continue
            words.append(word.lower())
    return list(more_itertools.unique_everseen(words))


class Vocab:
    def __init__(self, words: list[str]) -> None:
        self.words = list(more_itertools.unique_everseen(words))

    @classmethod
    def from_file(cls, path: str, word_length: int = WORD_LENGTH) -> "Vocab":
        return cls(load_words(path, word_length))

    def __len__(self) -> int:
        return len(self.words)

    def __contains__(self, word: str) -> bool:
        return word in self.words

    def pick_secret(self, seed: int) -> str:
        return random.Random(seed).choice(self.words)

    def filter(self, constraints: Constraints, words: list[str] | None = None) -> list[str]:
        words = self.words if words is None else words
        return [word for word in words if constraints.allows(word)]
