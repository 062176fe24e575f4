import abc
import collections
from dataclasses import dataclass
from typing import Callable

from wordle_solver.consts import EXACT_MATCH, LETTER_MATCH, NO_MATCH
from wordle_solver.feedback import InputFormatError, parse_feedback


def compute_hint(secret: str, guess: str) -> list[int]:
    assert len(secret) == len(guess), f"Cannot compare {secret!r} with {guess!r}"

    # Exact matches consume their letter first, so a repeated guess letter is never
    # reported as misplaced more often than the secret contains it.
    remaining = collections.Counter()
    hint = []
    for secret_letter, guessed_letter in zip(secret, guess):
        if secret_letter == guessed_letter:
            hint.append(EXACT_MATCH)
        else:
            hint.append(NO_MATCH)
            remaining[secret_letter] += 1

    for idx, guessed_letter in enumerate(guess):
        if hint[idx] == EXACT_MATCH:
            continue

        if remaining[guessed_letter] > 0:
            hint[idx] = LETTER_MATCH
            remaining[guessed_letter] -= 1

    return hint


@dataclass(frozen=True)
class LetterResult:
    position: int
    letter: str
    hint: int


def letter_results(guess: str, hint: list[int]) -> list[LetterResult]:
    assert len(guess) == len(hint)
    return [LetterResult(position=idx, letter=letter, hint=h) for idx, (letter, h) in enumerate(zip(guess, hint))]


class Authority(abc.ABC):
    """Knows the secret word, or stands in for someone who does, and scores guesses."""

    @abc.abstractmethod
    def evaluate(self, guess: str) -> list[int]:
        ...


class SimulatedAuthority(Authority):
    def __init__(self, secret: str) -> None:
        if not secret.isalpha():
            raise ValueError(f"Secret must be alphabetic, got {secret!r}")
        self.secret = secret.lower()

    def evaluate(self, guess: str) -> list[int]:
        if len(guess) != len(self.secret):
            raise ValueError(f"Guess {guess!r} does not have the length of the secret ({len(self.secret)})")
        return compute_hint(self.secret, guess)


class InteractiveAuthority(Authority):
    """
    Asks a human for the result of each guess. The result is typed on one line, one token per
    letter: the letter itself for a correct letter, `-` for a letter that is not in the word and
    the letter followed by `-` for a letter that is in the word but in another position.
    """

    def __init__(
        self,
        read_line: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
        max_attempts: int = 3,
    ) -> None:
        assert max_attempts >= 1
        self.read_line = read_line
        self.write = write
        self.max_attempts = max_attempts

    def evaluate(self, guess: str) -> list[int]:
        self.write(f"GUESS: {guess}")
        for _ in range(self.max_attempts - 1):
            try:
                return self.read_hint(guess)
            except InputFormatError as e:
                self.write(f"Could not parse result: {e}. Try again.")

        return self.read_hint(guess)

    def read_hint(self, guess: str) -> list[int]:
        return parse_feedback(self.read_line("Enter result (e.g. 's a- - e -'): "), guess)
