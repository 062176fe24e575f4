import abc


class Policy(abc.ABC):
    @abc.abstractmethod
    def choose_guess(self, turn: int, candidates: list[str]) -> str | None:
        """Returns the next guess, or None when there is nothing left to guess."""
        ...


class DistinctLettersPolicy(Policy):
    """Opens with a fixed word, then guesses the candidate with the most distinct letters."""

    def __init__(self, opening_word: str) -> None:
        self.opening_word = opening_word

    def choose_guess(self, turn: int, candidates: list[str]) -> str | None:
        if turn == 1:
            return self.opening_word

        if not candidates:
            return None

        # max() keeps the first of equally good candidates, i.e. dictionary order breaks ties.
        return max(candidates, key=lambda word: len(set(word)))
