import collections
from dataclasses import dataclass, field

from wordle_solver.consts import EXACT_MATCH, LETTER_MATCH, NO_MATCH
from wordle_solver.environment import letter_results


@dataclass
class OccurrenceBound:
    count: int
    # An exact bound is final. Otherwise count is a lower bound that may only grow.
    exact: bool = False

    def allows(self, occurrences: int) -> bool:
        if self.exact:
            return occurrences == self.count
        return occurrences >= self.count


@dataclass
class Constraints:
    """
    Everything learned about the secret word so far.

    `partial` holds the confirmed letter of every position (None while unknown), `absent` the
    letters that do not appear at all, `bounds` how many times a letter appears and `exclusions`
    the positions where a letter is known not to be.
    """

    partial: list[str | None]
    absent: set[str] = field(default_factory=set)
    bounds: dict[str, OccurrenceBound] = field(default_factory=dict)
    exclusions: dict[str, set[int]] = field(default_factory=lambda: collections.defaultdict(set))

    @classmethod
    def empty(cls, word_length: int) -> "Constraints":
        return cls(partial=[None] * word_length)

    @property
    def word_length(self) -> int:
        return len(self.partial)

    def update(self, guess: str, hint: list[int]) -> None:
        assert len(guess) == len(hint) == self.word_length, (guess, hint)
        results = letter_results(guess, hint)

        confirmed_counts = collections.Counter(r.letter for r in results if r.hint in (EXACT_MATCH, LETTER_MATCH))

        for r in results:
            if r.hint == EXACT_MATCH:
                self.partial[r.position] = r.letter
            elif r.hint == LETTER_MATCH:
                self.exclusions[r.letter].add(r.position)

        for r in results:
            if r.hint != NO_MATCH:
                continue

            if confirmed_counts[r.letter] == 0:
                self.absent.add(r.letter)
            else:
                # The letter was matched elsewhere in this guess, so there are no occurrences
                # beyond the confirmed ones, and none at this position.
                self.bounds[r.letter] = OccurrenceBound(count=confirmed_counts[r.letter], exact=True)
                self.exclusions[r.letter].add(r.position)

        for letter, count in confirmed_counts.items():
            bound = self.bounds.get(letter)
            if bound is None:
                self.bounds[letter] = OccurrenceBound(count=count)
            elif not bound.exact and count > bound.count:
                bound.count = count

        self.prune_exclusions()

    def prune_exclusions(self) -> None:
        for letter in list(self.exclusions):
            bound = self.bounds.get(letter)
            confirmed = self.partial.count(letter)
            if confirmed > 0 and (bound is None or confirmed >= bound.count):
                del self.exclusions[letter]

    def allows(self, word: str) -> bool:
        if len(word) != self.word_length:
            return False

        for letter, confirmed in zip(word, self.partial):
            if confirmed is not None and letter != confirmed:
                return False

        if any(letter in self.absent for letter in word):
            return False

        counts = collections.Counter(word)
        for letter, bound in self.bounds.items():
            if not bound.allows(counts[letter]):
                return False

        for idx, (letter, confirmed) in enumerate(zip(word, self.partial)):
            if confirmed is None and idx in self.exclusions.get(letter, ()):
                return False

        return True

    def check_invariants(self) -> None:
        for letter in self.absent:
            bound = self.bounds.get(letter)
            assert bound is None or bound.count == 0, f"{letter!r} is both absent and bounded by {bound}"

        for letter in self.partial:
            assert letter not in self.absent, f"{letter!r} is both confirmed and absent"

        for letter, bound in self.bounds.items():
            if bound.exact:
                assert self.partial.count(letter) <= bound.count, f"{letter!r} confirmed more often than {bound}"

    def describe(self) -> str:
        exclusions = {letter: sorted(positions) for letter, positions in sorted(self.exclusions.items())}
        bounds = {
            letter: f"{'==' if bound.exact else '>='}{bound.count}" for letter, bound in sorted(self.bounds.items())
        }
        partial = "".join(letter or "_" for letter in self.partial)
        return f"Partial: {partial}, absent: {sorted(self.absent)}, bounds: {bounds}, exclusions: {exclusions}"
