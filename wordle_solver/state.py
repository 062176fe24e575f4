import enum
from dataclasses import dataclass, field

from wordle_solver.consts import EXACT_MATCH, MAX_TURNS


class GameStatus(enum.StrEnum):
    WON = "won"
    OUT_OF_CANDIDATES = "out_of_candidates"
    TURN_LIMIT_REACHED = "turn_limit_reached"


@dataclass
class State:
    guesses: list[str] = field(default_factory=list)
    hints: list[list[int]] = field(default_factory=list)
    max_turns: int = MAX_TURNS

    @property
    def win(self) -> bool:
        return bool(self.hints) and all(hint == EXACT_MATCH for hint in self.hints[-1])

    @property
    def terminal(self) -> bool:
        return len(self.hints) == self.max_turns or self.win


@dataclass(frozen=True)
class Turn:
    guess: str
    hint: list[int]
    # Size of the candidate list after the hint was applied.
    num_candidates: int


@dataclass(frozen=True)
class Rollout:
    turns: list[Turn]
    status: GameStatus
    duration: float
    secret: str | None = None

    @property
    def win(self) -> bool:
        return self.status == GameStatus.WON

    @property
    def num_turns(self) -> int:
        return len(self.turns)

    @property
    def guesses(self) -> list[str]:
        return [turn.guess for turn in self.turns]
