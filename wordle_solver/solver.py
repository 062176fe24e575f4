import time
from typing import Callable

from pydantic import BaseModel, model_validator

from wordle_solver.constraints import Constraints
from wordle_solver.consts import MAX_TURNS, OPENING_WORD, WORD_LENGTH
from wordle_solver.environment import Authority
from wordle_solver.feedback import format_hint
from wordle_solver.policy import DistinctLettersPolicy, Policy
from wordle_solver.state import GameStatus, Rollout, State, Turn
from wordle_solver.vocab import Vocab


class SolverConfig(BaseModel):
    word_length: int = WORD_LENGTH
    max_turns: int = MAX_TURNS
    opening_word: str = OPENING_WORD

    @model_validator(mode="after")
    def check_values(self) -> "SolverConfig":
        if self.word_length <= 0:
            raise ValueError(f"word_length must be positive, got {self.word_length}")
        if self.max_turns <= 0:
            raise ValueError(f"max_turns must be positive, got {self.max_turns}")
        if len(self.opening_word) != self.word_length or not self.opening_word.isalpha():
            raise ValueError(f"Opening word {self.opening_word!r} must have {self.word_length} letters")
        self.opening_word = self.opening_word.lower()
        return self


class Solver:
    def __init__(
        self,
        vocab: Vocab,
        config: SolverConfig | None = None,
        policy: Policy | None = None,
        verbose: bool = False,
        detailed: bool = False,
    ) -> None:
        self.vocab = vocab
        self.config = config or SolverConfig()
        self.policy = policy or DistinctLettersPolicy(opening_word=self.config.opening_word)
        self.verbose = verbose
        self.detailed = detailed

    def log(self, message: str | Callable[[], str], detailed: bool = False) -> None:
        if self.verbose and (self.detailed or not detailed):
            print(message() if callable(message) else message)

    def play(self, authority: Authority, secret: str | None = None) -> Rollout:
        start_time = time.time()
        state = State(max_turns=self.config.max_turns)
        constraints = Constraints.empty(self.config.word_length)
        candidates = list(self.vocab.words)

        turns = []
        status = GameStatus.TURN_LIMIT_REACHED
        while not state.terminal:
            turn_id = len(state.guesses) + 1
            guess = self.policy.choose_guess(turn_id, candidates)
            if guess is None:
                self.log(f"Could not find a word. Giving up on turn {turn_id}")
                status = GameStatus.OUT_OF_CANDIDATES
                break

            self.log(f"Next word to guess: {guess}")
            hint = authority.evaluate(guess)
            state.guesses.append(guess)
            state.hints.append(hint)

            constraints.update(guess, hint)
            candidates = self.vocab.filter(constraints, candidates)
            turns.append(Turn(guess=guess, hint=hint, num_candidates=len(candidates)))

            self.log(f"Result: {format_hint(guess, hint)}, {len(candidates)} candidates left")
            self.log(constraints.describe, detailed=True)

        if state.win:
            status = GameStatus.WON

        rollout = Rollout(turns=turns, status=status, duration=time.time() - start_time, secret=secret)
        self.log(f"DONE. {status.value} after {rollout.num_turns} turns: {rollout.guesses}")
        return rollout
