import functools
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass

import numpy as np
import tqdm

from wordle_solver.environment import SimulatedAuthority
from wordle_solver.solver import Solver
from wordle_solver.state import GameStatus, Rollout
from wordle_solver.tracker import Tracker


def play_secret(solver: Solver, secret: str) -> Rollout:
    return solver.play(SimulatedAuthority(secret), secret=secret)


class BatchRunner:
    """Plays one independent session per secret, optionally spread over worker processes."""

    def __init__(
        self, solver: Solver, num_workers: int = 1, chunksize: int | None = None, progress: bool = False
    ) -> None:
        self.solver = solver
        self.num_workers = num_workers
        self.chunksize = chunksize
        self.progress = progress

    def run(self, secrets: list[str]) -> list[Rollout]:
        if self.num_workers <= 1:
            return [
                play_secret(self.solver, secret)
                for secret in tqdm.tqdm(secrets, desc="Benchmark", disable=not self.progress)
            ]

        chunksize = self.chunksize or max(1, len(secrets) // (self.num_workers * 4))
        with ProcessPoolExecutor(self.num_workers) as executor:
            rollouts = executor.map(functools.partial(play_secret, self.solver), secrets, chunksize=chunksize)
            return list(tqdm.tqdm(rollouts, total=len(secrets), desc="Benchmark", disable=not self.progress))


@dataclass(frozen=True)
class BenchmarkSummary:
    successes: int
    failures: int
    average_turns: float
    max_turns: int
    total_duration: float

    def __str__(self) -> str:
        return (
            f"Successes: {self.successes}, failures: {self.failures}, "
            f"average number of turns: {self.average_turns:.3f}, max number of turns: {self.max_turns}. "
            f"Total duration: {self.total_duration:.3f} seconds"
        )


def summarize(rollouts: list[Rollout]) -> BenchmarkSummary:
    winning_turns = [rollout.num_turns for rollout in rollouts if rollout.win]
    return BenchmarkSummary(
        successes=len(winning_turns),
        failures=len(rollouts) - len(winning_turns),
        average_turns=np.mean(winning_turns).item() if winning_turns else 0.0,
        max_turns=max(winning_turns, default=0),
        total_duration=sum(rollout.duration for rollout in rollouts),
    )


def compute_metrics(rollouts: list[Rollout], tracker: Tracker, max_turns: int) -> None:
    for rollout in rollouts:
        tracker.log_value("wins", rollout.win)
        tracker.log_value("out_of_candidates", rollout.status == GameStatus.OUT_OF_CANDIDATES)
        tracker.log_value("turn_limit_reached", rollout.status == GameStatus.TURN_LIMIT_REACHED)
        tracker.log_value("session_time", rollout.duration)

        if rollout.turns:
            tracker.log_value("candidates_after_first_turn", rollout.turns[0].num_candidates)

        if rollout.win:
            tracker.log_value("turns_to_win", rollout.num_turns)
            for num_turns in range(1, max_turns + 1):
                tracker.log_value(f"wins_in_{num_turns}_turns", rollout.num_turns == num_turns)
