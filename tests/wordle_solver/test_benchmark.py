from wordle_solver.benchmark import BatchRunner, compute_metrics, summarize
from wordle_solver.consts import EXACT_MATCH
from wordle_solver.solver import Solver, SolverConfig
from wordle_solver.state import GameStatus, Rollout, Turn
from wordle_solver.tracker import Tracker
from wordle_solver.vocab import Vocab


WORDS = ["crane", "steep", "abbey", "bonus", "eagle", "lathe", "geese", "eerie", "llama", "puppy"]


def make_rollout(num_turns: int, status: GameStatus, duration: float = 0.5) -> Rollout:
    turns = [Turn(guess="crane", hint=[EXACT_MATCH] * 5, num_candidates=1) for _ in range(num_turns)]
    return Rollout(turns=turns, status=status, duration=duration)


def test_summarize():
    rollouts = [
        make_rollout(2, GameStatus.WON),
        make_rollout(4, GameStatus.WON),
        make_rollout(6, GameStatus.TURN_LIMIT_REACHED),
        make_rollout(1, GameStatus.OUT_OF_CANDIDATES),
    ]
    summary = summarize(rollouts)

    assert summary.successes == 2
    assert summary.failures == 2
    assert summary.average_turns == 3.0
    assert summary.max_turns == 4
    assert summary.total_duration == 2.0
    assert "Successes: 2, failures: 2" in str(summary)


def test_summarize_without_wins():
    summary = summarize([make_rollout(6, GameStatus.TURN_LIMIT_REACHED)])
    assert summary.successes == 0
    assert summary.average_turns == 0.0
    assert summary.max_turns == 0


def test_compute_metrics():
    rollouts = [make_rollout(2, GameStatus.WON), make_rollout(6, GameStatus.TURN_LIMIT_REACHED)]
    tracker = Tracker()
    with tracker.scope("benchmark"):
        compute_metrics(rollouts, tracker, max_turns=6)

    report = tracker.report()
    assert report["benchmark/wins_mean"] == 0.5
    assert report["benchmark/turn_limit_reached_sum"] == 1
    assert report["benchmark/out_of_candidates_sum"] == 0
    assert report["benchmark/turns_to_win_max"] == 2
    assert report["benchmark/wins_in_2_turns_sum"] == 1
    assert report["benchmark/wins_in_3_turns_sum"] == 0


def test_batch_runner():
    solver = Solver(vocab=Vocab(words=WORDS), config=SolverConfig(max_turns=len(WORDS)))
    rollouts = BatchRunner(solver).run(WORDS)

    assert [rollout.secret for rollout in rollouts] == WORDS
    assert all(rollout.win for rollout in rollouts)
    assert summarize(rollouts).successes == len(WORDS)


def test_parallel_batch_runner_matches_sequential():
    solver = Solver(vocab=Vocab(words=WORDS))
    sequential = BatchRunner(solver).run(WORDS)
    parallel = BatchRunner(solver, num_workers=2, chunksize=3).run(WORDS)

    assert [r.secret for r in parallel] == WORDS
    assert [r.guesses for r in parallel] == [r.guesses for r in sequential]
    assert [r.status for r in parallel] == [r.status for r in sequential]
