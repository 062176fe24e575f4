from argparse import ArgumentParser
import json

from wordle_solver.benchmark import BatchRunner, compute_metrics, summarize
from wordle_solver.consts import MAX_TURNS, OPENING_WORD, WORD_LENGTH
from wordle_solver.solver import Solver, SolverConfig
from wordle_solver.tracker import Tracker
from wordle_solver.vocab import Vocab, default_vocab_path


def main() -> None:
    parser = ArgumentParser()
    parser.add_argument("--vocab_path", type=str, default=None, help="File containing the list of eligible words")
    parser.add_argument("--word_length", type=int, default=WORD_LENGTH, help="Number of letters per word")
    parser.add_argument("--max_turns", type=int, default=MAX_TURNS, help="Number of guesses before giving up")
    parser.add_argument("--opening_word", type=str, default=OPENING_WORD, help="First guess of every game")
    parser.add_argument("--num_secrets", type=int, default=None, help="Only play the first n dictionary words")
    parser.add_argument("--num_workers", type=int, default=1, help="Number of worker processes")
    parser.add_argument("--show_failures", default=False, action="store_true", help="Print the games that were lost")
    args = parser.parse_args()

    config = SolverConfig(word_length=args.word_length, max_turns=args.max_turns, opening_word=args.opening_word)
    vocab = Vocab.from_file(args.vocab_path or default_vocab_path(), word_length=config.word_length)
    solver = Solver(vocab=vocab, config=config)

    tracker = Tracker()
    with tracker.timer("t_overall"):
        rollouts = BatchRunner(solver, num_workers=args.num_workers, progress=True).run(
            vocab.words[:args.num_secrets]
        )

    if args.show_failures:
        for rollout in rollouts:
            if not rollout.win:
                print(f"Secret: {rollout.secret}, {rollout.status.value}, guesses: {rollout.guesses}")

    with tracker.scope("benchmark"):
        compute_metrics(rollouts, tracker, max_turns=config.max_turns)

    print(f"Run completed. {summarize(rollouts)}")
    print(json.dumps(tracker.report(), indent=2))


if __name__ == "__main__":
    main()
