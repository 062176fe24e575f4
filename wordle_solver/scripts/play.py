from argparse import ArgumentParser, Namespace

from wordle_solver.benchmark import BatchRunner, summarize
from wordle_solver.consts import MAX_TURNS, OPENING_WORD, WORD_LENGTH
from wordle_solver.environment import InteractiveAuthority, SimulatedAuthority
from wordle_solver.feedback import InputFormatError
from wordle_solver.solver import Solver, SolverConfig
from wordle_solver.vocab import Vocab, default_vocab_path


INTRO = """\
Choose between simulator, interactive or benchmark mode. The simulator plays against a secret word
that you provide. In interactive mode you type the feedback Wordle gives for every guess on one
line, one token per letter separated by spaces: the letter itself for a correct letter (green), the
letter followed by a hyphen for a misplaced letter (yellow), and a lone hyphen for a letter that is
not in the word (grey). Benchmark mode plays every word of the dictionary and prints statistics."""


def simulate(solver: Solver, secret: str) -> None:
    secret = secret.strip().lower()
    if len(secret) != solver.config.word_length or not secret.isalpha():
        print(f"The secret must be a word of {solver.config.word_length} letters, got {secret!r}")
        return

    if secret not in solver.vocab:
        print(f"Warning: {secret!r} is not in the dictionary, the solver cannot find it")

    rollout = solver.play(SimulatedAuthority(secret), secret=secret)
    print(f"{rollout.status.value} after {rollout.num_turns} turns: {rollout.guesses}")


def interact(solver: Solver) -> None:
    try:
        rollout = solver.play(InteractiveAuthority())
    except InputFormatError as e:
        print(f"Invalid result, aborting the game: {e}")
        return

    print(f"{rollout.status.value} after {rollout.num_turns} turns: {rollout.guesses}")


def benchmark(solver: Solver, num_workers: int) -> None:
    quiet_solver = Solver(vocab=solver.vocab, config=solver.config, policy=solver.policy)
    rollouts = BatchRunner(quiet_solver, num_workers=num_workers, progress=True).run(solver.vocab.words)
    print(f"Run completed. {summarize(rollouts)}")


def menu(solver: Solver, num_workers: int) -> None:
    print(INTRO)
    while True:
        choice = input("[s]imulator, [i]nteractive, [b]enchmark or [q]uit? ").strip().lower()
        if choice == "s":
            simulate(solver, input("State word: "))
        elif choice == "i":
            interact(solver)
        elif choice == "b":
            benchmark(solver, num_workers)
        elif choice == "q":
            print("Exiting")
            return
        else:
            print("Not a valid choice.")


def parse_args() -> Namespace:
    parser = ArgumentParser()
    parser.add_argument(
        "--mode",
        type=str,
        choices=["menu", "simulate", "interactive", "benchmark"],
        default="menu",
        help="What to do, the menu lets you pick repeatedly",
    )
    parser.add_argument("--vocab_path", type=str, default=None, help="File containing the list of eligible words")
    parser.add_argument("--word_length", type=int, default=WORD_LENGTH, help="Number of letters per word")
    parser.add_argument("--max_turns", type=int, default=MAX_TURNS, help="Number of guesses before giving up")
    parser.add_argument("--opening_word", type=str, default=OPENING_WORD, help="First guess of every game")
    parser.add_argument("--secret", type=str, default=None, help="Secret word for the simulator")
    parser.add_argument("--seed", type=int, default=0, help="Seed for picking a secret when none is given")
    parser.add_argument("--num_workers", type=int, default=1, help="Worker processes for the benchmark")
    parser.add_argument("--detailed", default=False, action="store_true", help="Print constraints after each turn")
    return parser.parse_args()


def main() -> None:
    args = parse_args()

    config = SolverConfig(word_length=args.word_length, max_turns=args.max_turns, opening_word=args.opening_word)
    vocab = Vocab.from_file(args.vocab_path or default_vocab_path(), word_length=config.word_length)
    print(f"Added {len(vocab)} words to dictionary")

    solver = Solver(vocab=vocab, config=config, verbose=True, detailed=args.detailed)
    if args.mode == "simulate":
        simulate(solver, args.secret or vocab.pick_secret(args.seed))
    elif args.mode == "interactive":
        interact(solver)
    elif args.mode == "benchmark":
        benchmark(solver, args.num_workers)
    else:
        menu(solver, args.num_workers)


if __name__ == "__main__":
    main()
