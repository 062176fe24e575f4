from wordle_solver.consts import EXACT_MATCH, LETTER_MATCH, NO_MATCH


class InputFormatError(ValueError):
    pass


def parse_token(token: str, guessed_letter: str) -> int:
    if token == "-":
        return NO_MATCH

    if len(token) == 2 and token[1] == "-" and token[0].isalpha():
        if token[0].lower() != guessed_letter:
            raise InputFormatError(f"Misplaced letter {token[0]!r} does not match the guessed letter {guessed_letter!r}")
        return LETTER_MATCH

    if len(token) == 1 and token.isalpha():
        if token.lower() != guessed_letter:
            raise InputFormatError(f"Matched letter {token!r} does not match the guessed letter {guessed_letter!r}")
        return EXACT_MATCH

    raise InputFormatError(f"Invalid token {token!r}, expected a letter, '-' or a letter followed by '-'")


def parse_feedback(line: str, guess: str) -> list[int]:
    """
    Parses a line such as `s a- - e -` into one hint per guessed letter.

    A bare letter is an exact match, a lone hyphen means the letter is absent and a letter
    followed by a hyphen means the letter is in the word but elsewhere.
    """
    tokens = line.split()
    if len(tokens) != len(guess):
        raise InputFormatError(f"Expected {len(guess)} tokens, got {len(tokens)} in {line!r}")

    return [parse_token(token, letter) for token, letter in zip(tokens, guess)]


def format_hint(guess: str, hint: list[int]) -> str:
    tokens = []
    for letter, h in zip(guess, hint):
        if h == EXACT_MATCH:
            tokens.append(letter)
        elif h == LETTER_MATCH:
            tokens.append(f"{letter}-")
        else:
            assert h == NO_MATCH, h
            tokens.append("-")
    return " ".join(tokens)
