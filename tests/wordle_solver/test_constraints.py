import wordle_solver.constraints as constraints_module
from wordle_solver.constraints import Constraints, OccurrenceBound
from wordle_solver.consts import EXACT_MATCH, LETTER_MATCH, NO_MATCH
from wordle_solver.environment import LetterResult, compute_hint, letter_results


def make_constraints(secret: str, guesses: list[str]) -> Constraints:
    constraints = Constraints.empty(len(secret))
    for guess in guesses:
        constraints.update(guess, compute_hint(secret, guess))
        constraints.check_invariants()
    return constraints


def test_occurrence_bound():
    assert OccurrenceBound(count=2).allows(2)
    assert OccurrenceBound(count=2).allows(3)
    assert not OccurrenceBound(count=2).allows(1)
    assert OccurrenceBound(count=1, exact=True).allows(1)
    assert not OccurrenceBound(count=1, exact=True).allows(2)


def test_update_matches_and_absent_letters():
    constraints = make_constraints("abbey", ["salet"])

    assert constraints.partial == [None, None, None, "e", None]
    assert constraints.absent == {"s", "l", "t"}
    assert constraints.bounds == {"a": OccurrenceBound(count=1), "e": OccurrenceBound(count=1)}
    assert constraints.exclusions == {"a": {1}}

    assert constraints.allows("abbey")
    assert not constraints.allows("steep")
    # 'a' cannot be where it was guessed.
    assert not constraints.allows("babey")
    # 'a' is required.
    assert not constraints.allows("obbey")


def test_exact_occurrence_tightening():
    constraints = Constraints.empty(5)
    constraints.update("steep", [NO_MATCH, NO_MATCH, LETTER_MATCH, NO_MATCH, NO_MATCH])

    assert constraints.exclusions["e"] == {2, 3}
    assert constraints.bounds["e"] == OccurrenceBound(count=1, exact=True)
    assert "e" not in constraints.absent
    assert constraints.absent == {"s", "t", "p"}
    constraints.check_invariants()

    assert constraints.allows("crane")
    assert not constraints.allows("enter")
    assert not constraints.allows("bread")


def test_exact_bound_is_not_raised_later():
    constraints = make_constraints("crane", ["steep"])
    constraints.update("eerie", compute_hint("crane", "eerie"))
    assert constraints.bounds["e"] == OccurrenceBound(count=1, exact=True)


def test_minimum_promotion():
    constraints = make_constraints("eerie", ["lever"])
    assert constraints.bounds["e"] == OccurrenceBound(count=2)
    assert constraints.bounds["r"] == OccurrenceBound(count=1)
    assert constraints.exclusions == {"e": {3}, "r": {4}}

    constraints.update("geese", compute_hint("eerie", "geese"))
    assert constraints.bounds["e"] == OccurrenceBound(count=3)
    assert constraints.partial == [None, "e", None, None, "e"]
    assert constraints.exclusions["e"] == {2, 3}
    constraints.check_invariants()

    assert constraints.allows("eerie")


def test_prune_satisfied_exclusions():
    constraints = make_constraints("crane", ["steep"])
    assert "e" in constraints.exclusions

    constraints.update("crane", [EXACT_MATCH] * 5)
    assert constraints.partial == list("crane")
    assert "e" not in constraints.exclusions
    assert constraints.allows("crane")


def test_confirmed_slots_never_regress():
    constraints = make_constraints("bonus", ["souls"])
    assert constraints.partial == [None, "o", None, None, "s"]

    constraints.update("raise", compute_hint("bonus", "raise"))
    assert constraints.partial == [None, "o", None, None, "s"]


def test_allows_rejects_wrong_length():
    constraints = Constraints.empty(5)
    assert constraints.allows("crane")
    assert not constraints.allows("cranes")


def test_describe():
    constraints = make_constraints("abbey", ["salet"])
    description = constraints.describe()
    assert "Partial: ___e_" in description
    assert "'a': [1]" in description


def test_update_reads_letter_results(monkeypatch):
    calls = []

    def recording_letter_results(guess: str, hint: list[int]) -> list[LetterResult]:
        results = letter_results(guess, hint)
        calls.append(results)
        return results

    monkeypatch.setattr(constraints_module, "letter_results", recording_letter_results)

    constraints = Constraints.empty(5)
    constraints.update("salet", compute_hint("abbey", "salet"))

    assert len(calls) == 1
    assert calls[0][1] == LetterResult(position=1, letter="a", hint=LETTER_MATCH)
    assert constraints.exclusions == {"a": {1}}
