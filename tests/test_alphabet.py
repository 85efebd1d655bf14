from nfa.alphabet import collect_alphabet
from nfa.nfa import EPSILON
from regex_parser.rd_parser import build_nfa


def test_epsilon_is_excluded():
    table = {0: {"a": [1], EPSILON: [2]}, 2: {"b": [3]}}
    assert collect_alphabet(table) == {"a", "b"}


def test_empty_table():
    assert collect_alphabet({}) == set()


def test_idempotent_on_finished_table():
    nfa = build_nfa("a(b|c)*d")
    first = collect_alphabet(nfa.transitions)
    second = collect_alphabet(nfa.transitions)
    assert first == second == {"a", "b", "c", "d"}


def test_build_recomputes_alphabet_from_table():
    nfa = build_nfa("(ab|a)+c?")
    assert nfa.alphabet == frozenset(collect_alphabet(nfa.transitions))
    assert nfa.alphabet == frozenset({"a", "b", "c"})
