import pytest

from errors import ConfigurationError
from keyboard_and_plugboard import Keyboard, Plugboard, swap
from wheels import ALPHA26


def test_keyboard_round_trip_lookup():
    kb = Keyboard(ALPHA26)
    assert kb.forward("A") == 0
    assert kb.forward("Z") == 25
    assert kb.backward(7) == "H"
    assert "Q" in kb
    assert "q" not in kb
    assert len(kb) == 26


@pytest.mark.parametrize("bad", ["a", "1", " ", "AB"])
def test_keyboard_rejects_foreign_symbols(bad):
    with pytest.raises(ValueError):
        Keyboard(ALPHA26).forward(bad)


@pytest.mark.parametrize("bad", [-1, 26])
def test_keyboard_rejects_out_of_range_signal(bad):
    with pytest.raises(ValueError):
        Keyboard(ALPHA26).backward(bad)


def test_swap_is_symmetric():
    assert swap("A", [("A", "B")]) == "B"
    assert swap("B", [("A", "B")]) == "A"
    assert swap("C", [("A", "B")]) == "C"
    assert swap("A", []) == "A"


def test_swap_is_a_partial_involution():
    pairs = [("A", "B"), ("C", "D"), ("Q", "Z")]
    for c in ALPHA26:
        assert swap(swap(c, pairs), pairs) == c


def test_plugboard_accepts_strings_and_tuples():
    pb = Plugboard(["AB", ("C", "D")], ALPHA26)
    assert pb.pairs == (("A", "B"), ("C", "D"))
    assert pb.forward("A") == "B"
    assert pb.backward("D") == "C"
    assert pb.forward("E") == "E"
    assert len(pb) == 2
    assert repr(pb) == "<Plugboard AB CD>"


def test_plugboard_mapping_is_involution():
    pb = Plugboard("AZ BY CX DW".split(), ALPHA26)
    for c in ALPHA26:
        assert pb.backward(pb.forward(c)) == c


def test_plugboard_full_thirteen_pairs():
    pairs = [ALPHA26[i] + ALPHA26[i + 1] for i in range(0, 26, 2)]
    pb = Plugboard(pairs, ALPHA26)
    assert len(pb) == 13
    assert all(pb.forward(c) != c for c in ALPHA26)


@pytest.mark.parametrize(
    "pairs",
    [
        ["ABC"],
        ["A"],
        ["AA"],
        ["AB", "BC"],
        ["AB", "CA"],
        ["A1"],
        ["ab"],
        [("A", "B", "C")],
        [("", "A")],
        [["", "A"]],
        [("AB", "C")],
        [("A", 1)],
        [5],
        [None],
        None,
        5,
        "AB CD",
    ],
)
def test_plugboard_rejects_bad_pairs(pairs):
    with pytest.raises(ConfigurationError) as info:
        Plugboard(pairs, ALPHA26)
    assert info.value.field == "plugs"


def test_fourteen_pairs_reported_as_too_many():
    pairs = ["AB", "CD", "EF", "GH", "IJ", "KL", "MN", "OP", "QR", "ST", "UV", "WX", "YZ", "AC"]
    with pytest.raises(ConfigurationError) as info:
        Plugboard(pairs, ALPHA26)
    assert "too many pairs" in str(info.value)
