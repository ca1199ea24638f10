from __future__ import annotations

import random

import pytest

from sorted_bounds import SortedDict


def _words() -> SortedDict[str, str]:
    words = SortedDict(
        {
            "wallop": "to hit (someone or something) very hard",
            "mollify": "to make (someone) less angry",
        }
    )
    words["fillip"] = "an added part or feature"
    words["defenestration"] = "a throwing of a person or thing out of a window"
    return words


def test_keys_stay_sorted() -> None:
    words = _words()
    assert list(words) == ["defenestration", "fillip", "mollify", "wallop"]
    assert words.peekitem(0)[0] == "defenestration"
    assert words.peekitem()[0] == "wallop"
    assert words["mollify"] == "to make (someone) less angry"
    assert words.get("perturb") is None
    assert "fillip" in words
    assert "perturb" not in words


def test_update_and_delete() -> None:
    words = _words()
    words["fillip"] = "a flick of the finger"
    assert words["fillip"] == "a flick of the finger"
    assert len(words) == 4
    del words["fillip"]
    assert "fillip" not in words
    with pytest.raises(KeyError):
        del words["fillip"]
    with pytest.raises(KeyError):
        words["fillip"]


def test_construction_forms() -> None:
    pairs = SortedDict([(3, "c"), (1, "a"), (3, "C")])
    assert list(pairs.items()) == [(1, "a"), (3, "C")]
    kw = SortedDict(b=2, a=1)
    assert list(kw.keys()) == ["a", "b"]
    assert kw == {"a": 1, "b": 2}
    assert repr(kw) == "SortedDict({'a': 1, 'b': 2})"


def test_positions_and_ranges() -> None:
    numbers = SortedDict((n, str(n)) for n in [10, 2, 8, 4, 6])
    assert numbers.index(6) == 2
    with pytest.raises(ValueError):
        numbers.index(5)
    assert numbers.bisect_left(5) == 2
    assert numbers.bisect_right(6) == 3
    assert list(numbers.irange(3, 8)) == [4, 6, 8]
    assert list(numbers.irange(maximum=4)) == [2, 4]
    assert list(numbers.irange(minimum=9)) == [10]
    assert list(numbers.irange(8, 3)) == []
    assert list(reversed(numbers)) == [10, 8, 6, 4, 2]


def test_random_operations_match_dict() -> None:
    rng = random.Random(99)
    sd: SortedDict[int, int] = SortedDict()
    plain: dict[int, int] = {}
    for step in range(500):
        key = rng.randint(0, 40)
        if rng.random() < 0.3 and key in plain:
            del sd[key]
            del plain[key]
        else:
            sd[key] = step
            plain[key] = step
        assert list(sd) == sorted(plain)
    assert dict(sd.items()) == plain
    clone = sd.copy()
    assert clone == sd
    clone[1000] = 0
    assert 1000 not in sd


def test_peekitem_empty() -> None:
    with pytest.raises(IndexError):
        SortedDict().peekitem()


def test_incomparable_keys_raise_everywhere() -> None:
    words = _words()
    with pytest.raises(TypeError):
        3 in words
    with pytest.raises(TypeError):
        words[3]
    with pytest.raises(TypeError):
        words.get(3)


def test_key_comparison_errors_propagate() -> None:
    class Unordered:
        def __lt__(self, other: object) -> bool:
            raise TypeError("no ordering")

        __gt__ = __lt__

    numbers = SortedDict({1: "a"})
    with pytest.raises(TypeError, match="no ordering"):
        Unordered() in numbers
