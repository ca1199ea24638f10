from __future__ import annotations

import io

from sorted_bounds import format_sequence, print_sequence


def test_format_sequence() -> None:
    assert format_sequence([1, 2, 3, 4, 5]) == "[ 1 2 3 4 5 ]"
    assert format_sequence([]) == "[ ]"
    assert format_sequence(["a", 1.5]) == "[ a 1.5 ]"
    assert format_sequence(x for x in range(2)) == "[ 0 1 ]"


def test_print_sequence_targets(capsys) -> None:
    print_sequence([1, 2, 4, 5])
    assert capsys.readouterr().out == "[ 1 2 4 5 ]\n"
    buffer = io.StringIO()
    print_sequence([7], file=buffer)
    assert buffer.getvalue() == "[ 7 ]\n"
