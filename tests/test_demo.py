from __future__ import annotations

import io

from sorted_bounds.demo import run_demo

EXPECTED = """
-------------------------
Tests with `<` comparator
-------------------------
Test vector 1
[ 1 2 3 4 5 ]
Lower: 2
Upper: 3

Test vector 2
[ 1 2 4 5 ]
Lower: 2
Upper: 2

"""


def test_demo_output() -> None:
    out = io.StringIO()
    assert run_demo(out) == 0
    assert out.getvalue() == EXPECTED


def test_demo_defaults_to_stdout(capsys) -> None:
    assert run_demo() == 0
    assert capsys.readouterr().out == EXPECTED
