import io

import pytest

from ajustepol import fit_basic
from ajustepol.fit_fast import (
    back_substitution,
    build_system,
    evaluate,
    fit,
    gauss_elimination,
    main,
)

XS = [-1.5, -0.5, 0.25, 1.0, 1.75, 2.5]
TRUE = [0.5, -1.0, 0.25, 2.0]
YS = [sum(c * v**i for i, c in enumerate(TRUE)) for v in XS]


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_build_system_matches_basic(n):
    fast_a, fast_b = build_system(XS, YS, n)
    slow_a, slow_b = fit_basic.build_system(XS, YS, n)
    for fast_row, slow_row in zip(fast_a, slow_a):
        assert fast_row == pytest.approx(slow_row, rel=1e-12)
    assert fast_b == pytest.approx(slow_b, rel=1e-12)


def test_build_system_shape_and_first_entry():
    a, b = build_system(XS, YS, 3)
    assert len(a) == 3 and all(len(row) == 3 for row in a)
    assert a[0][0] == len(XS)
    assert b[0] == pytest.approx(sum(YS))


def test_gauss_elimination_matches_basic_exactly():
    a, b = build_system(XS, YS, 4)
    assert gauss_elimination(a, b) == fit_basic.gauss_elimination(a, b)


def test_gauss_elimination_singular_raises():
    with pytest.raises(ValueError):
        gauss_elimination([[0.0, 1.0], [0.0, 1.0]], [1.0, 2.0])


def test_back_substitution_matches_basic():
    a, b = gauss_elimination(*build_system(XS, YS, 4))
    assert back_substitution(a, b) == fit_basic.back_substitution(a, b)


def test_evaluate_agrees_with_basic():
    for value in XS:
        assert evaluate(value, TRUE) == pytest.approx(fit_basic.evaluate(value, TRUE))
    assert evaluate(0.0, TRUE) == TRUE[0]


def test_fit_recovers_cubic():
    result = fit(XS, YS, 3)
    assert result.coefficients == pytest.approx(TRUE, abs=1e-8)
    assert max(result.residuals(XS, YS)) < 1e-8


def test_fit_negative_degree_raises():
    with pytest.raises(ValueError):
        fit(XS, YS, -2)


def test_main_prints_three_lines(monkeypatch, capsys):
    body = "\n".join(f"{a!r} {b!r}" for a, b in zip(XS, YS))
    monkeypatch.setattr("sys.stdin", io.StringIO(f"3 {len(XS)}\n{body}\n"))
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert [float(v) for v in lines[0].split()] == pytest.approx(TRUE, abs=1e-8)
    assert all(float(v) < 1e-8 for v in lines[1].split())
    assert lines[2].split()[0] == str(len(XS))