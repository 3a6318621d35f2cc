"""Least-squares polynomial fitting using precomputed power tables."""

import operator
import sys
from itertools import accumulate, repeat

from .fit_basic import FitResult, format_result, read_problem
from .timing import timestamp

__all__ = [
    "build_system",
    "gauss_elimination",
    "back_substitution",
    "evaluate",
    "fit",
    "main",
]


def build_system(x, y, n):
    """Build the normal equations, computing each point's powers once."""
    a = [[0.0] * n for _ in range(n)]
    b = [0.0] * n
    for xk, yk in zip(x, y):
        powers = list(accumulate(repeat(xk, max(2 * n - 2, 0)), operator.mul, initial=1.0))
        b = [value + powers[i] * yk for i, value in enumerate(b)]
        a = [
            [value + power for value, power in zip(row, powers[i : i + n])]
            for i, row in enumerate(a)
        ]
    return a, b


def gauss_elimination(a, b):
    """Reduce ``a`` to upper-triangular form, pivoting on the largest value.

    Returns new ``(a, b)``; the inputs are left untouched.
    """
    a = [list(row) for row in a]
    b = list(b)
    n = len(a)
    for i in range(n):
        pivot = max(range(i, n), key=lambda k: a[k][i])
        if pivot != i:
            a[i], a[pivot] = a[pivot], a[i]
            b[i], b[pivot] = b[pivot], b[i]
        head = a[i]
        if head[i] == 0.0:
            raise ValueError("singular system: zero pivot")
        tail = head[i + 1 :]
        for k in range(i + 1, n):
            row = a[k]
            m = row[i] / head[i]
            a[k] = row[:i] + [0.0] + [v - h * m for v, h in zip(row[i + 1 :], tail)]
            b[k] -= b[i] * m
    return a, b


def back_substitution(a, b):
    """Solve the upper-triangular system ``a x = b``."""
    x = [0.0] * len(b)
    for i in reversed(range(len(b))):
        value = b[i]
        for coefficient, known in zip(a[i][i + 1 :], x[i + 1 :]):
            value -= coefficient * known
        if a[i][i] == 0.0:
            raise ValueError("singular system: zero on the diagonal")
        x[i] = value / a[i][i]
    return x


def evaluate(x, alpha):
    """Evaluate the polynomial ``alpha`` at ``x`` with a running power."""
    total = alpha[0]
    power = x
    for coefficient in alpha[1:]:
        total += coefficient * power
        power *= x
    return total


def fit(x, y, degree):
    """Fit a polynomial of the given degree to the points by least squares."""
    if degree < 0:
        raise ValueError(f"degree must not be negative, got {degree}")
    if len(x) != len(y):
        raise ValueError("x and y must have the same length")
    n = degree + 1
    start = timestamp()
    a, b = build_system(x, y, n)
    build_time = timestamp() - start

    start = timestamp()
    a, b = gauss_elimination(a, b)
    alpha = back_substitution(a, b)
    solve_time = timestamp() - start
    return FitResult(alpha, build_time, solve_time, evaluator=evaluate)


def main(argv=None):
    """Read a problem from standard input and print the fit."""
    degree, count, x, y = read_problem(sys.stdin)
    result = fit(x, y, degree)
    sys.stdout.write(format_result(result, x, y, count))
    return 0