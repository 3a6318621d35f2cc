"""Least-squares polynomial fitting through the normal equations."""

import sys
from dataclasses import dataclass, field
from typing import Callable, List, Sequence

from .timing import timestamp

__all__ = [
    "FitResult",
    "read_problem",
    "build_system",
    "gauss_elimination",
    "back_substitution",
    "evaluate",
    "fit",
    "format_result",
    "main",
]


def read_problem(stream):
    """Read ``degree count`` followed by ``count`` pairs of ``x y``.

    Returns ``(degree, count, xs, ys)``.
    """
    tokens = stream.read().split()
    if len(tokens) < 2:
        raise ValueError("expected the polynomial degree and the number of points")
    try:
        degree = int(tokens[0])
        count = int(tokens[1])
    except ValueError as exc:
        raise ValueError("degree and point count must be integers") from exc
    if count < 0:
        raise ValueError(f"point count must not be negative, got {count}")
    values = tokens[2 : 2 + 2 * count]
    if len(values) < 2 * count:
        raise ValueError(f"expected {count} points, input ended early")
    try:
        numbers = [float(token) for token in values]
    except ValueError as exc:
        raise ValueError("point coordinates must be real numbers") from exc
    return degree, count, numbers[0::2], numbers[1::2]


def build_system(x, y, n):
    """Build the ``n``-by-``n`` normal equations for the points ``(x, y)``."""
    a = [[sum(xk ** (i + j) for xk in x) for j in range(n)] for i in range(n)]
    b = [sum(xk**i * yk for xk, yk in zip(x, y)) for i in range(n)]
    return a, b


def gauss_elimination(a, b):
    """Reduce ``a`` to upper-triangular form, with row pivoting.

    The pivot is the row holding the largest (signed) value in the column.
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
        pivot_row = a[i]
        if pivot_row[i] == 0.0:
            raise ValueError("singular system: zero pivot")
        for k in range(i + 1, n):
            row = a[k]
            m = row[i] / pivot_row[i]
            a[k] = row[:i] + [0.0] + [
                value - above * m for value, above in zip(row[i + 1 :], pivot_row[i + 1 :])
            ]
            b[k] -= b[i] * m
    return a, b


def back_substitution(a, b):
    """Solve the upper-triangular system ``a x = b``."""
    n = len(b)
    x = [0.0] * n
    for i in reversed(range(n)):
        value = b[i]
        for coefficient, known in zip(a[i][i + 1 :], x[i + 1 :]):
            value -= coefficient * known
        if a[i][i] == 0.0:
            raise ValueError("singular system: zero on the diagonal")
        x[i] = value / a[i][i]
    return x


def evaluate(x, alpha):
    """Evaluate the polynomial with coefficients ``alpha`` at ``x``."""
    total = alpha[0]
    for power, coefficient in enumerate(alpha[1:], start=1):
        total += coefficient * x**power
    return total


@dataclass
class FitResult:
    """Fitted coefficients and the time (ms) spent building and solving."""

    coefficients: List[float]
    build_time: float
    solve_time: float
    evaluator: Callable[[float, Sequence[float]], float] = field(
        default=evaluate, repr=False, compare=False
    )

    def residuals(self, x, y):
        """Absolute differences between ``y`` and the fitted polynomial at ``x``."""
        return [abs(yk - self.evaluator(xk, self.coefficients)) for xk, yk in zip(x, y)]


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
    return FitResult(alpha, build_time, solve_time)


def format_result(result, x, y, count):
    """Render coefficients, residuals and timings as three output lines."""
    coefficients = "".join(f"{value:.15e} " for value in result.coefficients)
    residuals = "".join(f"{value:.15e} " for value in result.residuals(x, y))
    timings = f"{count} {result.build_time:.10e} {result.solve_time:.10e}"
    return f"{coefficients}\n{residuals}\n{timings}\n"


def main(argv=None):
    """Read a problem from standard input and print the fit."""
    degree, count, x, y = read_problem(sys.stdin)
    result = fit(x, y, degree)
    sys.stdout.write(format_result(result, x, y, count))
    return 0