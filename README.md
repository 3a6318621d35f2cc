# ajustepol

This package fits a polynomial to a set of points by least squares. It builds the
normal equations and solves them by Gaussian elimination and back substitution. In
each column it pivots on the row that holds the largest signed value. There are two
solvers:

- `ajustepol.fit_basic` computes every power `x**k` directly.
- `ajustepol.fit_fast` builds one table of powers per point by repeated
  multiplication, and it evaluates the fitted polynomial with a running power.

The two solvers set up the same system. Their results agree up to floating-point
rounding.

The package also has a generator that makes reproducible input of noisy samples of a
random polynomial.

## Installation

```
pip install .
```

## Command-line use

Make an input with `K` points from a polynomial of degree `N`:

```
ajustepol-gera-entrada 1000 5 > pontos.txt
```

The generator needs exactly two arguments. With any other number it prints a usage
line and exits with status 1. Its random numbers always start from the fixed seed
20242, so the same arguments always give the same output.

Fit the points with either solver:

```
ajustepol-v1 < pontos.txt
ajustepol-v2 < pontos.txt
```

The input holds the degree `N` and the point count `K`, followed by `K` pairs `x y`,
all separated by whitespace. The fitting commands print three lines:

1. the `N+1` coefficients, lowest degree first;
2. the absolute residual `|y - P(x)|` for each point;
3. `K`, then the time spent building the system and the time spent solving it,
   both in milliseconds.

The fitting commands stop with a `ValueError` in these cases:

- the input is malformed or too short;
- the degree is negative;
- the system turns out to be singular.

## Library use

```python
from ajustepol import fit_fast

x = [0.0, 0.5, 1.0, 1.5, 2.0]
y = [1.0, 1.75, 3.0, 4.75, 7.0]
result = fit_fast.fit(x, y, 2)
print(result.coefficients)                  # about [1.0, 1.0, 1.0]
print(result.residuals(x, y))               # about [0.0, 0.0, 0.0, 0.0, 0.0]
print(fit_fast.evaluate(3.0, result.coefficients))
print(result.build_time, result.solve_time) # milliseconds
```

`fit` returns a `FitResult`, which is defined in `ajustepol.fit_basic`.

You can also call the lower-level steps on their own: `build_system(x, y, n)`,
`gauss_elimination(a, b)`, `back_substitution(a, b)` and `evaluate(x, alpha)`. Both
`fit_basic` and `fit_fast` provide them. `gauss_elimination` returns new lists and
leaves its inputs unchanged. `fit_basic` also has these helpers:

- `read_problem(stream)` reads the input format and returns
  `(degree, count, xs, ys)`.
- `format_result(result, x, y, count)` renders the three output lines.

`ajustepol.generator` provides:

- `generate_points(count, degree, seed=20242)`, which returns a list of `(x, y)`
  pairs;
- `format_points(degree, count, points)`, which writes them in the fitter's input
  format;
- `generate_coefficients(degree, count, rng)`;
- `LibcRandom`, a seeded generator that gives the same stream as the GNU C library's
  `rand()`. Its `RAND_MAX` is 2147483647.

`ajustepol.timing` provides these helpers:

- `timestamp()`, a monotonic clock reading in milliseconds;
- `marker_name(base_name, n)`, which returns `"<base_name>_<n>"`;
- `is_pow2(n)`, which accepts positive integers only.

## What it does not do

The timings are monotonic clock readings only. The package collects no hardware
performance counters. `marker_name` builds a label string and does nothing more with
it.

## Tests

```
pip install .[test]
pytest
```