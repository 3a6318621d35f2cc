"""Generate noisy sample points of a random polynomial."""

import re
import sys
from collections import deque

__all__ = [
    "RAND_MAX",
    "LibcRandom",
    "generate_coefficients",
    "generate_points",
    "format_points",
    "main",
]

RAND_MAX = 2147483647
DEFAULT_SEED = 20242
_MASK32 = 0xFFFFFFFF


class LibcRandom:
    """Additive-feedback generator producing the same stream as glibc ``rand()``."""

    def __init__(self, seed=1):
        seed &= _MASK32
        if seed == 0:
            seed = 1
        word = seed - (1 << 32) if seed >= 1 << 31 else seed
        table = [word]
        for _ in range(30):
            hi = -((-word) // 127773) if word < 0 else word // 127773
            lo = word - hi * 127773
            word = 16807 * lo - 2836 * hi
            if word < 0:
                word += 2147483647
            table.append(word)
        table.extend(table[:3])
        self._window = deque((value & _MASK32 for value in table[3:]), maxlen=31)
        for _ in range(310):
            self._step()

    def _step(self):
        value = (self._window[0] + self._window[-3]) & _MASK32
        self._window.append(value)
        return value

    def rand(self):
        """Return the next value in ``[0, RAND_MAX]``."""
        return self._step() >> 1


def _noise(rng, count):
    return rng.rand() / (count * float(RAND_MAX))


def generate_coefficients(degree, count, rng):
    """Draw ``degree + 1`` coefficients, each about half the previous one."""
    if degree < 0:
        raise ValueError(f"degree must not be negative, got {degree}")
    if count <= 0:
        raise ValueError(f"count must be positive, got {count}")
    coefficients = [0.1]
    for _ in range(degree):
        coefficients.append(coefficients[-1] / 2 + _noise(rng, count))
    return coefficients


def _noisy_value(x, coefficients, rng, count):
    total = coefficients[0] + _noise(rng, count)
    power = 1.0
    for coefficient in coefficients[1:]:
        power *= x
        total += coefficient * power
    return total


def generate_points(count, degree, seed=DEFAULT_SEED):
    """Return ``count`` noisy ``(x, y)`` samples of a random polynomial."""
    if count <= 0:
        return []
    rng = LibcRandom(seed)
    coefficients = generate_coefficients(degree, count, rng)
    step = 1.0 / count
    x = _noise(rng, count)
    points = []
    for _ in range(count):
        points.append((x, _noisy_value(x, coefficients, rng, count)))
        x += step
    return points


def format_points(degree, count, points):
    """Render the degree, the count and the points in the fitter's input format."""
    lines = [str(degree), str(count)]
    lines.extend(f"{x:.15e} {y:.15e}" for x, y in points)
    return "\n".join(lines) + "\n"


def _leading_int(text):
    match = re.match(r"\s*[+-]?\d+", text)
    return int(match.group()) if match else 0


def main(argv=None):
    """Print generated points; arguments are the point count and the degree."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print(
            "uso: gera_entrada <K> <N>, onde <K> é a quantidade de pontos "
            "e <N> é o grau do polinômio"
        )
        return 1
    count = _leading_int(args[0])
    degree = _leading_int(args[1])
    points = generate_points(count, degree)
    sys.stdout.write(format_points(degree, count, points))
    return 0