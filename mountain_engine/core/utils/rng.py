# mountain_engine/core/utils/rng.py
"""
Stateless seeded samplers.

Every random decision of the mountain is a pure function of
``(seed, x, y, layer)``, so the same seed always rebuilds the same mountain
and nothing has to be kept between calls.

Two samplers are available:

* ``"sine"``  - the classic ``frac(sin(dot) * 43758.5453)`` scrambler. Cheap and
  well spread, but it depends on the platform ``sin``.
* ``"splitmix"`` - integer-only splitmix64 mixing. Bit-exact everywhere.
"""
from __future__ import annotations
import math
from functools import partial
from typing import Callable, Union

# Frozen constants of the sine scrambler. Changing any of them changes every mountain.
SINE_X = 12.9898
SINE_Y = 78.233
SINE_LAYER = 45.543
SINE_GAIN = 43758.5453

SAMPLER_SINE = "sine"
SAMPLER_SPLITMIX = "splitmix"
SAMPLERS = (SAMPLER_SINE, SAMPLER_SPLITMIX)

_MASK64 = 0xFFFFFFFFFFFFFFFF

Sampler = Callable[[float, float, float], float]


# ==============================================================================
# Seed digests
# ==============================================================================

def seed_to_int(seed: str) -> int:
    """Rolling ``h = h * 31 + unit`` over UTF-16 code units, wrapped to signed 32 bit."""
    if not isinstance(seed, str):
        raise TypeError(f"seed must be str, got {type(seed).__name__}")
    data = seed.encode("utf-16-le", "surrogatepass")
    h = 0
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = (h * 31 + unit) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return h


def seed_from_any(x: Union[int, str, bytes]) -> int:
    """64-bit FNV-1a digest used by the integer sampler."""
    if isinstance(x, int):
        return x & _MASK64
    if isinstance(x, bytes):
        acc = 0xcbf29ce484222325
        for b in x:
            acc ^= b
            acc = (acc * 0x100000001B3) & _MASK64
        return acc
    if isinstance(x, str):
        return seed_from_any(x.encode("utf-8"))
    raise TypeError("Unsupported seed type")


# ==============================================================================
# Sine sampler
# ==============================================================================

def _sine01(seed_num: int, x: float, y: float, layer: float) -> float:
    n = math.sin(x * SINE_X + y * SINE_Y + layer * SINE_LAYER + seed_num) * SINE_GAIN
    r = n - math.floor(n)
    # tiny negative n rounds up to exactly 1.0
    if r >= 1.0:
        return 0.0
    return r


def sample(seed: str, x: float, y: float, layer: float) -> float:
    """Uniform-looking value in [0, 1) for ``(seed, x, y, layer)``."""
    return _sine01(seed_to_int(seed), x, y, layer)


# ==============================================================================
# Integer sampler
# ==============================================================================

def _splitmix64(x: int) -> int:
    x = (x + 0x9E3779B97F4A7C15) & _MASK64
    z = x
    z = (z ^ (z >> 30)) * 0xBF58476D1CE4E5B9 & _MASK64
    z = (z ^ (z >> 27)) * 0x94D049BB133111EB & _MASK64
    return z ^ (z >> 31)


def hash64(*vals: int) -> int:
    h = 0x84222325CBF29CE4
    for v in vals:
        h ^= v & _MASK64
        h = _splitmix64(h)
    return h


def _splitmix01(seed_num: int, x: float, y: float, layer: float) -> float:
    h = hash64(seed_num, math.floor(x), math.floor(y), math.floor(layer))
    return (h >> 11) * (1.0 / (1 << 53))


def sample_splitmix(seed: str, x: float, y: float, layer: float) -> float:
    """Integer-only counterpart of :func:`sample`. Coordinates are floored."""
    return _splitmix01(seed_from_any(seed), x, y, layer)


# ==============================================================================
# Bound samplers
# ==============================================================================

def make_sampler(seed: str, name: str = SAMPLER_SINE) -> Sampler:
    """
    Returns ``f(x, y, layer) -> float`` with the seed digest computed once.
    The builders call the sampler thousands of times per mountain.
    """
    if not isinstance(seed, str):
        raise TypeError(f"seed must be str, got {type(seed).__name__}")
    if name == SAMPLER_SINE:
        return partial(_sine01, seed_to_int(seed))
    if name == SAMPLER_SPLITMIX:
        return partial(_splitmix01, seed_from_any(seed))
    # local import: preset.validators imports SAMPLERS from here
    from ..preset.errors import ValidationError
    raise ValidationError(f"Unknown sampler '{name}', expected one of {SAMPLERS}")
