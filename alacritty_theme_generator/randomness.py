"""Randomness sources for scheme generation.

A source is anything that quacks like :class:`random.Random`: it needs
``random()`` returning a float in [0, 1) and ``randrange(n)`` returning an
int in [0, n). Production code shares one :class:`random.SystemRandom`, which
reads from ``os.urandom`` and holds no state between calls, so concurrent
generators never race on it. Tests pass a seeded ``random.Random`` instead.
"""

import random

_system_source = random.SystemRandom()


def default_source():
    return _system_source


def seeded_source(seed):
    return random.Random(seed)


def random_float(source=None):
    return (source or _system_source).random()


def random_int(n, source=None):
    if n <= 0:
        raise ValueError(f"random_int needs a positive bound, got {n}")
    return (source or _system_source).randrange(n)


def jitter(source, spread):
    """Symmetric noise in [-spread/2, spread/2)."""
    return (source.random() - 0.5) * spread
