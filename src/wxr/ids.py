"""Identifier generators for entities added without an explicit id.

Any zero-argument callable returning an ``int`` can be passed to
:class:`~wxr.generator.WxrGenerator` as ``ids``.  No uniqueness check is
performed; collisions are the caller's concern.
"""

from __future__ import annotations

import itertools
import random
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wxr._types import IdGenerator

# Generated ids fall in [0, MAX_ID)
MAX_ID = 100_000


def random_id() -> int:
    """Return a random id in ``[0, MAX_ID)`` from the module-level RNG."""
    return random.randrange(MAX_ID)


def seeded(seed: int | str) -> IdGenerator:
    """Return a reproducible random id generator with its own RNG."""
    rng = random.Random(seed)

    def _next() -> int:
        return rng.randrange(MAX_ID)

    return _next


def sequence(start: int = 1) -> IdGenerator:
    """Return a generator counting up from ``start``.

    Values are taken modulo :data:`MAX_ID` so they stay in range.
    """
    counter = itertools.count(start)

    def _next() -> int:
        return next(counter) % MAX_ID

    return _next
