"""Container name generation.

Names are a fixed ``container_`` tag followed by a random alphanumeric
suffix.  Uniqueness is statistical only; no lookup against existing
containers is made.
"""

from __future__ import annotations

import random
import string

CONTAINER_NAME_PREFIX: str = "container_"
NAME_SUFFIX_LENGTH: int = 10
NAME_ALPHABET: str = string.ascii_letters + string.digits


def generate_container_name(rng: random.Random | None = None) -> str:
    """Return a new container name such as ``container_a8Xk2LmQ0z``.

    Parameters
    ----------
    rng:
        Random source to draw from.  Defaults to the process-wide
        :mod:`random` state; pass a seeded :class:`random.Random` for
        repeatable output.
    """
    source = rng if rng is not None else random
    suffix = "".join(source.choices(NAME_ALPHABET, k=NAME_SUFFIX_LENGTH))
    return f"{CONTAINER_NAME_PREFIX}{suffix}"
