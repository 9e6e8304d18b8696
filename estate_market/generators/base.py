"""Base generator class for all seed generators."""

from __future__ import annotations

from abc import ABC
from typing import Sequence, TypeVar

from faker import Faker

T = TypeVar("T")

DEFAULT_LOCALE = "en_IN"


def cycle(pool: Sequence[T], index: int) -> T:
    """Pick from ``pool`` by index, wrapping around."""
    return pool[index % len(pool)]


def image_pair(pool: Sequence[str], index: int) -> list[str]:
    """Two consecutive images from ``pool`` starting at ``index``."""
    return [cycle(pool, index), cycle(pool, index + 1)]


class BaseGenerator(ABC):
    """Base class for all seed generators.

    Index-derived fields are fully deterministic. Anything drawn from Faker
    is reproducible only when a ``seed`` is given.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``en_IN``).
    """

    def __init__(
        self,
        seed: int | None = None,
        locale: str = DEFAULT_LOCALE,
    ) -> None:
        self.seed = seed
        self.fake = Faker(locale)
        if seed is not None:
            self.fake.seed_instance(seed)
