"""Run a function over items concurrently with bounded parallelism."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")
V = TypeVar("V")

DEFAULT_PARALLELISM = 5


@dataclass(frozen=True)
class ParConfig:
    """How many calls may run at once."""

    parallelism: int = DEFAULT_PARALLELISM

    def __post_init__(self) -> None:
        if self.parallelism < 1:
            raise ValueError(f"parallelism must be positive, got {self.parallelism}")


def par_for(
    items: Iterable[T],
    fn: Callable[[T], object],
    parallelism: int = DEFAULT_PARALLELISM,
) -> None:
    """Call ``fn`` on every item concurrently and wait for all of them."""
    par_map(items, fn, parallelism)


def par_map(
    items: Iterable[T],
    fn: Callable[[T], V],
    parallelism: int = DEFAULT_PARALLELISM,
) -> list[V]:
    """Map ``fn`` over the items concurrently; results keep the input order."""
    cfg = ParConfig(parallelism)
    work = list(items)
    if not work:
        return []
    with ThreadPoolExecutor(max_workers=cfg.parallelism) as pool:
        futures = [pool.submit(fn, item) for item in work]
        return [future.result() for future in futures]