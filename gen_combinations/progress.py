from __future__ import annotations
from itertools import islice
from typing import Generic, Iterator, Optional, Sequence, Tuple, TypeVar

from tqdm.auto import tqdm

from gen_combinations.lazy_combinations import CombinationIterator, count_combinations
from gen_combinations.progress_conf import ProgressConfig

T = TypeVar("T")


class ProgressEnumerator(Generic[T]):
    """
    Walks the combinations of `items` lazily behind a tqdm progress bar.

    cfg.limit caps the number of produced combinations. With cfg.verbose a
    start line, every cfg.log_every-th combination and a summary are printed.
    """

    def __init__(self, items: Sequence[T], k: int, cfg: Optional[ProgressConfig] = None):
        self.items = items
        self.k = k
        self.cfg = cfg if cfg is not None else ProgressConfig()

    def total(self) -> int:
        self.cfg.validate()
        n = count_combinations(len(self.items), self.k)
        if self.cfg.limit is not None:
            n = min(n, self.cfg.limit)
        return n

    def __iter__(self) -> Iterator[Tuple[T, ...]]:
        cfg = self.cfg
        total = self.total()
        if cfg.verbose:
            print(f"[Comb] n={len(self.items)} k={self.k} -> {total} combinations")

        produced = 0
        with tqdm(total=total, desc=cfg.desc, unit=cfg.unit, disable=not cfg.progress) as pbar:
            for combo in islice(CombinationIterator(self.items, self.k), cfg.limit):
                produced += 1
                pbar.update(1)
                if cfg.verbose and cfg.log_every and produced % cfg.log_every == 0:
                    print(f"[Comb] #{produced}: {combo}")
                yield combo

        if cfg.verbose:
            print(f"[Comb] done: produced={produced}")

    def run(self) -> int:
        produced = 0
        for _ in self:
            produced += 1
        return produced
