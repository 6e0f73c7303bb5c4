from __future__ import annotations
from math import comb
from typing import Generic, Iterator, List, Sequence, Tuple, TypeVar

T = TypeVar("T")


def count_combinations(n: int, k: int) -> int:
    """Number of combinations a fresh CombinationIterator over n items yields for size k."""
    if k <= 0 or k > n:
        return 0
    return comb(n, k)


class CombinationIterator(Generic[T]):
    """
    Iterates over all k-combinations of `items` in lexicographic index order.

    Each step yields a new tuple holding `items[i]` for the current indices.
    For lists and tuples these are the stored objects themselves; sequences
    that build a fresh value on indexing (numpy arrays, range) hand out those.
    Items are not checked for uniqueness, equal values at different positions
    count as different items.

    If k is 0 (or negative) or greater than len(items), nothing is produced.
    `items` is kept by reference and must not be mutated while iterating.
    """

    def __init__(self, items: Sequence[T], k: int):
        self.items: Sequence[T] = items
        # k > len(items) never produces anything, skip the index list
        self._indices: List[int] = list(range(k)) if k <= len(items) else []

    def __iter__(self) -> Iterator[Tuple[T, ...]]:
        return self

    def __next__(self) -> Tuple[T, ...]:
        r = self._indices
        m = len(self.items)
        k = len(r)
        if not r or k > m:
            raise StopIteration

        out = tuple(self.items[i] for i in r)

        for i in reversed(range(k)):
            if r[i] < m - (k - i):
                r[i] += 1
                for j in range(i + 1, k):
                    r[j] = r[i] + (j - i)
                return out

        # last combination handed out, next call stops
        r.clear()
        return out

    def __length_hint__(self) -> int:
        r = self._indices
        m = len(self.items)
        k = len(r)
        if not r or k > m:
            return 0
        # lex rank of r is C(m, k) - 1 - sum(C(m-1-r[i], k-i))
        return 1 + sum(comb(m - 1 - c, k - i) for i, c in enumerate(r))


class LazyCombinations(Generic[T]):

    def __init__(self, items: Sequence[T], k: int):
        self.items: Sequence[T] = items
        self.k: int = k

    def __iter__(self) -> CombinationIterator[T]:
        return CombinationIterator(self.items, self.k)

    def __len__(self) -> int:
        return count_combinations(len(self.items), self.k)
