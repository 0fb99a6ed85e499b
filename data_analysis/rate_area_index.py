"""
Rate Area Index

Maps each rate area to the ascending, de-duplicated Silver rates offered in it.

The index is built in two phases: rates are accumulated into per-area sets,
then `freeze()` sorts every set exactly once. After freezing the index is
read-only; rank 0 is the lowest rate and rank 1 the second lowest.
"""

import logging
from collections import defaultdict
from decimal import Decimal
from typing import Dict, Iterable, Set, Tuple

from schemas.records import PlanRecord

SILVER = "Silver"


class RateAreaIndex:
    def __init__(self):
        self._pending: Dict[int, Set[Decimal]] = defaultdict(set)
        self._sorted: Dict[int, Tuple[Decimal, ...]] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def add(self, rate_area: int, rate: Decimal) -> None:
        if self._frozen:
            raise RuntimeError("RateAreaIndex is frozen; no more rates can be added")
        # Decimal equality is by value, so 10.50 and 10.500 collapse here
        self._pending[rate_area].add(rate)

    def freeze(self) -> "RateAreaIndex":
        if not self._frozen:
            self._sorted = {area: tuple(sorted(rates)) for area, rates in self._pending.items()}
            self._pending = defaultdict(set)
            self._frozen = True
        return self

    def rates_for(self, rate_area: int) -> Tuple[Decimal, ...]:
        """Sorted distinct Silver rates for `rate_area`, or () if it has none."""
        if not self._frozen:
            raise RuntimeError("RateAreaIndex must be frozen before it is queried")
        return self._sorted.get(rate_area, ())

    def rate_areas(self):
        if not self._frozen:
            raise RuntimeError("RateAreaIndex must be frozen before it is queried")
        return sorted(self._sorted)

    def __contains__(self, rate_area) -> bool:
        return rate_area in (self._sorted if self._frozen else self._pending)

    def __len__(self) -> int:
        return len(self._sorted if self._frozen else self._pending)


def build_rate_area_index(plans: Iterable[PlanRecord]) -> RateAreaIndex:
    """Accumulate every Silver plan rate by rate area, then freeze."""
    index = RateAreaIndex()
    for plan in plans:
        if plan.metal_level == SILVER:
            index.add(plan.rate_area, plan.rate)
    index.freeze()
    logging.info(f"Rate area index built: {len(index)} rate areas with Silver plans")
    return index
