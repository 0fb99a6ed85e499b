"""
ZIP Locality Index

Maps each ZIP code to the set of rate areas it belongs to. Only membership
and cardinality are queried, so nothing is sorted. A ZIP code that never
appeared behaves exactly like one with no rate areas.
"""

import logging
from collections import defaultdict
from typing import Dict, FrozenSet, Iterable, Set

from schemas.records import ZipRecord

EMPTY: FrozenSet[int] = frozenset()


class ZipLocalityIndex:
    def __init__(self):
        self._areas: Dict[str, Set[int]] = defaultdict(set)

    def add(self, zipcode: str, rate_area: int) -> None:
        self._areas[zipcode].add(rate_area)

    def rate_areas_for(self, zipcode: str) -> FrozenSet[int]:
        areas = self._areas.get(zipcode)
        return frozenset(areas) if areas else EMPTY

    def __contains__(self, zipcode) -> bool:
        return zipcode in self._areas

    def __len__(self) -> int:
        return len(self._areas)


def build_zip_locality_index(zips: Iterable[ZipRecord]) -> ZipLocalityIndex:
    index = ZipLocalityIndex()
    for record in zips:
        index.add(record.zipcode, record.rate_area)
    logging.info(f"ZIP locality index built: {len(index)} ZIP codes")
    return index
