"""
SLCSP Resolver

For each requested ZIP code:
1. The ZIP must map to exactly one rate area, otherwise it is unresolved.
2. That rate area must offer at least two distinct Silver rates,
   otherwise it is unresolved.
3. The answer is the second lowest distinct rate, rounded to cents.

Each request row is answered independently, in order, duplicates included.
"""

import logging
from typing import Callable, Iterable, List, Optional

from data_analysis.rate_area_index import RateAreaIndex
from data_analysis.zip_locality_index import ZipLocalityIndex
from schemas.records import ResolutionStatus, ResolvedRate

ResolutionObserver = Callable[[ResolvedRate], None]


def resolve_zipcode(zipcode: str, rate_index: RateAreaIndex, zip_index: ZipLocalityIndex) -> ResolvedRate:
    rate_areas = zip_index.rate_areas_for(zipcode)
    if not rate_areas:
        return ResolvedRate(zipcode=zipcode, status=ResolutionStatus.zip_not_found)
    if len(rate_areas) != 1:
        return ResolvedRate(zipcode=zipcode, status=ResolutionStatus.multiple_rate_areas)

    (rate_area,) = rate_areas
    rates = rate_index.rates_for(rate_area)
    if len(rates) < 2:
        return ResolvedRate(zipcode=zipcode, status=ResolutionStatus.insufficient_rates, rate_area=rate_area)

    return ResolvedRate(zipcode=zipcode, status=ResolutionStatus.resolved, rate=rates[1], rate_area=rate_area)


def resolve_slcsp(
    zipcodes: Iterable[str],
    rate_index: RateAreaIndex,
    zip_index: ZipLocalityIndex,
    on_resolved: Optional[ResolutionObserver] = None,
) -> List[ResolvedRate]:
    """
    Resolve every requested ZIP code against the two indexes.

    Args:
        zipcodes: Requested ZIP codes in output order
        rate_index: Frozen rate area -> sorted Silver rates index
        zip_index: ZIP -> rate areas index
        on_resolved: Optional observer called with each result as it is produced

    Returns:
        list[ResolvedRate]: One result per request entry, same order
    """
    results = []
    for zipcode in zipcodes:
        result = resolve_zipcode(zipcode, rate_index, zip_index)
        if on_resolved is not None:
            on_resolved(result)
        results.append(result)
    return results


def log_resolution(result: ResolvedRate) -> None:
    """Report a result as a `zipcode, rate` progress line."""
    logging.info(f"{result.zipcode}, {result.formatted_rate}")
