"""
SLCSP Coverage Report

Summarizes a resolver run:
- Request row count and distinct ZIP count
- Counts per resolution status
- Percent of request rows resolved
- Diagnostic summary

Use this after a run to see why ZIP codes came back empty.
"""

from collections import Counter
from typing import Iterable

from schemas.records import ResolutionStatus, ResolvedRate


def summarize_resolutions(results: Iterable[ResolvedRate]):
    results = list(results)
    report = {}

    report["request_rows"] = len(results)
    report["unique_zipcodes"] = len({r.zipcode for r in results})

    counts = Counter(r.status for r in results)
    for status in ResolutionStatus:
        report[status.value] = counts.get(status, 0)

    report["resolved_pct"] = (
        report[ResolutionStatus.resolved.value] / len(results) * 100
        if results else 0
    )

    # Diagnostic interpretation
    if not results:
        report["diagnosis"] = "Request file listed no ZIP codes."
    elif report[ResolutionStatus.resolved.value] == 0:
        report["diagnosis"] = (
            "No ZIP code resolved. Check that the zips and plans files cover "
            "the same states and that the plans file contains Silver plans."
        )
    elif report[ResolutionStatus.zip_not_found.value] > len(results) / 2:
        report["diagnosis"] = (
            "Most requested ZIP codes are missing from the zips file; "
            "it may be from a different release than the request list."
        )
    else:
        report["diagnosis"] = "Unresolved rows are due to ambiguous or thinly covered rate areas."

    return report
