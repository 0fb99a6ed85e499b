"""
Convert loaded CSV frames into typed records:
- Plans: Silver rows only, rate as Decimal, rate_area as int
- Zips: every row, ZIP zero-padded to 5 digits
- Request: ordered ZIP list, duplicates preserved
Malformed rows raise FieldParseError; nothing is silently dropped.
"""

from typing import List

import pandas as pd
from pydantic import ValidationError

from data_ingestion.errors import FieldParseError
from schemas.records import PlanRecord, ZipRecord, normalize_zipcode

SILVER = "Silver"

# Header is line 1, so DataFrame position 0 is line 2 of the file
HEADER_OFFSET = 2


def _parse_error(df: pd.DataFrame, position: int, err: ValidationError) -> FieldParseError:
    first = err.errors()[0]
    field = ".".join(str(part) for part in first["loc"]) or None
    filepath = df.attrs.get("filepath", "<input>")
    row_number = position + HEADER_OFFSET
    return FieldParseError(
        f"{filepath}, line {row_number}: invalid {field}: {first['msg']} (got {first.get('input')!r})",
        filepath=filepath,
        row_number=row_number,
        field=field,
    )


def to_plan_records(df: pd.DataFrame) -> List[PlanRecord]:
    """Parse the Silver rows of a plans frame. Other metal levels are not parsed."""
    silver = df[df["metal_level"] == SILVER]
    records = []
    for position, row in zip(df.index.get_indexer(silver.index), silver.itertuples(index=False)):
        try:
            records.append(PlanRecord(metal_level=row.metal_level, rate=row.rate, rate_area=row.rate_area))
        except ValidationError as e:
            raise _parse_error(df, position, e) from e
    return records


def to_zip_records(df: pd.DataFrame) -> List[ZipRecord]:
    records = []
    for position, row in enumerate(df.itertuples(index=False)):
        try:
            records.append(ZipRecord(zipcode=row.zipcode, rate_area=row.rate_area))
        except ValidationError as e:
            raise _parse_error(df, position, e) from e
    return records


def to_request_zipcodes(df: pd.DataFrame) -> List[str]:
    zipcodes = []
    for position, value in enumerate(df["zipcode"]):
        try:
            zipcodes.append(normalize_zipcode(value))
        except ValueError as e:
            filepath = df.attrs.get("filepath", "<input>")
            raise FieldParseError(
                f"{filepath}, line {position + HEADER_OFFSET}: invalid zipcode: {e}",
                filepath=filepath,
                row_number=position + HEADER_OFFSET,
                field="zipcode",
            ) from e
    return zipcodes
