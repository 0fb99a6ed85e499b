"""
Build the completed SLCSP table

One row per requested ZIP code, in request order:
- zipcode: 5-digit ZIP as text
- rate: second lowest cost Silver rate with 2 decimals, or empty if unresolved
"""

import os
import logging
from uuid import uuid4
from typing import Iterable

import pandas as pd

from schemas.records import ResolvedRate

OUTPUT_COLUMNS = ["zipcode", "rate"]


def build_slcsp_table(results: Iterable[ResolvedRate]) -> pd.DataFrame:
    rows = [(r.zipcode, r.formatted_rate) for r in results]
    return pd.DataFrame(rows, columns=OUTPUT_COLUMNS, dtype=str)


def save_slcsp_as_csv(df: pd.DataFrame, output_path: str) -> None:
    """
    Save the SLCSP table as `zipcode,rate` CSV with LF line endings.

    The file is written next to its destination and moved into place, so
    the destination is either the complete table or untouched.
    """
    out_dir = os.path.dirname(os.path.abspath(output_path))
    os.makedirs(out_dir, exist_ok=True)

    # Created with open() rather than mkstemp so the umask applies as for a plain write
    tmp_path = os.path.join(out_dir, f".{os.path.basename(output_path)}.{uuid4().hex}.tmp")
    try:
        with open(tmp_path, "x", encoding="utf-8", newline="") as f:
            df[OUTPUT_COLUMNS].to_csv(f, index=False, lineterminator="\n")
        os.replace(tmp_path, output_path)
    except Exception:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise
    logging.info(f"Saved CSV file -> {output_path} ({len(df)} rows)")
