"""
File: data_ingestion/load_csv.py
Purpose:
    Load the raw SLCSP input files (plans, zips, slcsp request list).
    - Normalizes column names
    - Keeps every cell as text so ZIP codes keep their leading zeros
    - Raises SourceReadError instead of returning partial data
"""


import os
import logging
import pandas as pd

from data_ingestion.errors import SourceReadError

PLAN_COLUMNS = ["metal_level", "rate", "rate_area"]
ZIP_COLUMNS = ["zipcode", "rate_area"]
SLCSP_COLUMNS = ["zipcode"]


def normalize_columns(columns: pd.Index) -> pd.Index:
    # Strip BOM/control chars, then lower-case with underscores
    columns = columns.str.encode('utf-8').str.decode('utf-8-sig').str.replace(r'[\x00-\x1F\x7F]', '', regex=True)
    return columns.str.strip().str.lower().str.replace(" ", "_").str.replace("-", "_")


def load_csv(filepath: str, required_columns, encodings=("utf-8", "latin1", "cp1252")) -> pd.DataFrame:
    """
    Load a comma-separated file with a header row into a string-typed DataFrame.

    Each encoding is tried in turn; any other failure (missing file, empty
    file, malformed CSV, missing required columns) raises SourceReadError.
    """
    if not os.path.isfile(filepath):
        raise SourceReadError(f"Missing input file: {filepath}", filepath=filepath)

    last_err = None
    for enc in encodings:
        try:
            df = pd.read_csv(filepath, dtype=str, keep_default_na=False, encoding=enc)
            logging.info(f"Loaded {filepath} with encoding {enc} ({len(df)} rows)")
            break
        except UnicodeDecodeError as e:
            logging.warning(f"Failed to load {filepath} with encoding {enc}: {e}")
            last_err = e
        except pd.errors.EmptyDataError as e:
            raise SourceReadError(f"Input file is empty: {filepath}", filepath=filepath) from e
        except (pd.errors.ParserError, OSError) as e:
            raise SourceReadError(f"Failed to read {filepath}: {e}", filepath=filepath) from e
    else:
        raise SourceReadError(f"All encoding attempts failed for {filepath}: {last_err}", filepath=filepath)

    df.columns = normalize_columns(df.columns)

    missing = [col for col in required_columns if col not in df.columns]
    if missing:
        raise SourceReadError(
            f"Missing required columns in {filepath}: {missing}. Found: {list(df.columns)}",
            filepath=filepath,
        )

    # Whitespace trim for all string fields
    for col in df.columns:
        df[col] = df[col].astype(str).str.strip()

    df.attrs["filepath"] = filepath
    return df


def load_plans_csv(filepath: str) -> pd.DataFrame:
    return load_csv(filepath, PLAN_COLUMNS)


def load_zips_csv(filepath: str) -> pd.DataFrame:
    return load_csv(filepath, ZIP_COLUMNS)


def load_slcsp_csv(filepath: str) -> pd.DataFrame:
    return load_csv(filepath, SLCSP_COLUMNS)
