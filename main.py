"""
File: main.py
Purpose:
    Entry point for the SLCSP (second lowest cost Silver plan) pipeline.
    - Loads plans and zips, builds both indexes
    - Resolves every ZIP code in the request file, in order
    - Saves the completed table to the output file
    - Logs a coverage summary
"""

import sys
import logging

import config
from data_ingestion.errors import FieldParseError, SourceReadError
from data_ingestion.load_csv import load_plans_csv, load_slcsp_csv, load_zips_csv
from data_ingestion.normalize_fields import to_plan_records, to_request_zipcodes, to_zip_records
from data_analysis.rate_area_index import build_rate_area_index
from data_analysis.zip_locality_index import build_zip_locality_index
from data_analysis.resolve_slcsp import log_resolution, resolve_slcsp
from data_analysis.build_slcsp_table import build_slcsp_table, save_slcsp_as_csv
from utils.coverage_report import summarize_resolutions


def run_pipeline(plans_path, zips_path, slcsp_path, output_path, on_resolved=log_resolution):
    # Both indexes are complete before any ZIP is resolved
    rate_index = build_rate_area_index(to_plan_records(load_plans_csv(plans_path)))
    zip_index = build_zip_locality_index(to_zip_records(load_zips_csv(zips_path)))
    zipcodes = to_request_zipcodes(load_slcsp_csv(slcsp_path))

    if on_resolved is not None:
        logging.info("zipcode, rate")
    results = resolve_slcsp(zipcodes, rate_index, zip_index, on_resolved=on_resolved)

    save_slcsp_as_csv(build_slcsp_table(results), output_path)
    return results


def main():
    logging.basicConfig(level=config.LOG_LEVEL, format='%(asctime)s %(levelname)s: %(message)s')

    try:
        results = run_pipeline(config.PLANS_PATH, config.ZIPS_PATH, config.SLCSP_PATH, config.OUTPUT_PATH)
    except (SourceReadError, FieldParseError) as e:
        logging.error(f"SLCSP run aborted, no output written: {e}")
        sys.exit(1)

    for key, value in summarize_resolutions(results).items():
        logging.info(f"{key}: {value}")

    logging.info(f"SUCCESS: Output saved to {config.OUTPUT_PATH}")


if __name__ == "__main__":
    main()
