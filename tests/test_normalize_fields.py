"""Tests for converting loaded frames into typed records."""

from decimal import Decimal

import pandas as pd
import pytest

from data_ingestion.errors import FieldParseError
from data_ingestion.load_csv import load_plans_csv
from data_ingestion.normalize_fields import to_plan_records, to_request_zipcodes, to_zip_records


def test_plan_records_are_silver_only(input_paths):
    plans = to_plan_records(load_plans_csv(input_paths["plans_path"]))
    assert len(plans) == 11
    assert all(p.metal_level == "Silver" for p in plans)
    assert plans[0].rate == Decimal("200.00")
    assert plans[0].rate_area == 7


def test_metal_level_match_is_case_sensitive():
    df = pd.DataFrame({"metal_level": ["silver", "SILVER", "Silver"], "rate": ["1", "2", "3"], "rate_area": ["1", "1", "1"]})
    plans = to_plan_records(df)
    assert [p.rate for p in plans] == [Decimal("3")]


def test_non_numeric_silver_rate_raises_with_line_number():
    df = pd.DataFrame({"metal_level": ["Silver", "Silver"], "rate": ["100.00", "abc"], "rate_area": ["1", "1"]})
    df.attrs["filepath"] = "plans.csv"
    with pytest.raises(FieldParseError) as excinfo:
        to_plan_records(df)
    assert excinfo.value.row_number == 3
    assert excinfo.value.field == "rate"
    assert "plans.csv, line 3" in str(excinfo.value)


def test_non_numeric_rate_on_other_metal_is_ignored():
    df = pd.DataFrame({"metal_level": ["Gold", "Silver"], "rate": ["n/a", "10.50"], "rate_area": ["x", "1"]})
    assert len(to_plan_records(df)) == 1


def test_bad_rate_area_raises():
    df = pd.DataFrame({"zipcode": ["10001"], "rate_area": ["two"]})
    with pytest.raises(FieldParseError) as excinfo:
        to_zip_records(df)
    assert excinfo.value.field == "rate_area"
    assert excinfo.value.row_number == 2


def test_zip_records_zero_pad_short_codes():
    df = pd.DataFrame({"zipcode": ["601", "10001"], "rate_area": ["1", "2"]})
    assert [z.zipcode for z in to_zip_records(df)] == ["00601", "10001"]


def test_request_zipcodes_keep_order_and_duplicates():
    df = pd.DataFrame({"zipcode": ["12345", "00601", "12345"]})
    assert to_request_zipcodes(df) == ["12345", "00601", "12345"]


def test_request_zipcode_must_be_digits():
    df = pd.DataFrame({"zipcode": ["12345", "ABCDE"]})
    with pytest.raises(FieldParseError, match="line 3"):
        to_request_zipcodes(df)


def test_blank_request_zipcode_raises():
    df = pd.DataFrame({"zipcode": ["12345", "  "]})
    with pytest.raises(FieldParseError, match="line 3"):
        to_request_zipcodes(df)


def test_blank_zipcode_in_zips_raises():
    df = pd.DataFrame({"zipcode": [""], "rate_area": ["3"]})
    with pytest.raises(FieldParseError) as excinfo:
        to_zip_records(df)
    assert excinfo.value.field == "zipcode"


@pytest.mark.parametrize("rate", ["NaN", "Infinity", "-inf"])
def test_non_finite_silver_rate_raises(rate):
    df = pd.DataFrame({"metal_level": ["Silver"], "rate": [rate], "rate_area": ["1"]})
    with pytest.raises(FieldParseError) as excinfo:
        to_plan_records(df)
    assert excinfo.value.field == "rate"
