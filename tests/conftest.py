"""Shared fixtures: small plans/zips/request CSV files written into tmp_path."""

from pathlib import Path

import pytest


PLANS_CSV = """plan_id,state,metal_level,rate,rate_area
11111AA0000001,NY,Silver,200.00,7
11111AA0000002,NY,Silver,150.00,7
11111AA0000003,NY,Silver,150.0,7
11111AA0000004,NY,Silver,300.00,7
11111AA0000005,NY,Gold,120.00,7
22222BB0000001,NY,Silver,250.00,2
22222BB0000002,NY,Bronze,100.00,2
33333CC0000001,PR,Silver,310.10,1
33333CC0000002,PR,Silver,320.20,1
44444DD0000001,PR,Silver,410.00,4
44444DD0000002,PR,Silver,420.00,4
55555EE0000001,NJ,Silver,245.555,9
55555EE0000002,NJ,Silver,245.20,9
"""

ZIPS_CSV = """zipcode,state,county_code,name,rate_area
00601,PR,72001,Adjuntas,1
00601,PR,72141,Utuado,4
10001,NY,36061,New York,2
12345,NY,36093,Schenectady,7
12345,NY,36093,Schenectady,7
07001,NJ,34023,Middlesex,9
99999,NY,36001,Albany,3
"""

SLCSP_CSV = """zipcode,rate
12345,
00601,
10001,
54321,
07001,
99999,
12345,
"""



def write_csv(path: Path, content: str) -> str:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return str(path)


@pytest.fixture
def data_dir(tmp_path):
    d = tmp_path / "slcsp"
    write_csv(d / "plans.csv", PLANS_CSV)
    write_csv(d / "zips.csv", ZIPS_CSV)
    write_csv(d / "slcsp.csv", SLCSP_CSV)
    return d


@pytest.fixture
def input_paths(data_dir):
    return {
        "plans_path": str(data_dir / "plans.csv"),
        "zips_path": str(data_dir / "zips.csv"),
        "slcsp_path": str(data_dir / "slcsp.csv"),
        "output_path": str(data_dir / "slcsp_complete.csv"),
    }
