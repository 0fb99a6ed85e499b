"""
Run configuration.

Paths default to the slcsp/ data directory next to the working directory.
Any value can be overridden from the environment or a .env file using the
SLCSP_ prefix (e.g. SLCSP_DATA_DIR, SLCSP_OUTPUT_PATH).
"""

import os
from dotenv import load_dotenv

load_dotenv()

DATA_DIR = os.getenv("SLCSP_DATA_DIR", "slcsp")

PLANS_PATH = os.getenv("SLCSP_PLANS_PATH", os.path.join(DATA_DIR, "plans.csv"))
ZIPS_PATH = os.getenv("SLCSP_ZIPS_PATH", os.path.join(DATA_DIR, "zips.csv"))
SLCSP_PATH = os.getenv("SLCSP_SLCSP_PATH", os.path.join(DATA_DIR, "slcsp.csv"))
OUTPUT_PATH = os.getenv("SLCSP_OUTPUT_PATH", os.path.join(DATA_DIR, "slcsp_complete.csv"))

LOG_LEVEL = os.getenv("SLCSP_LOG_LEVEL", "INFO").upper()
