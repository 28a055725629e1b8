"""Environment-driven settings for the gridcalc command."""

from __future__ import annotations

import os

LOG_LEVEL = os.getenv("GRIDCALC_LOG_LEVEL", "WARNING").upper()

# Read by click as the --unit default
UNIT_ENVVAR = "GRIDCALC_UNIT"
