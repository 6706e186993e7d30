"""Utility functions for the facility-seir package."""

from datetime import date
from datetime import datetime
from enum import Enum
from json import JSONEncoder
from pathlib import Path
from typing import Optional

import numpy as np


class NumpyJSONEncoder(JSONEncoder):
    """Custom JSON encoder for NumPy values, dates, paths, and enumerations."""

    def default(self, obj):
        if isinstance(obj, Enum):
            return obj.value
        if isinstance(obj, np.integer):
            return int(obj)
        if isinstance(obj, np.floating):
            return float(obj)
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        if isinstance(obj, (date, datetime)):
            return obj.isoformat()
        if isinstance(obj, Path):
            return str(obj)
        return JSONEncoder.default(self, obj)


def as_date(value) -> Optional[date]:
    """
    Coerce a date, datetime, or ISO 8601 string to a calendar date.

    Returns None for None so callers can treat a missing date as "skip this record".
    """

    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    # fromisoformat only accepts a trailing "Z" from Python 3.11
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text).date()
