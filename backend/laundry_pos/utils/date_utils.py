# backend/laundry_pos/utils/date_utils.py
from datetime import datetime
from typing import Optional

DISPLAY_DATE_FORMAT = "%d/%m/%Y"

def format_display_date(value: Optional[datetime]) -> str:
    """
    Format a timestamp for display as DD/MM/YYYY.
    Missing dates render as an empty string.
    """
    if value is None:
        return ""
    return value.strftime(DISPLAY_DATE_FORMAT)
