from __future__ import annotations

from enum import Enum, IntEnum


class ViewMode(str, Enum):
    QUANTITY = "quantity"
    VALUE = "value"


class IntensityBucket(IntEnum):
    NONE = 0
    VERY_LOW = 1
    LOW = 2
    MEDIUM = 3
    HIGH = 4
    VERY_HIGH = 5


class ReportFormat(str, Enum):
    HTML = "html"
    MD = "md"
