from .errors import InvalidTimestampError
from .utils.time import format_seconds_ago, format_time_ago, to_utc, utc_now

__version__ = "0.1.0"

__all__ = [
    "InvalidTimestampError",
    "format_seconds_ago",
    "format_time_ago",
    "to_utc",
    "utc_now",
    "__version__",
]
