"""CLI helpers for MARQUEE.

Utilities used by the command-line interface: URL sanitization for safe
display, stderr message emitters with emoji→ASCII fallbacks, and parsers for
option values.
"""

from .db_url import sanitize_url
from .messages import error, success, warn
from .params import WEEKDAY

__all__ = ["sanitize_url", "warn", "success", "error", "WEEKDAY"]
