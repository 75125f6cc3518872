"""CLI helpers for codegen-naming.

Utilities used by the command-line interface: parsing of NAME=LEVEL logger
options and stderr message emitters with emoji→ASCII fallbacks.
"""

from .log_level_parser import parse_log_level
from .messages import warn

__all__ = ["parse_log_level", "warn"]
