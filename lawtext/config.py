# config.py
"""
Central settings for the lawtext converters. Encoding assumptions, the
default filename mask and the logging format all live here so the tools
share one definition of them.
"""

import logging
import os
from dotenv import load_dotenv

# Load environment variables from a .env file (if one exists)
load_dotenv()

# --- Encodings ---
# The archive is assumed to be Windows-1251 throughout. There is no detection:
# a file in any other encoding either fails to decode (and is skipped) or is
# silently misread.
LEGACY_ENCODING = "windows-1251"
UNIVERSAL_ENCODING = "utf-8"

# --- Batch Defaults ---
# Same semantics as the wildcard filter: "*.*" only selects names with a dot.
DEFAULT_MASK = "*.*"

# --- Logging ---
# Only verbosity is configurable; it never changes what gets converted.
LOG_LEVEL = os.getenv("LAWTEXT_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def setup_logging(level: str = LOG_LEVEL):
    """Configure process-wide logging once, from a tool's main()."""
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
