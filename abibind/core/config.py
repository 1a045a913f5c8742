"""
Type mappings and configuration constants
"""

import logging
import os
from typing import Dict

from dotenv import load_dotenv

# Defaults
DEFAULT_PATTERN = "artifacts/**/*.json"
DEFAULT_OUT_DIR = "./src/typings"
CACHE_FILE_NAME = "abibind-cache.json"
INDEX_FILE_NAME = "index.ts"
ARTIFACT_GLOB = "**/*.json"

# Bytecode of abstract contracts and interfaces
EMPTY_BYTECODE = "0x"

# Output integers at or below this width fit a JS number without loss
NATIVE_NUMBER_MAX_BITS = 48

# TypeScript type names (ethers v4)
TS_INPUT_TYPES = {
    "int": "BigNumberish",
    "bytes": "Arrayish",
    "address": "string",
    "string": "string",
    "bool": "boolean",
    "void": "void",
}

TS_OUTPUT_TYPES = {
    "native_int": "number",
    "big_int": "BigNumber",
    "bytes": "string",
    "address": "string",
    "string": "string",
    "bool": "boolean",
    "void": "void",
}

TS_NULL = "null"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def load_settings() -> Dict[str, str]:
    """
    Read run settings from the environment (and a .env file, if present).

    Returns:
        Dict with pattern, out_dir and log_level
    """
    load_dotenv()
    return {
        "pattern": os.getenv("ABIBIND_PATTERN", DEFAULT_PATTERN),
        "out_dir": os.getenv("ABIBIND_OUT_DIR", DEFAULT_OUT_DIR),
        "log_level": os.getenv("ABIBIND_LOG_LEVEL", "WARNING"),
    }


def configure_logging(level: str = "WARNING") -> None:
    """Send library logs to stderr. Only the command line entry point calls this."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler()],
    )
