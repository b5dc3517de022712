# app/config.py

import os
import logging
from dotenv import load_dotenv

# --- Configuration ---
load_dotenv()

API_BASE_URL = os.getenv("ANALYSIS_API_BASE_URL", "http://localhost:3000").rstrip("/")
ANALYZE_ENDPOINT_PATH = "/api/analyze"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Sets up root logging once; later calls are no-ops if handlers already exist."""
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(level=level, format=LOG_FORMAT)
