"""
setup_imports.py

Centralized module imports for Maritime Zone Systems.
This ensures all service modules load logging, .env settings and data packages consistently.
"""

import os
import logging
import json

# ✅ Load environment variables from .env file (before reading any settings)
from dotenv import load_dotenv

load_dotenv()

# ✅ Configure Logging (Move this before any logging calls)
logging.basicConfig(
    level=os.environ.get("ZONE_LOG_LEVEL", "INFO"),
    format='%(asctime)s - %(levelname)s - %(message)s',
)

# ✅ Data Handling
import pandas as pd
import numpy as np

# ✅ Web & API Requests
import requests

# ✅ Utility Functions
from typing import Dict, List, Tuple, Optional

logging.debug("✅ Loaded setup_imports for consistent imports across modules.")

if not os.getenv("DATABASE_URL"):
    logging.debug("[WARN] DATABASE_URL not found; using local SQLite default.")
