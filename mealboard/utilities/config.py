"""Configuration management for the meal board application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'INFO').upper()

# Document store: "json" (files under DATA_DIR), "http" (remote document API) or "memory"
STORE_BACKEND: Final[str] = os.getenv('STORE_BACKEND', 'json').lower()
STORE_URL: Final[str] = os.getenv('STORE_URL', 'http://localhost:8080/v1')
STORE_TIMEOUT: Final[float] = float(os.getenv('STORE_TIMEOUT', '10'))

# Calendar: first day of the week, 0 = Sunday .. 6 = Saturday
WEEK_STARTS_ON: Final[int] = int(os.getenv('WEEK_STARTS_ON', '0')) % 7

# Diagnostics ring buffer size
MAX_DIAGNOSTIC_EVENTS: Final[int] = int(os.getenv('MAX_DIAGNOSTIC_EVENTS', '300'))

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('DATA_DIR', str(BASE_DIR / 'data'))).resolve()
STATIC_DIR: Final[Path] = BASE_DIR / 'static'
TEMPLATES_DIR: Final[Path] = BASE_DIR / 'templates'
