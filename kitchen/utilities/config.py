"""Configuration management for the Kitchen Assistant application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR: Final[Path] = Path(__file__).parent.parent

# Load environment variables from .env file if it exists
_env_path = BASE_DIR / '.env'
if _env_path.exists():
    load_dotenv(_env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '127.0.0.1')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# Inventory Alerts Configuration
EXPIRY_WARNING_DAYS: Final[int] = int(os.getenv('EXPIRY_WARNING_DAYS', '3'))

# File Paths
DATA_DIR: Final[Path] = Path(os.getenv('KITCHEN_DATA_DIR', str(BASE_DIR / 'data'))).resolve()
