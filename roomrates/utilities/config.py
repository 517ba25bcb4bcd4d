"""Configuration management for the room rates calendar."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'

# Display
CURRENCY_SYMBOL: Final[str] = os.getenv('CURRENCY_SYMBOL', '₹')

# Event log buffer size exposed through /api/events
MAX_EVENTS: Final[int] = int(os.getenv('MAX_EVENTS', '300'))

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = BASE_DIR / 'data'
ROOMS_SEED_FILE: Final[Path] = Path(os.getenv('ROOMS_SEED_FILE', str(DATA_DIR / 'rooms.json')))
