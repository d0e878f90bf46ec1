import sys
from pathlib import Path

# Base directory (works in dev + PyInstaller)
if getattr(sys, "frozen", False):
    BASE_DIR = Path(sys.executable).parent
else:
    BASE_DIR = Path(__file__).resolve().parent.parent

APP_ASSETS_DIR = BASE_DIR / "app" / "assets"
DEFAULT_PHOTO_PATH = APP_ASSETS_DIR / "profile.png"

# Runtime data, relative to the working directory
DATA_DIR = Path("Data")
PHOTOS_DIR = DATA_DIR / "Photos"
LOGS_DIR = DATA_DIR / "Logs"
LOG_FILE = LOGS_DIR / "profile.log"
