"""Environment-driven settings."""
import os
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parent.parent

# Values already present in the environment win over the .env file
load_dotenv(ROOT_DIR / ".env", override=False)

DEFAULT_LANGUAGE = "pt"


def get_language() -> str:
    """Language for user-facing text (SHOPCART_LANGUAGE, default pt)."""
    return (os.environ.get("SHOPCART_LANGUAGE") or DEFAULT_LANGUAGE).strip().lower()


def is_production() -> bool:
    """True when SHOPCART_ENV=production."""
    return os.environ.get("SHOPCART_ENV", "").lower() == "production"
