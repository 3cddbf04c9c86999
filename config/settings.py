import logging
import os
from pathlib import Path

try:
    from dotenv import load_dotenv

    DOTENV_AVAILABLE = True
except ImportError:
    DOTENV_AVAILABLE = False

# Logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Load .env if present and dotenv available
if DOTENV_AVAILABLE:
    env_path = Path(__file__).parent.parent / ".env"
    if env_path.exists():
        load_dotenv(env_path)
        logger.info(f"Loaded .env from {env_path}")
    else:
        logger.info("No .env file found - using environment variables")
else:
    logger.info("python-dotenv not available - using environment variables")


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring non-integer {name}={raw!r}; using {default}")
        return default


# Env variables
SITE_TITLE = os.getenv("SITE_TITLE", "Debug Patterns")
SITE_DESCRIPTION = os.getenv(
    "SITE_DESCRIPTION",
    "Explore common debugging patterns with ready to copy code to improve your "
    "development workflow.",
)
FOOTER_TEXT = os.getenv("FOOTER_TEXT", "Made with ❤️ by Silo-22")
RELATED_PATTERNS_LIMIT = _int_env("RELATED_PATTERNS_LIMIT", 2)
USE_CASE_PREVIEW_COUNT = _int_env("USE_CASE_PREVIEW_COUNT", 3)
STATIC_SITE_DIR = Path(os.getenv("STATIC_SITE_DIR", "site"))
