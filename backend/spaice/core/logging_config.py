import logging
import os
import sys
from pathlib import Path
from dotenv import load_dotenv

# Load the .env file
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(env_path)

LOG_DIR = Path(os.getenv("LOG_DIR", str(Path(__file__).parent.parent.parent / "logs")))


def _get_log_level() -> int:
    """Log level from the LOG_LEVEL environment variable."""
    log_level_str = os.getenv("LOG_LEVEL", "INFO").upper()

    level_mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }

    return level_mapping.get(log_level_str, logging.INFO)


def setup_logging() -> None:
    """Configure logging for the application."""
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    log_level = _get_log_level()

    LOG_DIR.mkdir(parents=True, exist_ok=True)

    # Root logger
    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        handlers=[
            logging.StreamHandler(sys.stdout),  # console
            logging.FileHandler(
                LOG_DIR / "app.log",
                encoding="utf-8",
            ),  # file
        ],
    )

    # Third-party libraries
    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(logging.INFO)
    logging.getLogger("httpx").setLevel(logging.WARNING)

