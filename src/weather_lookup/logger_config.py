import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from weather_lookup.paths import LOGS, ensure_dirs

LOGGER_NAME = "weatherlookup"


def setup_logging(log_dir: str | None = None) -> logging.Logger:
    """Configure logging with rotation and formatting."""
    if log_dir is None:
        log_dir = str(LOGS)
        ensure_dirs()

    Path(log_dir).mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO)

    # Streamlit ajaa skriptin uudelleen joka vuorovaikutuksella -> ei tuplahandlereita
    if logger.handlers:
        return logger

    # Console handler
    console = logging.StreamHandler()
    console.setLevel(logging.INFO)

    # File handler with rotation
    file_handler = RotatingFileHandler(
        Path(log_dir) / "weatherlookup.log",
        maxBytes=5_000_000,  # 5 MB
        backupCount=3,
    )

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    console.setFormatter(formatter)
    file_handler.setFormatter(formatter)

    logger.addHandler(console)
    logger.addHandler(file_handler)

    return logger
