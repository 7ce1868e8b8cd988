# utils/logger.py
import logging
import os
from logging.handlers import TimedRotatingFileHandler

LOG_DIR = os.path.join("assets", "logs")
LOG_NAME = "hawler_prayer.log"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


def setup_logging(log_dir: str = LOG_DIR, level: str = "INFO", console: bool = True):
    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, LOG_NAME)
    log_level = getattr(logging, str(level).upper(), logging.INFO)

    logger = logging.getLogger()
    logger.setLevel(log_level)

    # Clean old handlers (avoid duplicates when main.py reloads)
    if logger.hasHandlers():
        logger.handlers.clear()

    # --- FILE HANDLER (rotates daily, keeps 14 days) ---
    file_handler = TimedRotatingFileHandler(
        log_path,
        when="midnight",
        interval=1,
        backupCount=14,
        encoding="utf-8"
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(file_handler)

    # --- CONSOLE HANDLER (off while the terminal display owns the screen) ---
    if console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(console_handler)

    logging.info(f"[LOG] Logging initialized → {log_path}")
