"""Logger to be used by various modules."""
import logging
from pathlib import Path
from typing import Optional


def get_logger(logger, propagate=False, log_dir: Optional[str] = None):
    """Attach a console handler, and a file handler if log_dir is set."""
    logFormatter = logging.Formatter(
        "%(asctime)s [%(name)s] [%(levelname)-5.5s]  %(message)s")
    if log_dir:
        file_path = Path(f"{log_dir}/{logger.name}.log")
        if not file_path.parent.exists():
            file_path.parent.mkdir(parents=True)
        fileHandler = logging.FileHandler(file_path, 'w')
        fileHandler.setFormatter(logFormatter)
        logger.addHandler(fileHandler)
    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        consoleHandler = logging.StreamHandler()
        consoleHandler.setFormatter(logFormatter)
        logger.addHandler(consoleHandler)
    logger.propagate = propagate
    return logger
