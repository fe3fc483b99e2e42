# eng2p/utils/logger.py

"""
eng2p logger:
- Logging to terminal and, optionally, a file (dual output)
- Global logger setup for scripts and the pipeline
- log() helper with levels (debug, info, warning, error)
"""

import logging
import os
import sys
from datetime import datetime

LOG_FORMAT = "[%(asctime)s][%(levelname)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


# -------- Logger Class --------
class Eng2PLogger:
    """
    eng2p logger. Writes to stdout and an optional log file.
    """
    def __init__(self, log_file=None, verbose=True, level=logging.INFO):
        self.log_file = log_file
        self.verbose = verbose
        self.logger = logging.getLogger("eng2p")
        self.logger.setLevel(level)
        # Drop handlers from a previous setup
        if self.logger.hasHandlers():
            self.logger.handlers.clear()
        formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
        if verbose:
            ch = logging.StreamHandler(sys.stdout)
            ch.setLevel(level)
            ch.setFormatter(formatter)
            self.logger.addHandler(ch)
        if log_file is not None:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            fh = logging.FileHandler(log_file, encoding="utf-8")
            fh.setLevel(level)
            fh.setFormatter(formatter)
            self.logger.addHandler(fh)

    def debug(self, msg):
        self.logger.debug(msg)
    def info(self, msg):
        self.logger.info(msg)
    def warning(self, msg):
        self.logger.warning(msg)
    def error(self, msg):
        self.logger.error(msg)
    def close(self):
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)


# -------- Global Logger Setup --------
_global_logger = None

def setup_logger(log_file=None, verbose=True, level="info"):
    """
    Set up the global eng2p logger. Call it once from the main script.
    """
    global _global_logger
    if _global_logger is not None:
        _global_logger.close()
    _global_logger = Eng2PLogger(
        log_file=log_file,
        verbose=verbose,
        level=getattr(logging, str(level).upper(), logging.INFO),
    )
    return _global_logger

def log(msg, level="info"):
    """
    Log through the global eng2p logger; safe to call from anywhere.
    """
    global _global_logger
    if _global_logger is None:
        # Default: terminal only
        _global_logger = Eng2PLogger()
    if level == "debug":
        _global_logger.debug(msg)
    elif level == "info":
        _global_logger.info(msg)
    elif level == "warning":
        _global_logger.warning(msg)
    elif level == "error":
        _global_logger.error(msg)

def get_timestamp():
    return datetime.now().strftime("%Y-%m-%d_%H-%M-%S")


if __name__ == "__main__":
    # Demo/debug
    logger = setup_logger(f"logs/demo_{get_timestamp()}.log")
    log("Logger test: info")
    log("Logger test: warning", level="warning")
    log("Logger test: error", level="error")
    logger.close()
