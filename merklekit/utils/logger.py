"""
Logging for MerkleKit.

Everything logs under the "merklekit" logger. The engine modules only emit
DEBUG records (tree depth, missing proof targets), so nothing is printed
unless the CLI runs with --debug or a caller lowers the level.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import colorlog

ROOT_LOGGER = "merklekit"
LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)-8s %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class MerkleKitLogger:
    """Configures the merklekit logger once per process (or per reset)."""

    _initialized = False
    _log_dir: Optional[Path] = None

    @classmethod
    def setup(
        cls,
        level: int = logging.INFO,
        log_dir: Optional[str] = None,
        log_to_file: bool = False,
    ):
        """
        Attach a colored stderr handler, plus merklekit.log when log_to_file is set.

        Args:
            level: Threshold for the logger and its handlers
            log_dir: Where merklekit.log goes (./logs when None)
            log_to_file: Whether to add the file handler
        """
        if cls._initialized:
            return

        root_logger = logging.getLogger(ROOT_LOGGER)
        root_logger.setLevel(level)
        root_logger.handlers.clear()

        # stderr keeps stdout clean for roots and proof JSON
        console_handler = colorlog.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(
            colorlog.ColoredFormatter(
                "%(log_color)s%(asctime)s [%(name)s] %(levelname)-8s%(reset)s %(message)s",
                datefmt=DATE_FORMAT,
                log_colors={
                    "DEBUG": "cyan",
                    "INFO": "green",
                    "WARNING": "yellow",
                    "ERROR": "red",
                    "CRITICAL": "red,bg_white",
                },
            )
        )
        root_logger.addHandler(console_handler)

        if log_to_file:
            cls._log_dir = Path(log_dir) if log_dir else Path("logs")
            cls._log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(cls._log_dir / "merklekit.log")
            file_handler.setLevel(level)
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
            root_logger.addHandler(file_handler)

        cls._initialized = True

    @classmethod
    def reset(cls):
        """Close and drop handlers so the next setup() starts fresh."""
        root_logger = logging.getLogger(ROOT_LOGGER)
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
            handler.close()
        cls._initialized = False
        cls._log_dir = None

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        if not cls._initialized:
            cls.setup()
        return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def get_logger(name: str) -> logging.Logger:
    """Logger for one subsystem, e.g. get_logger("proof") -> merklekit.proof"""
    return MerkleKitLogger.get_logger(name)


def setup_logging(
    level: int = logging.INFO,
    log_dir: Optional[str] = None,
    log_to_file: bool = False,
):
    """Reconfigure logging, replacing handlers from any earlier setup."""
    MerkleKitLogger.reset()
    MerkleKitLogger.setup(level=level, log_dir=log_dir, log_to_file=log_to_file)
