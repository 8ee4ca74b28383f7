"""
Shared utilities for the tournament statistics engine.

This module provides common functions used across multiple modules
to avoid code duplication.
"""

import logging
import shutil
import tempfile
from pathlib import Path

from tourney.config import ALLOWED_TOURNAMENT_TYPES, OUTPUT_FOLDER


# --- Logging Setup ---
def setup_logging(name: str | None = None, level: int = logging.INFO) -> logging.Logger:
    """Return the named logger, attaching the shared stream handler once."""
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


# --- File Operations ---
def cleanup_old_files(pattern: str, keep_file: Path | None = None, folder: Path | None = None) -> list[Path]:
    """
    Delete stale report exports.

    Args:
        pattern: Glob for one tournament's exports (e.g., "cup_standings_*.csv")
        keep_file: The export just written, left in place
        folder: Export folder (default: OUTPUT_FOLDER)

    Returns:
        Paths that were removed
    """
    logger = setup_logging(__name__)
    target_folder = folder or OUTPUT_FOLDER
    deleted = []

    for f in target_folder.glob(pattern):
        if keep_file and f.resolve() == keep_file.resolve():
            continue
        try:
            f.unlink()
            deleted.append(f)
            logger.debug(f"Deleted old file: {f}")
        except OSError as e:
            logger.warning(f"Could not delete {f}: {e}")

    return deleted


def atomic_write_csv(df, path: Path, **kwargs) -> None:
    """
    Write a DataFrame to CSV atomically using a temporary file.

    Args:
        df: pandas DataFrame to write
        path: Destination path for the CSV file
        **kwargs: Additional arguments to pass to df.to_csv()
    """
    logger = setup_logging(__name__)

    path.parent.mkdir(parents=True, exist_ok=True)

    tmp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            mode='w',
            delete=False,
            suffix='.csv',
            dir=path.parent  # Same filesystem for atomic move
        ) as tmp:
            tmp_path = Path(tmp.name)
        df.to_csv(tmp_path, **kwargs)

        shutil.move(str(tmp_path), str(path))
        logger.debug(f"Atomically wrote {len(df)} rows to {path}")

    except Exception:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise


# --- Validation ---
def validate_tournament_type(tournament_type: str) -> str:
    """
    Normalize and validate a tournament type name.

    Args:
        tournament_type: Type name, any case (e.g. "group", "ELIMINATORY")

    Returns:
        The upper-cased type name

    Raises:
        ValueError: If the type is not in ALLOWED_TOURNAMENT_TYPES
    """
    normalized = str(tournament_type).strip().upper()
    if normalized not in ALLOWED_TOURNAMENT_TYPES:
        raise ValueError(
            f"Invalid tournament type: '{tournament_type}'. "
            f"Allowed values: {', '.join(sorted(ALLOWED_TOURNAMENT_TYPES))}"
        )
    return normalized


def validate_input_size(text: str, max_size: int) -> None:
    """Reject tournament documents longer than max_size (raises ValueError)."""
    if len(text) > max_size:
        raise ValueError(
            f"Input too large: {len(text):,} bytes. "
            f"Maximum allowed: {max_size:,} bytes"
        )


__all__ = [
    # Logging
    'setup_logging',
    # File operations
    'cleanup_old_files',
    'atomic_write_csv',
    # Validation
    'validate_tournament_type',
    'validate_input_size',
]
