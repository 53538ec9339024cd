"""
YAML file helpers.
Roster writes go through a temp file so a crash never leaves half a file.
"""
import os
import yaml
import tempfile
from pathlib import Path
from typing import Any, Dict
import logging

logger = logging.getLogger(__name__)


def atomic_write_yaml(filepath: Path, data: Dict[str, Any]) -> None:
    """
    Write ``data`` as YAML, replacing ``filepath`` in one step.

    Keys are written in insertion order so hand-edited files stay readable.

    Args:
        filepath: Target file path (``~`` is expanded)
        data: Dictionary to serialize

    Raises:
        IOError: If the directory cannot be created or the write fails
    """
    filepath = Path(filepath).expanduser()
    filepath.parent.mkdir(parents=True, exist_ok=True)

    fd, temp_path = tempfile.mkstemp(
        dir=filepath.parent,
        prefix=f".{filepath.stem}_",
        suffix=".tmp"
    )

    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            yaml.safe_dump(data, f, default_flow_style=False,
                           allow_unicode=True, sort_keys=False)
        os.replace(temp_path, filepath)
    except Exception as e:
        try:
            os.unlink(temp_path)
        except OSError:
            pass
        logger.error(f"Failed to write {filepath}: {e}")
        raise IOError(f"Atomic write failed: {e}") from e

    logger.debug(f"Wrote {filepath}")


def load_yaml(filepath: Path) -> Dict[str, Any]:
    """
    Load a YAML document.

    Args:
        filepath: Path to YAML file (``~`` is expanded)

    Returns:
        Parsed document; an empty file gives an empty dict

    Raises:
        FileNotFoundError: If file does not exist
        yaml.YAMLError: If file is malformed
        UnicodeDecodeError: If file is not valid UTF-8
    """
    filepath = Path(filepath).expanduser()

    if not filepath.exists():
        raise FileNotFoundError(f"File not found: {filepath}")

    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse {filepath}: {e}")
        raise

    logger.debug(f"Loaded {filepath}")
    return data if data is not None else {}

