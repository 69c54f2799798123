from __future__ import annotations

# Required third-party libraries: python-dotenv, python-dateutil

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

PERSONS_FILENAME = "persons.txt"
DEMERITS_FILENAME = "demeritPoints.txt"


@dataclass
class Config:
    data_dir: Path
    persons_file: Path
    demerits_file: Path


def load_config() -> Config:
    load_dotenv()

    data_dir = Path(os.getenv("DEMERITS_DATA_DIR") or ".")
    persons_file = Path(os.getenv("PERSONS_FILE") or data_dir / PERSONS_FILENAME)
    demerits_file = Path(os.getenv("DEMERITS_FILE") or data_dir / DEMERITS_FILENAME)

    return Config(
        data_dir=data_dir,
        persons_file=persons_file,
        demerits_file=demerits_file,
    )


def config_for_dir(data_dir: Path) -> Config:
    """Build a config that keeps both files under ``data_dir``."""

    data_dir = Path(data_dir)
    return Config(
        data_dir=data_dir,
        persons_file=data_dir / PERSONS_FILENAME,
        demerits_file=data_dir / DEMERITS_FILENAME,
    )
