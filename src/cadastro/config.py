"""Runtime settings. No environment variables are read; the data file is relative to the working directory."""

import logging
from dataclasses import dataclass
from pathlib import Path

DATA_FILE = "pessoas.json"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
# Keep the interactive screen clean; raise to INFO to see load/save traces.
LOG_LEVEL = logging.WARNING


@dataclass(frozen=True)
class Settings:
    data_file: Path = Path(DATA_FILE)
    log_level: int = LOG_LEVEL
    log_format: str = LOG_FORMAT
