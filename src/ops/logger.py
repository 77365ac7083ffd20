import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional

def setup_logger(run_id: str, console_level: str = "WARNING", logs_dir: Optional[str] = None) -> logging.Logger:
    """
    Configures the root logger:
    - Console: stderr at console_level (stdout is reserved for processor output)
    - File: DEBUG level (logs_dir/debug_{timestamp}_{run_id}.log), only when logs_dir is set
    """
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG)

    # Clear existing handlers to avoid duplicates during re-runs or tests
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logs_dir:
        log_path = Path(logs_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        filename = f"debug_{datetime.now().strftime('%Y%m%d_%H%M%S')}_{run_id}.log"
        file_handler = logging.FileHandler(log_path / filename, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
