import logging

import pytest
import yaml
from pathlib import Path

from src.chain.processors import build_chain


@pytest.fixture
def chain():
    return build_chain()


@pytest.fixture
def write_config(tmp_path):
    def _write(data: dict, name: str = "config.yaml") -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def restore_root_logging():
    # setup_logger replaces root handlers; put pytest's back afterwards
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
