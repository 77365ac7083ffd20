import yaml
from copy import deepcopy
from pathlib import Path
from typing import List, Optional, Literal, Dict, Any
from pydantic import BaseModel, Field, ValidationError, field_validator

from .chain.levels import LogLevel, parse_level
from .common.errors import AppError


def _coerce_level(value: Any) -> LogLevel:
    if isinstance(value, LogLevel):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return LogLevel(value)
        except ValueError as exc:
            raise ValueError(f"Unknown log level: {value!r}") from exc
    try:
        return parse_level(value)
    except AppError as exc:
        raise ValueError(str(exc)) from exc


class ChainConfig(BaseModel):
    order: List[LogLevel] = Field(
        default_factory=lambda: [LogLevel.INFO, LogLevel.DEBUG, LogLevel.ERROR]
    )

    @field_validator("order", mode="before")
    @classmethod
    def _parse_order(cls, value):
        if not isinstance(value, (list, tuple)):
            raise ValueError("chain.order must be a list of level names.")
        return [_coerce_level(item) for item in value]

    @field_validator("order")
    @classmethod
    def _validate_order(cls, value):
        if not value:
            raise ValueError("chain.order must name at least one level.")
        if len(set(value)) != len(value):
            raise ValueError("chain.order must not repeat a level.")
        return value

class MessageConfig(BaseModel):
    level: LogLevel
    text: str = ""

    @field_validator("level", mode="before")
    @classmethod
    def _parse_level(cls, value):
        return _coerce_level(value)

class LoggingConfig(BaseModel):
    console_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    logs_dir: Optional[str] = None

class AppConfig(BaseModel):
    chain: ChainConfig = ChainConfig()
    messages: List[MessageConfig] = Field(default_factory=list)
    logging: LoggingConfig = LoggingConfig()


def _load_yaml_mapping(path: Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Error parsing YAML config: {exc}")

    if not isinstance(data, dict):
        raise ValueError(f"Configuration file at {path} must contain a mapping at the top level.")
    return data


def _deep_merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    result = deepcopy(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _deep_merge_dicts(result[key], value)
        else:
            result[key] = value
    return result


def load_config(config_path: str) -> AppConfig:
    """
    Load YAML config, merge it with defaults, validate with Pydantic, and return a typed config object.
    Lists (chain.order, messages) are replaced wholesale, not merged item by item.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found at: {config_path}")

    default_config = _load_yaml_mapping(get_default_config_path())
    user_config = _load_yaml_mapping(path)
    merged_config = _deep_merge_dicts(default_config, user_config)

    try:
        config = AppConfig(**merged_config)
        return config
    except ValidationError as e:
        raise ValueError(f"Configuration validation failed: {e}")

def get_default_config_path() -> Path:
    """Returns the absolute path to the default config file."""
    return Path(__file__).parent / "resources" / "default.yaml"
