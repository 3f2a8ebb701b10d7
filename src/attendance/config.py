"""Configuration management for Attendance."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_FILE = Path("attendance.conf")
STORE_FILE = Path("store.json")


@dataclass
class Config:
    """Attendance configuration."""

    store_path: Path = field(default_factory=lambda: STORE_FILE)
    indent: int = 2


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from an unquoted value."""
    if value[:1] in ('"', "'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(config_file: Path | str = CONFIG_FILE) -> Config:
    """Load configuration from attendance.conf. Missing file means defaults."""
    config = Config()
    config_file = Path(config_file)

    if not config_file.exists():
        return config

    for line in config_file.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "store_path":
                if value:
                    config.store_path = Path(value).expanduser()
            case "indent":
                try:
                    indent = int(value)
                except ValueError:
                    logger.warning(f"Invalid INDENT value {value!r}, using {config.indent}")
                    continue
                if indent < 0:
                    logger.warning(f"INDENT must not be negative, using {config.indent}")
                    continue
                config.indent = indent

    return config
