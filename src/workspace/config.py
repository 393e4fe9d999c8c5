"""Configuration management for Workspace."""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from .core.boards import DEFAULT_BOARDS, Board

logger = logging.getLogger(__name__)

WORKSPACE_HOME = Path(os.environ.get("WORKSPACE_HOME", Path.home() / "workspace"))
CONFIG_FILE = WORKSPACE_HOME / "config" / "workspace.conf"
DATA_DIR = WORKSPACE_HOME / "data"


@dataclass
class Config:
    """Workspace configuration."""

    data_dir: str = ""
    boards: list[Board] = field(default_factory=lambda: list(DEFAULT_BOARDS))
    board_rebuild_delay_ms: int = 150
    board_pin_limit: int = 25
    http_timeout: float = 10.0

    @property
    def resolved_data_dir(self) -> Path:
        """Data directory, defaulting to WORKSPACE_HOME/data."""
        if self.data_dir:
            return Path(self.data_dir).expanduser()
        return DATA_DIR


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from unquoted values."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def parse_boards(value: str) -> list[Board]:
    """
    Parse the BOARDS setting.

    JSON format: [{"name": "...", "url": "..."}]
    Simple format: "name1|url1,name2|url2"
    """
    boards = []
    if value.startswith("["):
        try:
            for item in json.loads(value):
                boards.append(Board(name=item["name"], url=item["url"]))
        except (json.JSONDecodeError, KeyError, TypeError) as e:
            logger.warning(f"Failed to parse BOARDS JSON: {e}")
            return []
    else:
        for entry in value.split(","):
            entry = entry.strip()
            if not entry:
                continue
            if "|" in entry:
                name, url = entry.split("|", 1)
                boards.append(Board(name.strip(), url.strip()))
            else:
                boards.append(Board(entry, entry))
    return boards


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from workspace.conf file."""
    config = Config()
    config_file = config_file or CONFIG_FILE

    if not config_file.exists():
        return config

    for line in config_file.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "data_dir":
                config.data_dir = value
            case "boards":
                boards = parse_boards(value)
                if boards:
                    config.boards = boards
            case "board_rebuild_delay_ms":
                try:
                    config.board_rebuild_delay_ms = max(0, int(value))
                except ValueError:
                    logger.warning(f"Invalid BOARD_REBUILD_DELAY_MS: {value}")
            case "board_pin_limit":
                try:
                    config.board_pin_limit = max(1, int(value))
                except ValueError:
                    logger.warning(f"Invalid BOARD_PIN_LIMIT: {value}")
            case "http_timeout":
                try:
                    config.http_timeout = float(value)
                except ValueError:
                    logger.warning(f"Invalid HTTP_TIMEOUT: {value}")

    return config
