"""Configuration management for the SolarEdge monitoring client."""

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, SecretStr, field_validator

from solaredge_monitoring.credentials import Credentials
from solaredge_monitoring.endpoints.base import MONITORING_API_URL


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config.yml")


class CredentialsConfig(BaseModel):
    """Site id and api key of the monitored site."""

    site_id: str
    api_key: SecretStr

    def to_credentials(self) -> Credentials:
        return Credentials(site_id=self.site_id, api_key=self.api_key)


class ClientConfig(BaseModel):
    """Settings of the HTTP client."""

    base_url: str = MONITORING_API_URL
    timeout: Optional[float] = Field(default=None, gt=0)


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    level: str = Field(default="INFO")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Accept standard logging level names in any case."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown logging level: {v}")
        return level


class Config(BaseModel):
    """Main configuration for the monitoring client."""

    credentials: Optional[CredentialsConfig] = None
    client: ClientConfig = Field(default_factory=ClientConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from YAML file."""
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        raise FileNotFoundError(
            f"Configuration file not found: {config_path}. "
            f"Copy config.example.yml to config.yml and fill in your site id and api key."
        )

    logger.info("Loading configuration from %s", config_path)

    with open(config_path, "r", encoding="utf-8") as f:
        config_data = yaml.safe_load(f) or {}

    try:
        return Config(**config_data)
    except Exception as e:
        raise ValueError(f"Invalid configuration: {e}") from e


def load_credentials_file(path: Path) -> Credentials:
    """Load credentials from a two-line file: site id, then api key."""
    lines = path.read_text(encoding="utf-8").splitlines()
    site_id = lines[0].strip() if lines else ""
    api_key = lines[1].strip() if len(lines) > 1 else ""

    if not site_id or not api_key:
        raise ValueError(f"Ill formed credentials file: {path}")

    return Credentials(site_id=site_id, api_key=api_key)
