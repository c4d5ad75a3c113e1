# src/docs_index/config.py

import codecs
import logging
from pathlib import Path, PurePosixPath, PureWindowsPath

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError

logger = logging.getLogger(__name__)


class IndexerConfig(BaseModel):
    """Configuration for loading, indexing and querying.

    Immutable. Explicit. No defaults pulled from the environment.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    pattern: str = "**/*.md"
    encoding: str = "utf-8"
    excerpt_length: int = Field(default=200, gt=0)
    default_limit: int = Field(default=10, gt=0)

    @field_validator("pattern")
    @classmethod
    def check_pattern(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("pattern must not be empty")
        if PurePosixPath(value).is_absolute() or PureWindowsPath(value).anchor:
            raise ValueError("pattern must be relative to the indexed directory")
        if ".." in PurePosixPath(value.replace("\\", "/")).parts:
            raise ValueError("pattern must not contain '..' segments")
        return value

    @field_validator("encoding")
    @classmethod
    def check_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError(f"unknown encoding: {value}")
        return value


def load_config(path: str | Path | None = None) -> IndexerConfig:
    """Load an IndexerConfig from a YAML file.

    Args:
        path: YAML file to read. None returns the defaults.

    Returns:
        Validated IndexerConfig.

    Raises:
        ConfigError: If the file is missing, is not valid YAML, is not a
            mapping, or fails validation.
    """
    if path is None:
        return IndexerConfig()

    path = Path(path)
    logger.debug("Loading config from %s", path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {path}: {e}") from e

    if data is None:
        return IndexerConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    try:
        return IndexerConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {path}: {e}") from e
