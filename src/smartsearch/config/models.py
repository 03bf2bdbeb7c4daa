"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (SMARTSEARCH__SECTION__KEY)
3. YAML config (explicit path or ~/.config/smartsearch/config.yaml)
4. Built-in defaults (this file)

Environment Variable Format:
    SMARTSEARCH__<SECTION>__<KEY>=<VALUE>

Examples:
    SMARTSEARCH__LOGGING__LEVEL=DEBUG
    SMARTSEARCH__VAULT__PATH=/home/me/Obsidian_Vault
    SMARTSEARCH__SEARCH__DEFAULT_THRESHOLD=0.5
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from smartsearch.config.constants import (
    DEFAULT_LIMIT,
    DEFAULT_THRESHOLD,
    ENCODER_MAX_CHARS,
    MAX_NOTE_CHARS,
    MODEL_ID,
    SEARCH_MAX_LIMIT,
)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v == "stderr":
            return v
        if v == "stdout":
            raise ValueError("stdout is reserved for the MCP stdio transport")
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        SMARTSEARCH__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every skipped record file.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class VaultConfig(BaseModel):
    """Vault location and note reading.

    Env vars:
        SMARTSEARCH__VAULT__PATH: Vault root (falls back to OBSIDIAN_VAULT_PATH)
        SMARTSEARCH__VAULT__MAX_NOTE_CHARS: Truncate notes longer than this
    """

    path: str | None = Field(
        default=None,
        description="Absolute path to the Obsidian vault root.",
    )
    max_note_chars: int = Field(
        default=MAX_NOTE_CHARS,
        description="Notes longer than this many characters are truncated by read_note.",
    )

    @field_validator("max_note_chars")
    @classmethod
    def validate_max_note_chars(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"max_note_chars must be positive, got {v}")
        return v


class SearchConfig(BaseModel):
    """Ranking defaults applied when a caller omits an option.

    Env vars:
        SMARTSEARCH__SEARCH__DEFAULT_LIMIT: Default number of results
        SMARTSEARCH__SEARCH__DEFAULT_THRESHOLD: Default similarity floor
    """

    default_limit: int = Field(
        default=DEFAULT_LIMIT,
        description="Default result cap. Per-call limits are clamped to SEARCH_MAX_LIMIT.",
    )
    default_threshold: float = Field(
        default=DEFAULT_THRESHOLD,
        description="Default minimum cosine similarity. "
        "TRADEOFF: Lower values surface weaker matches.",
    )

    @field_validator("default_limit")
    @classmethod
    def validate_default_limit(cls, v: int) -> int:
        if not (1 <= v <= SEARCH_MAX_LIMIT):
            raise ValueError(f"default_limit must be 1-{SEARCH_MAX_LIMIT}, got {v}")
        return v

    @field_validator("default_threshold")
    @classmethod
    def validate_default_threshold(cls, v: float) -> float:
        if not (-1.0 <= v <= 1.0):
            raise ValueError(f"default_threshold must be within [-1, 1], got {v}")
        return v


class EncoderConfig(BaseModel):
    """Query encoder configuration.

    Env vars:
        SMARTSEARCH__ENCODER__MODEL_ID: Model used to encode queries
        SMARTSEARCH__ENCODER__THREADS: ONNX Runtime threads (default: half the CPUs)
    """

    model_id: str = Field(
        default=MODEL_ID,
        description="Must match the model Smart Connections used for the vault.",
    )
    model_file: str = Field(
        default="onnx/model.onnx",
        description="ONNX file inside the model repository.",
    )
    dimensions: int = Field(
        default=384,
        description="Output dimensionality of the model.",
    )
    max_chars: int = Field(
        default=ENCODER_MAX_CHARS,
        description="Queries are cut to this many characters to fit the 512-token window.",
    )
    threads: int | None = Field(
        default=None,
        description="ONNX Runtime threads. None picks half the available CPUs.",
    )


class SmartSearchConfig(BaseModel):
    """Root configuration for SmartSearch.

    All settings can be configured via:
    1. Environment variables: SMARTSEARCH__SECTION__KEY
    2. YAML config files
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    vault: VaultConfig = Field(default_factory=VaultConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    encoder: EncoderConfig = Field(default_factory=EncoderConfig)
