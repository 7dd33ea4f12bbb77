"""Configuration management for MTIE computation."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict
import tomllib

from .engine import DEFAULT_THRESHOLD, MtieEngine
from .errors import InvalidConfiguration


class LoggingConfig(BaseModel):
    """Logging configuration settings."""

    # Logging severity threshold (INFO/DEBUG/etc.).
    level: str = Field(default="WARNING", description="Logging level")
    # Emit JSON if True; otherwise emit a human-readable format.
    # Accepts the "json" key as well as the field name.
    json_format: bool = Field(
        default=False,
        validation_alias=AliasChoices("json", "json_format"),
        description="Emit JSON logs",
    )
    # Optional file path for log output; if None, logs go to stderr.
    log_file: str | None = Field(default=None, description="Optional log file path")
    # Maximum size (bytes) before log rotation.
    max_bytes: int = Field(default=1_000_000, description="Max log file size before rotation")
    # Number of backup files to retain.
    backup_count: int = Field(default=3, description="Number of rotated log files to keep")


class EngineConfig(BaseModel):
    """MTIE engine configuration."""

    # Largest series that still gets the exhaustive algorithm in auto mode.
    threshold: int = Field(default=DEFAULT_THRESHOLD, gt=0, description="Exhaustive/dyadic switch-over")
    # Thread pool size for the exhaustive per-interval scans.
    workers: int = Field(default=1, ge=1, description="Exhaustive scan workers")
    algorithm: Literal["auto", "exhaustive", "dyadic"] = Field(default="auto", description="Algorithm mode")


class MtieSettings(BaseSettings):
    """Configuration settings loaded from env or optional TOML."""

    # Environment keys use MTIE_ prefix and "__" nesting.
    model_config = SettingsConfigDict(env_prefix="MTIE_", env_nested_delimiter="__", extra="ignore")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    engine: EngineConfig = Field(default_factory=EngineConfig)

    @classmethod
    def from_toml(cls, path: str | Path) -> "MtieSettings":
        try:
            data = tomllib.loads(Path(path).read_text(encoding="utf-8"))
        except OSError as exc:
            raise InvalidConfiguration(f"cannot read settings file '{path}': {exc.strerror}") from exc
        except tomllib.TOMLDecodeError as exc:
            raise InvalidConfiguration(f"invalid TOML in '{path}': {exc}") from exc
        return load_settings(**data)

    def build_engine(self) -> MtieEngine:
        return MtieEngine(
            threshold=self.engine.threshold,
            workers=self.engine.workers,
            algorithm=self.engine.algorithm,
        )


def load_settings(**data: Any) -> MtieSettings:
    """Build settings, reporting validation failures as InvalidConfiguration."""

    try:
        return MtieSettings(**data)
    except ValidationError as exc:
        raise InvalidConfiguration(str(exc)) from exc
