"""
selective_disclosure/config.py
Runtime settings and TOML schema loading.

Settings come from pydantic defaults overridden by SELECTIVE_DISCLOSURE_*
environment variables. A custom schema can be supplied as a TOML file:

    name = "intake"
    fields = ["name", "age", "ssn"]

    [profiles]
    clinic = ["name", "age"]
"""
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, FrozenSet, Literal, Optional, Union

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .fields import FieldRegistry
from .observability import setup_logging

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Library settings."""

    model_config = SettingsConfigDict(
        env_prefix="SELECTIVE_DISCLOSURE_",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: LogLevel = Field(default="INFO", description="Minimum log level")
    log_format: Literal["json", "console"] = Field(default="json", description="Log renderer")
    redact_pii: bool = Field(default=True, description="Redact field names and secrets in logs")
    schema_file: Optional[Path] = Field(default=None, description="TOML schema definition")


@dataclass(frozen=True)
class SchemaConfig:
    """A registry and its named profiles, loaded from TOML."""
    registry: FieldRegistry
    profiles: Dict[str, FrozenSet[str]] = field(default_factory=dict)


def load_schema(path: Union[str, Path]) -> SchemaConfig:
    """Load a field registry and profiles from a TOML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the TOML syntax is invalid
        ValueError: If ``fields`` is missing or malformed
        UnknownFieldError: If a profile names a field outside ``fields``
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Schema file not found: {path}")

    with path.open("rb") as f:
        data = tomllib.load(f)

    fields = data.get("fields")
    if not isinstance(fields, list):
        raise ValueError(f"Schema file {path} must define a 'fields' list")
    registry = FieldRegistry(fields, name=data.get("name", path.stem))

    profiles: Dict[str, FrozenSet[str]] = {}
    for profile, names in data.get("profiles", {}).items():
        # Resolve through the registry so unknown names fail here.
        profiles[profile] = frozenset(registry.field(n).name for n in names)

    return SchemaConfig(registry=registry, profiles=profiles)


def load_settings() -> Settings:
    return Settings()


def configure(settings: Optional[Settings] = None) -> Optional[SchemaConfig]:
    """Apply logging settings and load the configured schema, if any."""
    settings = settings or load_settings()
    schema = load_schema(settings.schema_file) if settings.schema_file else None
    setup_logging(
        level=settings.log_level,
        format=settings.log_format,
        redact_pii=settings.redact_pii,
        extra_sensitive_keys=schema.registry.names() if schema else (),
    )
    return schema
