"""Service configuration: YAML loader and Pydantic models."""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

DEFAULTS_PATH = Path(__file__).with_name("defaults.yaml")


# ── Output formats ───────────────────────────────────────────────────


class FormatConfig(BaseModel):
    """Label and content type reported for one style."""

    model_config = ConfigDict(frozen=True)

    label: str
    content_type: str = "text/html"
    extension: str = ""

    @field_validator("label")
    @classmethod
    def label_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Format label must not be blank")
        return v


# ── RIS ──────────────────────────────────────────────────────────────


class RisConfig(BaseModel):
    """Field/tag tables for the RIS interchange output."""

    model_config = ConfigDict(frozen=True)

    field_tags: dict[str, list[str]] = Field(default_factory=dict)
    type_codes: dict[str, str] = Field(default_factory=dict)
    role_suffixes: dict[str, str] = Field(default_factory=dict)
    default_type: str = "GEN"

    @field_validator("field_tags")
    @classmethod
    def upper_case_tags(cls, v: dict[str, list[str]]) -> dict[str, list[str]]:
        return {field: [t.strip().upper() for t in tags] for field, tags in v.items()}

    @field_validator("type_codes")
    @classmethod
    def upper_case_types(cls, v: dict[str, str]) -> dict[str, str]:
        return {fmt: code.strip().upper() for fmt, code in v.items()}

    @field_validator("default_type")
    @classmethod
    def upper_case_default(cls, v: str) -> str:
        return v.strip().upper()


# ── Legal ────────────────────────────────────────────────────────────


class LegalConfig(BaseModel):
    """Bluebook renderer settings."""

    model_config = ConfigDict(frozen=True)

    thesis_sources: list[str] = Field(default_factory=lambda: ["libraetd"])


# ── Service config (top-level) ───────────────────────────────────────


class ServiceConfig(BaseModel):
    """Top-level configuration for every renderer."""

    model_config = ConfigDict(frozen=True)

    formats: dict[str, FormatConfig]
    ris: RisConfig = Field(default_factory=RisConfig)
    legal: LegalConfig = Field(default_factory=LegalConfig)

    def format_for(self, style: str) -> FormatConfig:
        """Configured format for ``style``; unconfigured styles get the key
        itself as label."""
        return self.formats.get(style) or FormatConfig(label=style)


def load_config(path: str | Path | None = None) -> ServiceConfig:
    """Load a YAML service config; ``None`` loads the packaged defaults."""
    path = Path(path) if path is not None else DEFAULTS_PATH
    with open(path) as f:
        raw = yaml.safe_load(f)
    config = ServiceConfig.model_validate(raw)
    logger.info("Loaded citation config from %s (%d formats)", path, len(config.formats))
    return config
