"""Configuration models and YAML loader for jobpilot."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

KNOWN_SITES = ("linkedin", "naukri")

DEFAULT_RECENCY_MARKERS: list[str] = [
    "day",
    "hour",
    "today",
    "yesterday",
    "1 week",
    "2 day",
    "3 day",
    "4 day",
    "5 day",
    "6 day",
]

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


class BrowserConfig(BaseModel):
    """Browser session configuration."""

    headless: bool = True
    timeout_ms: int = Field(default=30000, ge=1000)
    user_agent: str = DEFAULT_USER_AGENT


class SearchSettings(BaseModel):
    """Job search fan-out settings."""

    region: str = "India"
    sites: list[str] = Field(default_factory=lambda: list(KNOWN_SITES))
    max_results_per_site: int = Field(default=10, ge=1, le=10)
    results_timeout_ms: int = Field(default=10000, ge=1000)
    recency_markers: list[str] = Field(default_factory=lambda: list(DEFAULT_RECENCY_MARKERS))

    @field_validator("sites")
    @classmethod
    def sites_known(cls, v: list[str]) -> list[str]:
        sites = [s.lower().strip() for s in v]
        unknown = [s for s in sites if s not in KNOWN_SITES]
        if unknown:
            msg = f"unknown site(s) {unknown}; supported: {list(KNOWN_SITES)}"
            raise ValueError(msg)
        if not sites:
            msg = "at least one site must be configured"
            raise ValueError(msg)
        return sites


class ApplySettings(BaseModel):
    """Application state machine bounds and settle delays (seconds)."""

    max_steps: int = Field(default=5, ge=1, le=5)
    step_settle_s: float = Field(default=2.0, ge=0.0)
    submit_settle_s: float = Field(default=3.0, ge=0.0)
    max_concurrent: int = Field(default=1, ge=1)


class ResumeSettings(BaseModel):
    """Where the resume is read from when no path is given."""

    source_path: str = "/tmp/resume.pdf"


class DatabaseConfig(BaseModel):
    """Database configuration."""

    path: str = "data/jobpilot.db"


class Settings(BaseModel):
    """Top-level settings loaded from YAML."""

    browser: BrowserConfig = Field(default_factory=BrowserConfig)
    search: SearchSettings = Field(default_factory=SearchSettings)
    apply: ApplySettings = Field(default_factory=ApplySettings)
    resume: ResumeSettings = Field(default_factory=ResumeSettings)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Settings":
        """Load settings from a YAML file."""
        path = Path(path)
        if not path.exists():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)
        raw: dict[str, Any] = yaml.safe_load(path.read_text()) or {}
        return cls.model_validate(raw)
