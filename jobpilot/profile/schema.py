"""CandidateProfile model and its YAML round-trip (config/profile.yaml)."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator


class PersonalInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str | None = None
    github: str | None = None


class ExperienceEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    company: str
    duration: str = ""
    description: str = ""


class EducationEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    degree: str
    institution: str = ""
    year: str = ""


class ProjectEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    technologies: list[str] = Field(default_factory=list)


class CandidateProfile(BaseModel):
    """Structured candidate background used to fill application forms.

    Immutable once produced; adapters read it, never modify it.
    """

    model_config = ConfigDict(frozen=True)

    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    summary: str = ""
    experience: list[ExperienceEntry] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)
    projects: list[ProjectEntry] = Field(default_factory=list)

    @field_validator("skills")
    @classmethod
    def skills_unique(cls, v: list[str]) -> list[str]:
        """Drop repeated skill names, keeping first-seen order."""
        seen: set[str] = set()
        unique: list[str] = []
        for skill in v:
            key = skill.strip().lower()
            if key and key not in seen:
                seen.add(key)
                unique.append(skill.strip())
        return unique

    @classmethod
    def from_yaml(cls, path: str | Path) -> "CandidateProfile":
        """Load a profile from a YAML file."""
        path = Path(path)
        if not path.exists():
            msg = f"Profile file not found: {path}"
            raise FileNotFoundError(msg)
        raw: dict[str, Any] = yaml.safe_load(path.read_text()) or {}
        return cls.model_validate(raw)

    def to_yaml(self, path: str | Path) -> None:
        """Write the profile to a YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        data = self.model_dump()
        path.write_text(yaml.dump(data, default_flow_style=False, sort_keys=False))
