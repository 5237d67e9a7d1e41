"""Heuristic resume-text to CandidateProfile extraction.

Every field is found by an independent pattern search and has a safe
default, so extract_profile() never raises and form fillers never need to
branch on missing data. Only email, phone, links, name, skills, employer
names and degree lines are genuinely extracted; the rest are placeholders.
"""

import logging
import re
from pathlib import Path

from jobpilot.profile.extractor import extract_text
from jobpilot.profile.schema import (
    CandidateProfile,
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ProjectEntry,
)

logger = logging.getLogger(__name__)

MAX_EXPERIENCE_ENTRIES = 3
MAX_EDUCATION_ENTRIES = 2
MAX_PROJECT_TECHNOLOGIES = 5

DEFAULT_LOCATION = "India"
DEFAULT_SUMMARY = "Experienced software developer with expertise in modern web technologies"

# Reference vocabulary; extracted skills keep this order.
SKILL_VOCABULARY: tuple[str, ...] = (
    "JavaScript", "TypeScript", "Python", "Java", "C++", "C#", "PHP", "Ruby",
    "Go", "Rust", "React", "Angular", "Vue", "Node.js", "Express", "Django",
    "Flask", "Spring", "Laravel", "HTML", "CSS", "Sass", "Bootstrap",
    "Tailwind", "MongoDB", "PostgreSQL", "MySQL", "Redis", "AWS", "Azure",
    "GCP", "Docker", "Kubernetes", "Git", "Jenkins", "GraphQL", "REST API",
)

_EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
_PHONE_RE = re.compile(r"(\+\d{1,3}\s?)?\(?\d{3}\)?[\s.-]?\d{3}[\s.-]?\d{4}")
_LINKEDIN_RE = re.compile(r"linkedin\.com/in/[\w-]+", re.IGNORECASE)
_GITHUB_RE = re.compile(r"github\.com/[\w-]+", re.IGNORECASE)

_SKILLS_SECTION_RE = re.compile(
    r"(?:skills|technologies|technical skills|programming languages)[:\s]+(.*?)(?:\n\s*\n|$)",
    re.IGNORECASE | re.DOTALL,
)
_EXPERIENCE_SECTION_RE = re.compile(
    r"(?:experience|work experience|employment)[:\s]+(.*?)(?:education|skills|projects|$)",
    re.IGNORECASE | re.DOTALL,
)
_EDUCATION_SECTION_RE = re.compile(
    r"(?:education|academic background)[:\s]+(.*?)(?:experience|skills|projects|$)",
    re.IGNORECASE | re.DOTALL,
)
_PROJECTS_SECTION_RE = re.compile(
    r"(?:projects|personal projects|key projects)[:\s]+",
    re.IGNORECASE,
)

# Capitalized phrase on one line ending in an organization suffix; the length
# bound keeps matching linear on long single-line PDF text.
_COMPANY_RE = re.compile(
    r"[A-Z][a-zA-Z &]{0,80}(?:Inc\.|LLC|Ltd\.|Corp\.|Company|Technologies|Systems|Solutions)"
)
_DEGREE_RE = re.compile(
    r"(?:Bachelor|Master|PhD|B\.E\.|B\.Tech|M\.Tech|M\.S\.|B\.S\.)[^\n]*",
    re.IGNORECASE,
)

DEFAULT_PROFILE = CandidateProfile(
    personal_info=PersonalInfo(
        name="John Developer",
        email="john.developer@email.com",
        phone="+91-9876543210",
        location="Mumbai, India",
        linkedin="linkedin.com/in/johndeveloper",
        github="github.com/johndeveloper",
    ),
    summary=(
        "Experienced Full Stack Developer with 3+ years of experience in React, "
        "Node.js, and modern web technologies. Passionate about building scalable "
        "applications and learning new technologies."
    ),
    experience=[
        ExperienceEntry(
            title="Software Developer",
            company="Tech Solutions Inc.",
            duration="2+ years",
            description=(
                "Developed and maintained web applications using React, Node.js, and MongoDB"
            ),
        ),
    ],
    skills=["JavaScript", "TypeScript", "React", "Node.js", "MongoDB", "PostgreSQL", "AWS", "Git"],
    education=[
        EducationEntry(
            degree="B.Tech in Computer Science",
            institution="Indian Institute of Technology",
            year="2021",
        ),
    ],
    projects=[
        ProjectEntry(
            name="E-commerce Platform",
            description="Full-stack e-commerce application with payment integration",
            technologies=["React", "Node.js", "MongoDB", "Stripe"],
        ),
    ],
)


def parse_resume(source_path: str | Path) -> CandidateProfile:
    """Build a profile from a resume file.

    A missing file is not an error: the canned DEFAULT_PROFILE is returned
    so a demo run still has a complete, consistent profile.

    Raises:
        ImportError: If the file is a PDF and pymupdf is not installed.
    """
    path = Path(source_path)
    if not path.exists():
        logger.warning("Resume file not found at %s - using default profile", path)
        return DEFAULT_PROFILE.model_copy(deep=True)

    text = extract_text(path)
    logger.info("Extracted %d characters from %s", len(text), path)
    return extract_profile(text)


def extract_profile(resume_text: str) -> CandidateProfile:
    """Extract a CandidateProfile from resume plain text. Never raises."""
    logger.info("Parsing resume text (%d chars)", len(resume_text))

    skills = _extract_skills(resume_text)
    profile = CandidateProfile(
        personal_info=PersonalInfo(
            name=_extract_name(resume_text),
            email=_first_match(_EMAIL_RE, resume_text),
            phone=_first_match(_PHONE_RE, resume_text),
            location=DEFAULT_LOCATION,
            linkedin=_first_match(_LINKEDIN_RE, resume_text),
            github=_first_match(_GITHUB_RE, resume_text),
        ),
        summary=DEFAULT_SUMMARY,
        experience=_extract_experience(resume_text),
        skills=skills,
        education=_extract_education(resume_text),
        projects=_extract_projects(resume_text, skills),
    )

    logger.info(
        "Parsed profile for '%s': %d skills, %d experience, %d education",
        profile.personal_info.name,
        len(profile.skills),
        len(profile.experience),
        len(profile.education),
    )
    return profile


def _first_match(pattern: re.Pattern[str], text: str) -> str:
    match = pattern.search(text)
    return match.group(0) if match else ""


def _extract_name(text: str) -> str:
    for line in text.splitlines():
        if line.strip():
            return line.strip()
    return ""


def _extract_skills(text: str) -> list[str]:
    """Vocabulary terms found in the skills section or anywhere in the text.

    No skills heading means no skills, even if terms appear elsewhere.
    """
    section = _SKILLS_SECTION_RE.search(text)
    if section is None:
        return []

    section_text = section.group(1).lower()
    full_text = text.lower()
    return [
        skill for skill in SKILL_VOCABULARY
        if skill.lower() in section_text or skill.lower() in full_text
    ]


def _extract_experience(text: str) -> list[ExperienceEntry]:
    section = _EXPERIENCE_SECTION_RE.search(text)
    if section is None:
        return []

    companies = [m.group(0).strip() for m in _COMPANY_RE.finditer(section.group(1))]
    return [
        ExperienceEntry(
            title="Software Developer",
            company=company,
            duration="2+ years",
            description="Developed and maintained software applications",
        )
        for company in companies[:MAX_EXPERIENCE_ENTRIES]
    ]


def _extract_education(text: str) -> list[EducationEntry]:
    section = _EDUCATION_SECTION_RE.search(text)
    if section is None:
        return []

    degrees = [m.group(0).strip() for m in _DEGREE_RE.finditer(section.group(1))]
    return [
        EducationEntry(degree=degree, institution="University", year="2020")
        for degree in degrees[:MAX_EDUCATION_ENTRIES]
    ]


def _extract_projects(text: str, skills: list[str]) -> list[ProjectEntry]:
    # Project content is not parsed; a heading yields one placeholder entry.
    if _PROJECTS_SECTION_RE.search(text) is None:
        return []
    return [
        ProjectEntry(
            name="Portfolio Website",
            description="Personal portfolio showcasing development skills",
            technologies=skills[:MAX_PROJECT_TECHNOLOGIES],
        ),
    ]
