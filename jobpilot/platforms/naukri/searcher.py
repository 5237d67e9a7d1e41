"""Naukri search URL builder.

Pure functions - zero browser dependency.
"""

from urllib.parse import quote_plus, urlencode

from jobpilot.core.schemas import ExperienceLevel

# Naukri encodes experience as a "min-max" years range.
EXPERIENCE_RANGE_MAP: dict[ExperienceLevel, str] = {
    ExperienceLevel.ENTRY: "0-2",
    ExperienceLevel.MID: "2-5",
    ExperienceLevel.SENIOR: "5-10",
}

DEFAULT_EXPERIENCE_RANGE = "0-10"


def build_url(keyword: str, experience_level: ExperienceLevel, region: str = "India") -> str:
    """Build a Naukri jobs search URL.

    The region becomes part of the path (``jobs-in-<region>``).
    """
    slug = "-".join(region.lower().split()) or "india"
    params: dict[str, str] = {
        "k": keyword,
        "experience": EXPERIENCE_RANGE_MAP.get(experience_level, DEFAULT_EXPERIENCE_RANGE),
    }
    return f"https://www.naukri.com/jobs-in-{slug}?{urlencode(params, quote_via=quote_plus)}"
