"""LinkedIn search URL builder.

Pure functions - zero browser dependency.
"""

from urllib.parse import quote_plus, urlencode

from jobpilot.core.schemas import ExperienceLevel

SEARCH_BASE = "https://www.linkedin.com/jobs/search/"

# Posted within the past week.
PAST_WEEK = "r604800"

EXPERIENCE_LEVEL_MAP: dict[ExperienceLevel, str] = {
    ExperienceLevel.ENTRY: "1",
    ExperienceLevel.MID: "2,3",
    ExperienceLevel.SENIOR: "4,5,6",
}


def build_url(keyword: str, experience_level: ExperienceLevel, region: str = "India") -> str:
    """Build a LinkedIn jobs search URL.

    Args:
        keyword: Job title to search for (will be URL-encoded).
        experience_level: Mapped onto LinkedIn's ``f_E`` filter codes.
        region: Free-text location filter.

    Returns:
        Fully qualified LinkedIn search URL.
    """
    params: dict[str, str] = {
        "keywords": keyword,
        "location": region,
        "f_TPR": PAST_WEEK,
        "f_E": EXPERIENCE_LEVEL_MAP[experience_level],
    }
    return f"{SEARCH_BASE}?{urlencode(params, quote_via=quote_plus)}"
