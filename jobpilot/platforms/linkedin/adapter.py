"""LinkedIn adapter - wires URL builder, card parser and Easy Apply flow."""

from jobpilot.core.schemas import ExperienceLevel
from jobpilot.platforms.apply_flow import FlowSpec
from jobpilot.platforms.browser_adapter import BrowserSiteAdapter
from jobpilot.platforms.linkedin import selectors
from jobpilot.platforms.linkedin.searcher import build_url
from jobpilot.platforms.parser import CardParser, CardSelectors
from jobpilot.profile.schema import CandidateProfile

LINKEDIN_BASE = "https://www.linkedin.com"
COVER_LETTER_SKILLS = 5


class LinkedInAdapter(BrowserSiteAdapter):
    """LinkedIn public job search and Easy Apply."""

    card_selectors = selectors.CARD_SELECTORS

    @property
    def site_id(self) -> str:
        return "linkedin"

    @property
    def domains(self) -> tuple[str, ...]:
        return ("linkedin.com",)

    def build_search_url(self, title: str, experience_level: ExperienceLevel) -> str:
        return build_url(title, experience_level, self._search.region)

    def card_parser(self) -> CardParser:
        return CardParser(
            source="LinkedIn",
            base_url=LINKEDIN_BASE,
            selectors=CardSelectors(
                title=selectors.TITLE_SELECTORS,
                link=selectors.LINK_SELECTORS,
                company=selectors.COMPANY_SELECTORS,
                location=selectors.LOCATION_SELECTORS,
                posted_date=selectors.POSTED_DATE_SELECTORS,
            ),
        )

    def flow_spec(self) -> FlowSpec:
        return FlowSpec(
            site_name="LinkedIn",
            already_applied_selectors=selectors.ALREADY_APPLIED_SELECTORS,
            entry_selectors=selectors.EASY_APPLY_SELECTORS,
            next_selectors=selectors.NEXT_SELECTORS,
            success_selectors=selectors.SUCCESS_SELECTORS,
            phone_selectors=selectors.PHONE_SELECTORS,
            cover_letter_selectors=selectors.COVER_LETTER_SELECTORS,
            entry_settle_s=2.0,
        )

    def cover_letter(self, profile: CandidateProfile) -> str:
        skills = ", ".join(profile.skills[:COVER_LETTER_SKILLS])
        return (
            "Dear Hiring Manager,\n\n"
            f"{profile.summary}\n\n"
            f"Key Skills: {skills}\n\n"
            "I am excited about this opportunity and would love to contribute to your team.\n\n"
            "Best regards,\n"
            f"{profile.personal_info.name}"
        )
