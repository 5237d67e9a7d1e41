"""Naukri adapter - wires URL builder, card parser and apply flow."""

from jobpilot.core.schemas import ExperienceLevel
from jobpilot.platforms.apply_flow import FlowSpec
from jobpilot.platforms.browser_adapter import BrowserSiteAdapter
from jobpilot.platforms.naukri import selectors
from jobpilot.platforms.naukri.searcher import build_url
from jobpilot.platforms.parser import CardParser, CardSelectors
from jobpilot.profile.schema import CandidateProfile

NAUKRI_BASE = "https://www.naukri.com"


class NaukriAdapter(BrowserSiteAdapter):
    """Naukri job search and apply."""

    card_selectors = selectors.CARD_SELECTORS

    @property
    def site_id(self) -> str:
        return "naukri"

    @property
    def domains(self) -> tuple[str, ...]:
        return ("naukri.com",)

    def build_search_url(self, title: str, experience_level: ExperienceLevel) -> str:
        return build_url(title, experience_level, self._search.region)

    def card_parser(self) -> CardParser:
        return CardParser(
            source="Naukri",
            base_url=NAUKRI_BASE,
            selectors=CardSelectors(
                title=selectors.TITLE_SELECTORS,
                link=selectors.LINK_SELECTORS,
                company=selectors.COMPANY_SELECTORS,
                location=selectors.LOCATION_SELECTORS,
                posted_date=selectors.POSTED_DATE_SELECTORS,
                experience=selectors.EXPERIENCE_SELECTORS,
            ),
        )

    def flow_spec(self) -> FlowSpec:
        return FlowSpec(
            site_name="Naukri",
            already_applied_selectors=selectors.ALREADY_APPLIED_SELECTORS,
            entry_selectors=selectors.APPLY_SELECTORS,
            next_selectors=selectors.NEXT_SELECTORS,
            success_selectors=selectors.SUCCESS_SELECTORS,
            phone_selectors=selectors.PHONE_SELECTORS,
            cover_letter_selectors=selectors.COVER_LETTER_SELECTORS,
            entry_settle_s=3.0,
        )

    def cover_letter(self, profile: CandidateProfile) -> str:
        experience = "\n".join(
            f"- {exp.title} at {exp.company} ({exp.duration})" for exp in profile.experience
        )
        return (
            "Dear Hiring Manager,\n\n"
            f"{profile.summary}\n\n"
            "Relevant Experience:\n"
            f"{experience}\n\n"
            f"Technical Skills: {', '.join(profile.skills)}\n\n"
            "I am excited about this opportunity and look forward to hearing from you.\n\n"
            "Best regards,\n"
            f"{profile.personal_info.name}"
        )
