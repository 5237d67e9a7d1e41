"""Multi-step application state machine shared by all site adapters.

States::

    NOT_STARTED -> NAVIGATED -> ALREADY_APPLIED
                             -> APPLY_UNAVAILABLE
                             -> IN_PROGRESS -> STEP_1..STEP_k (k <= max_steps)
                                            -> APPLIED | FAILED

Sites differ only in the FlowSpec (selectors, settle delay, cover letter).
Any exception inside the flow becomes a FAILED outcome carrying the error.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from jobpilot.browser.actions import clear_and_type, element_label, find_first, settle
from jobpilot.core.config import ApplySettings
from jobpilot.core.schemas import ApplicationOutcome, ApplicationStatus
from jobpilot.profile.schema import CandidateProfile

logger = logging.getLogger(__name__)

SUBMIT_LABELS: tuple[str, ...] = ("submit", "send application")


class FlowState(str, Enum):
    NOT_STARTED = "not_started"
    NAVIGATED = "navigated"
    ALREADY_APPLIED = "already_applied"
    APPLY_UNAVAILABLE = "apply_unavailable"
    IN_PROGRESS = "in_progress"
    APPLIED = "applied"
    FAILED = "failed"


@dataclass(frozen=True)
class FlowSpec:
    """Site-specific parameters of the application flow."""

    site_name: str
    already_applied_selectors: tuple[str, ...]
    entry_selectors: tuple[str, ...]
    next_selectors: tuple[str, ...]
    success_selectors: tuple[str, ...]
    phone_selectors: tuple[str, ...] = ()
    cover_letter_selectors: tuple[str, ...] = ()
    entry_settle_s: float = 2.0


class ApplicationFlow:
    """Drives one page through a site's application wizard.

    Holds no per-attempt state, so one instance serves concurrent attempts
    on separate pages.
    """

    def __init__(
        self,
        spec: FlowSpec,
        settings: ApplySettings,
        cover_letter: Callable[[CandidateProfile], str],
    ) -> None:
        self._spec = spec
        self._settings = settings
        self._cover_letter = cover_letter

    async def run(self, page: Any, job_url: str, profile: CandidateProfile) -> ApplicationOutcome:
        """Run the flow to a terminal outcome. Never raises."""
        try:
            return await self._run(page, job_url, profile)
        except Exception as e:
            logger.error("%s application failed for %s: %s", self._spec.site_name, job_url, e)
            return ApplicationOutcome.failed(job_url, f"Application failed: {e}")

    async def _run(self, page: Any, job_url: str, profile: CandidateProfile) -> ApplicationOutcome:
        spec = self._spec
        self._transition(job_url, FlowState.NOT_STARTED)

        await page.goto(job_url, wait_until="networkidle")
        self._transition(job_url, FlowState.NAVIGATED)

        if await find_first(page, spec.already_applied_selectors) is not None:
            self._transition(job_url, FlowState.ALREADY_APPLIED)
            return ApplicationOutcome(
                job_url=job_url,
                status=ApplicationStatus.ALREADY_APPLIED,
                message="Already applied to this position",
            )

        entry = await find_first(page, spec.entry_selectors)
        if entry is None:
            self._transition(job_url, FlowState.APPLY_UNAVAILABLE)
            return ApplicationOutcome.failed(
                job_url, f"{spec.site_name}: apply not available for this position",
            )

        await entry.click()
        await settle(spec.entry_settle_s)
        self._transition(job_url, FlowState.IN_PROGRESS)

        await self._fill_known_fields(page, profile)
        steps = await self._step_through(page, job_url)

        if await find_first(page, spec.success_selectors) is not None:
            self._transition(job_url, FlowState.APPLIED, steps)
            return ApplicationOutcome(
                job_url=job_url,
                status=ApplicationStatus.APPLIED,
                message="Successfully applied to the position",
            )

        self._transition(job_url, FlowState.FAILED, steps)
        return ApplicationOutcome.failed(job_url, "Application incomplete or failed")

    async def _fill_known_fields(self, page: Any, profile: CandidateProfile) -> None:
        """Fill phone and cover letter fields when the form shows them.

        A present phone field is always cleared, even when the profile has no
        phone, so no prefilled value is submitted.
        """
        phone_input = await find_first(page, self._spec.phone_selectors)
        if phone_input is not None:
            await clear_and_type(phone_input, profile.personal_info.phone)
            logger.debug("Filled phone number")

        letter_input = await find_first(page, self._spec.cover_letter_selectors)
        if letter_input is not None:
            await letter_input.type(self._cover_letter(profile))
            logger.debug("Filled cover letter")

    async def _step_through(self, page: Any, job_url: str) -> int:
        """Click next/submit controls until submit, exhaustion or max_steps.

        Returns the number of loop iterations executed.
        """
        steps = 0
        while steps < self._settings.max_steps:
            control = await find_first(page, self._spec.next_selectors)
            if control is None:
                logger.debug("No next control found after %d steps", steps)
                break

            steps += 1
            label = (await element_label(control)).lower()
            await control.click()

            if any(marker in label for marker in SUBMIT_LABELS):
                logger.info("Submitted application for %s at step %d", job_url, steps)
                await settle(self._settings.submit_settle_s)
                break

            logger.debug("Step %d: clicked '%s'", steps, label)
            await settle(self._settings.step_settle_s)
        return steps

    def _transition(self, job_url: str, state: FlowState, steps: int | None = None) -> None:
        if steps is None:
            logger.debug("[%s] %s -> %s", self._spec.site_name, job_url, state.value)
        else:
            logger.debug(
                "[%s] %s -> %s after %d step(s)", self._spec.site_name, job_url, state.value, steps,
            )
