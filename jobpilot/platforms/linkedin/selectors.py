"""LinkedIn DOM selector constants with fallbacks.

Ordered by stability: data-* / aria-* before class names.
Each constant is a tuple so callers iterate until a match is found.
"""

# --- Search results (public job search) ---
CARD_SELECTORS: tuple[str, ...] = (
    ".job-search-card",
    "li[data-occludable-job-id]",
    "div.base-card",
)

TITLE_SELECTORS: tuple[str, ...] = (
    ".base-search-card__title",
    "a.job-card-list__title",
    "h3",
)

LINK_SELECTORS: tuple[str, ...] = (
    "a.base-card__full-link",
    'a[href*="/jobs/view/"]',
    "a",
)

COMPANY_SELECTORS: tuple[str, ...] = (
    ".base-search-card__subtitle",
    ".artdeco-entity-lockup__subtitle",
)

LOCATION_SELECTORS: tuple[str, ...] = (
    ".job-search-card__location",
    ".artdeco-entity-lockup__caption",
)

POSTED_DATE_SELECTORS: tuple[str, ...] = (
    ".job-search-card__listdate",
    ".job-search-card__listdate--new",
    "time",
)

# --- Easy Apply flow ---
ALREADY_APPLIED_SELECTORS: tuple[str, ...] = (
    ".artdeco-inline-feedback--success",
)

EASY_APPLY_SELECTORS: tuple[str, ...] = (
    'button[aria-label*="Easy Apply"]',
    "button.jobs-apply-button",
)

PHONE_SELECTORS: tuple[str, ...] = (
    'input[name="phoneNumber"]',
    'input[id*="phoneNumber"]',
)

COVER_LETTER_SELECTORS: tuple[str, ...] = (
    'textarea[name="message"]',
)

NEXT_SELECTORS: tuple[str, ...] = (
    'button[aria-label="Continue to next step"]',
    'button[aria-label="Review your application"]',
    'button[aria-label="Submit application"]',
    'button:has-text("Next")',
    'button[type="submit"]',
)

SUCCESS_SELECTORS: tuple[str, ...] = ALREADY_APPLIED_SELECTORS
