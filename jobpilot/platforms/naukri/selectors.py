"""Naukri DOM selector constants with fallbacks."""

# --- Search results ---
CARD_SELECTORS: tuple[str, ...] = (
    ".jobTuple",
    ".srp-jobtuple-wrapper",
    "article.jobTuple",
)

TITLE_SELECTORS: tuple[str, ...] = (
    ".title",
    "a.title",
)

LINK_SELECTORS: tuple[str, ...] = (
    ".title a",
    "a.title",
)

COMPANY_SELECTORS: tuple[str, ...] = (
    ".companyInfo .subTitle",
    ".comp-name",
)

LOCATION_SELECTORS: tuple[str, ...] = (
    ".locationsContainer .location",
    ".locWdth",
)

EXPERIENCE_SELECTORS: tuple[str, ...] = (
    ".expwdth",
    ".exp-wrap",
)

POSTED_DATE_SELECTORS: tuple[str, ...] = (
    ".jobTupleFooter .fleft",
    ".job-post-day",
)

# --- Apply flow ---
ALREADY_APPLIED_SELECTORS: tuple[str, ...] = (
    "#already-applied",
    ".already-applied",
)

APPLY_SELECTORS: tuple[str, ...] = (
    "button.apply",
    "a.apply",
    "#apply-button",
    'button:has-text("Apply")',
)

PHONE_SELECTORS: tuple[str, ...] = (
    'input[name="mobile"]',
    'input[type="tel"]',
)

COVER_LETTER_SELECTORS: tuple[str, ...] = (
    'textarea[name="coverLetter"]',
    'textarea[placeholder*="cover letter"]',
)

NEXT_SELECTORS: tuple[str, ...] = (
    'button[type="submit"]',
    'button:has-text("Submit")',
    'input[type="submit"]',
    'button:has-text("Next")',
)

SUCCESS_SELECTORS: tuple[str, ...] = (
    ".success",
    ".applied",
    ".application-success",
    *ALREADY_APPLIED_SELECTORS,
)
