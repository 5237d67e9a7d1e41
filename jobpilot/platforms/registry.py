"""Site adapter registry with lazy loading.

Usage:
    from jobpilot.platforms.registry import build_adapters

    adapters = build_adapters(settings)
"""

import importlib
from collections.abc import Callable

from jobpilot.browser.session import BrowserSession
from jobpilot.core.config import Settings
from jobpilot.platforms.base import PageFactory, SiteAdapter

# Lazy registry: maps site id -> (module_path, class_name)
_REGISTRY: dict[str, tuple[str, str]] = {
    "linkedin": ("jobpilot.platforms.linkedin.adapter", "LinkedInAdapter"),
    "naukri": ("jobpilot.platforms.naukri.adapter", "NaukriAdapter"),
}


def browser_page_factory(settings: Settings) -> PageFactory:
    """Page factory that opens a fresh patchright session per call."""
    config = settings.browser
    return lambda: BrowserSession(config)


def get_adapter(
    name: str,
    settings: Settings,
    page_factory: PageFactory | None = None,
) -> SiteAdapter:
    """Instantiate and return a site adapter by name.

    Raises:
        ValueError: If the site name is unknown.
    """
    if name not in _REGISTRY:
        valid = ", ".join(sorted(_REGISTRY))
        msg = f"Unknown site '{name}'. Available: {valid}"
        raise ValueError(msg)

    module_path, class_name = _REGISTRY[name]
    module = importlib.import_module(module_path)
    cls: Callable[..., SiteAdapter] = getattr(module, class_name)
    return cls(
        page_factory or browser_page_factory(settings),
        search_settings=settings.search,
        apply_settings=settings.apply,
    )


def build_adapters(
    settings: Settings,
    page_factory: PageFactory | None = None,
) -> list[SiteAdapter]:
    """Adapters for every configured site, in configured order."""
    return [get_adapter(site, settings, page_factory) for site in settings.search.sites]


def available_sites() -> list[str]:
    """Return sorted list of registered site ids."""
    return sorted(_REGISTRY)
