"""Page definition registry: retailers, then categories, then inventory types."""

from typing import Optional

from pallet_seo.pages.categories import CATEGORIES
from pallet_seo.pages.inventory_types import INVENTORY_TYPES
from pallet_seo.pages.models import PAGE_TYPES, PageDefinition
from pallet_seo.pages.retailers import RETAILERS

PAGES_BY_TYPE = {
    "retailer": RETAILERS,
    "category": CATEGORIES,
    "inventory": INVENTORY_TYPES,
}

ALL_PAGES = RETAILERS + CATEGORIES + INVENTORY_TYPES


def get_page_definitions(page_type: Optional[str] = None, slug: Optional[str] = None) -> list:
    """
    Select pages in registry order.

    Raises:
        ValueError: page_type is not one of PAGE_TYPES
        KeyError: slug is not in the selected pages
    """
    if page_type is not None:
        if page_type not in PAGE_TYPES:
            raise ValueError(
                f"Unknown page type: {page_type}. Expected one of: {', '.join(PAGE_TYPES)}"
            )
        pages = list(PAGES_BY_TYPE[page_type])
    else:
        pages = list(ALL_PAGES)

    if slug is not None:
        pages = [p for p in pages if p.slug == slug]
        if not pages:
            raise KeyError(f"Page not found: {slug}")

    return pages


def get_page_by_slug(slug: str) -> Optional[PageDefinition]:
    for p in ALL_PAGES:
        if p.slug == slug:
            return p
    return None


def get_all_slugs(page_type: Optional[str] = None) -> list:
    return [p.slug for p in get_page_definitions(page_type)]
