"""Static landing page definitions and keyword vocabulary."""

from pallet_seo.pages.keyword_bank import get_all_keywords, get_keywords_for_page
from pallet_seo.pages.models import PAGE_TYPES, ContentAngle, PageDefinition
from pallet_seo.pages.registry import get_all_slugs, get_page_by_slug, get_page_definitions

__all__ = [
    "PAGE_TYPES",
    "ContentAngle",
    "PageDefinition",
    "get_all_keywords",
    "get_all_slugs",
    "get_keywords_for_page",
    "get_page_by_slug",
    "get_page_definitions",
]
