"""Static page definition types."""

from dataclasses import dataclass, field
from typing import Optional

PAGE_TYPES = ("retailer", "category", "inventory")


@dataclass(frozen=True)
class ContentAngle:
    """An emphasis angle for a page. weight is 0-1, how much to emphasize."""

    id: str
    name: str
    weight: float
    phrases: tuple = ()

    def __post_init__(self):
        if not 0.0 <= self.weight <= 1.0:
            raise ValueError(f"Angle weight out of range [0, 1]: {self.id}={self.weight}")


@dataclass(frozen=True)
class PageDefinition:
    """One landing page's topic, vocabulary and emphasis angles."""

    slug: str
    display_name: str
    page_type: str
    keywords: tuple
    angles: tuple
    related_terms: tuple
    image_style: str
    specific_terms: Optional[tuple] = field(default=None)

    def __post_init__(self):
        if self.page_type not in PAGE_TYPES:
            raise ValueError(f"Unknown page type for {self.slug}: {self.page_type}")

    def to_dict(self) -> dict:
        """JSON form, camelCase keys to match the stored page records."""
        data = {
            "slug": self.slug,
            "displayName": self.display_name,
            "pageType": self.page_type,
            "keywords": list(self.keywords),
            "angles": [
                {"id": a.id, "name": a.name, "weight": a.weight, "phrases": list(a.phrases)}
                for a in self.angles
            ],
            "relatedTerms": list(self.related_terms),
            "imageStyle": self.image_style,
        }
        if self.specific_terms:
            data["specificTerms"] = list(self.specific_terms)
        return data


def page(slug, display_name, page_type, keywords, angles, related_terms, image_style, specific_terms=None):
    """Build a PageDefinition from list literals."""
    return PageDefinition(
        slug=slug,
        display_name=display_name,
        page_type=page_type,
        keywords=tuple(keywords),
        angles=tuple(ContentAngle(a[0], a[1], a[2], tuple(a[3])) for a in angles),
        related_terms=tuple(related_terms),
        image_style=image_style,
        specific_terms=tuple(specific_terms) if specific_terms else None,
    )
