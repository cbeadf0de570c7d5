"""Shared fixtures: fake generation client, content factory, page records."""

import json

import pytest

from pallet_seo.apply.store import InMemoryPageStore


def make_content(tag: str = "amazon") -> dict:
    """A schema-valid content dict whose wording varies with tag."""
    return {
        "metaDescription": f"Source {tag} liquidation pallets from verified suppliers with manifested loads.",
        "heroText": f"Buyers sourcing {tag} returns compare manifested and unmanifested lots before committing freight.",
        "featuredSuppliersText": f"These {tag} suppliers ship graded truckloads to bin stores and online resellers.",
        "centeredValueH2": f"Why {tag} Loads Pay Off",
        "centeredValueText": f"Recovery rates on {tag} pallets depend on grading, piece count and landed cost.",
        "contentBlocks": [
            {
                "h2": f"Grading {tag} Customer Returns",
                "text": f"Grade A {tag} returns arrive tested working while salvage lots need sorting.",
                "image_prompt": f"Warehouse aisle stacked with shrink-wrapped {tag} return pallets",
                "image_alt": f"Shrink-wrapped {tag} customer return pallets in a warehouse",
                "layout_type": "image_left",
            },
            {
                "h2": f"Freight Planning for {tag} Truckloads",
                "text": f"Dock-high receiving keeps {tag} truckload costs down compared with liftgate delivery.",
                "image_prompt": f"Loading dock receiving a full {tag} truckload",
                "image_alt": f"Full {tag} truckload unloading at a dock-high warehouse",
                "layout_type": "image_right",
            },
        ],
        "faqSectionH2": f"{tag} Liquidation FAQ",
        "faqs": [
            {"question": f"Where do {tag} pallets come from number {i}?", "answer": f"Answer {i} about {tag} sourcing and manifests."}
            for i in range(1, 9)
        ],
    }


def make_page(slug: str, tag: str = None, display_name: str = None) -> dict:
    """A snapshot entry: content plus slug and displayName."""
    page = {"slug": slug, "displayName": display_name or slug.split("-")[0].title()}
    page.update(make_content(tag or slug))
    return page


def make_record(record_id: int, slug: str, **extra) -> dict:
    """A stored category page with non-content fields the applier must keep."""
    record = {
        "id": record_id,
        "slug": slug,
        "pageTitle": f"{slug} title",
        "heroImage": f"https://cdn.example.com/{slug}.jpg",
        "noindex": False,
        "metaDescription": "old meta",
        "heroText": "old hero",
        "featuredSuppliersText": "old featured",
        "centeredValueH2": "old h2",
        "centeredValueText": "old value",
        "contentBlocks": [],
        "faqSectionH2": "old faq h2",
        "faqs": [],
    }
    record.update(extra)
    return record


class FakeClient:
    """Returns queued responses in order and records every prompt sent."""

    model = "fake-model"

    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = []

    def complete(self, system: str, user: str) -> str:
        self.calls.append({"system": system, "user": user})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        if isinstance(response, dict):
            return json.dumps(response)
        return response


@pytest.fixture
def no_sleep():
    """Records requested sleeps instead of sleeping."""
    calls = []
    return calls.append, calls


@pytest.fixture
def store():
    return InMemoryPageStore([
        make_record(1, "amazon-liquidation"),
        make_record(2, "walmart-liquidation"),
        make_record(3, "target-liquidation"),
    ])
