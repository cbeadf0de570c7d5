"""
Parsing and structural validation of generated page content.

A page either passes every check here or contributes nothing to the snapshot
or the store.
"""

import json

from pallet_seo.errors import SchemaValidationError

REQUIRED_FIELDS = [
    "metaDescription",
    "heroText",
    "featuredSuppliersText",
    "centeredValueH2",
    "centeredValueText",
    "contentBlocks",
    "faqSectionH2",
    "faqs",
]

# Required fields holding plain copy; contentBlocks and faqs are arrays
TEXT_FIELDS = [f for f in REQUIRED_FIELDS if f not in ("contentBlocks", "faqs")]

BLOCK_FIELDS = ["h2", "text", "image_prompt", "image_alt", "layout_type"]
LAYOUT_TYPES = {"image_left", "image_right"}
FAQ_FIELDS = ["question", "answer"]

CONTENT_BLOCK_COUNT = 2
MIN_FAQS = 6


def strip_code_fence(text: str) -> str:
    """Remove ```json ... ``` wrapping if the model added it."""
    cleaned = (text or "").strip()
    if cleaned.startswith("```json"):
        cleaned = cleaned[7:]
    elif cleaned.startswith("```"):
        cleaned = cleaned[3:]
    if cleaned.endswith("```"):
        cleaned = cleaned[:-3]
    return cleaned.strip()


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class ContentValidator:
    """Validates one generated content dict. Collects every error found."""

    def __init__(self, content):
        self.content = content
        self.errors = []

    def validate(self) -> bool:
        if not isinstance(self.content, dict):
            self.errors.append(f"Expected a JSON object, got {type(self.content).__name__}")
            return False

        for field in TEXT_FIELDS:
            self._check_text(self.content.get(field), field, f"Missing required field: {field}")

        self._validate_blocks()
        self._validate_faqs()
        return len(self.errors) == 0

    def _check_text(self, value, label: str, missing: str) -> bool:
        if _is_blank(value):
            self.errors.append(missing)
            return False
        if not isinstance(value, str):
            self.errors.append(f"{label} must be a string, got {type(value).__name__}")
            return False
        return True

    def _validate_blocks(self):
        blocks = self.content.get("contentBlocks")
        if blocks is None:
            self.errors.append("Missing required field: contentBlocks")
            return
        if not isinstance(blocks, list) or len(blocks) != CONTENT_BLOCK_COUNT:
            self.errors.append(f"contentBlocks must be an array of {CONTENT_BLOCK_COUNT} items")
            return
        for i, block in enumerate(blocks):
            if not isinstance(block, dict):
                self.errors.append(f"contentBlocks[{i}] must be an object")
                continue
            for field in BLOCK_FIELDS:
                label = f"contentBlocks[{i}].{field}"
                if not self._check_text(block.get(field), label, f"contentBlocks[{i}] missing {field}"):
                    continue
                if field == "layout_type" and block[field] not in LAYOUT_TYPES:
                    self.errors.append(f"contentBlocks[{i}] has invalid layout_type: {block[field]}")

    def _validate_faqs(self):
        faqs = self.content.get("faqs")
        if faqs is None:
            self.errors.append("Missing required field: faqs")
            return
        if not isinstance(faqs, list) or len(faqs) < MIN_FAQS:
            self.errors.append(f"faqs must be an array of at least {MIN_FAQS} items")
            return
        for i, faq in enumerate(faqs):
            if not isinstance(faq, dict):
                self.errors.append(f"faqs[{i}] must be an object")
                continue
            for field in FAQ_FIELDS:
                self._check_text(faq.get(field), f"faqs[{i}].{field}", f"faqs[{i}] missing {field}")

    def get_errors(self) -> list:
        return self.errors


def validate_content(content) -> dict:
    """Return content unchanged if valid, else raise SchemaValidationError."""
    validator = ContentValidator(content)
    if not validator.validate():
        raise SchemaValidationError("; ".join(validator.get_errors()))
    return content


def parse_response(text: str) -> dict:
    """Parse raw model output into validated content."""
    cleaned = strip_code_fence(text)
    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise SchemaValidationError(f"Response is not valid JSON: {e}") from e
    return validate_content(parsed)


def content_only(content: dict) -> dict:
    """Keep only the schema fields, dropping anything extra the model added."""
    return {field: content[field] for field in REQUIRED_FIELDS}
