"""Tests for response parsing and content schema validation."""

import json

import pytest

from pallet_seo.errors import SchemaValidationError
from pallet_seo.generate.validate import (
    REQUIRED_FIELDS,
    ContentValidator,
    content_only,
    parse_response,
    strip_code_fence,
    validate_content,
)
from tests.conftest import make_content


class TestStripCodeFence:
    def test_json_fence(self):
        assert strip_code_fence('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_bare_fence(self):
        assert strip_code_fence('```\n{"a": 1}\n```') == '{"a": 1}'

    def test_no_fence(self):
        assert strip_code_fence('  {"a": 1} ') == '{"a": 1}'


class TestContentValidator:
    def test_valid(self):
        validator = ContentValidator(make_content())
        assert validator.validate()
        assert validator.get_errors() == []

    def test_missing_faq_section_heading(self):
        content = make_content()
        del content["faqSectionH2"]
        validator = ContentValidator(content)
        assert not validator.validate()
        assert "Missing required field: faqSectionH2" in validator.get_errors()

    def test_blank_string_is_missing(self):
        content = make_content()
        content["heroText"] = "   "
        with pytest.raises(SchemaValidationError, match="heroText"):
            validate_content(content)

    def test_block_count(self):
        content = make_content()
        content["contentBlocks"] = content["contentBlocks"][:1]
        with pytest.raises(SchemaValidationError, match="contentBlocks must be an array of 2"):
            validate_content(content)

    def test_block_fields_and_layout(self):
        content = make_content()
        del content["contentBlocks"][0]["image_alt"]
        content["contentBlocks"][1]["layout_type"] = "full_width"
        validator = ContentValidator(content)
        assert not validator.validate()
        errors = validator.get_errors()
        assert "contentBlocks[0] missing image_alt" in errors
        assert "contentBlocks[1] has invalid layout_type: full_width" in errors

    def test_faq_minimum(self):
        content = make_content()
        content["faqs"] = content["faqs"][:5]
        with pytest.raises(SchemaValidationError, match="at least 6"):
            validate_content(content)

    def test_six_faqs_accepted(self):
        content = make_content()
        content["faqs"] = content["faqs"][:6]
        assert validate_content(content) is content

    def test_faq_missing_answer(self):
        content = make_content()
        content["faqs"][2] = {"question": "Q?"}
        with pytest.raises(SchemaValidationError, match=r"faqs\[2\] missing answer"):
            validate_content(content)

    def test_not_an_object(self):
        with pytest.raises(SchemaValidationError, match="Expected a JSON object"):
            validate_content(["a"])

    def test_errors_collected(self):
        validator = ContentValidator({})
        assert not validator.validate()
        assert len(validator.get_errors()) == len(REQUIRED_FIELDS)


class TestParseResponse:
    def test_fenced_json(self):
        text = "```json\n" + json.dumps(make_content()) + "\n```"
        assert parse_response(text)["faqSectionH2"] == "amazon Liquidation FAQ"

    def test_invalid_json(self):
        with pytest.raises(SchemaValidationError, match="not valid JSON"):
            parse_response("Sure! Here is your content: {")

    def test_content_only_drops_extras(self):
        content = make_content()
        content["notes"] = "extra"
        content["slug"] = "amazon-liquidation"
        assert sorted(content_only(content)) == sorted(REQUIRED_FIELDS)


class TestNonStringValues:
    @pytest.mark.parametrize("value", [12345, ["hero", "text"], {"text": "hero"}, True])
    def test_top_level_text_must_be_string(self, value):
        content = make_content()
        content["heroText"] = value
        with pytest.raises(SchemaValidationError, match="heroText must be a string"):
            validate_content(content)

    def test_layout_type_list(self):
        content = make_content()
        content["contentBlocks"][0]["layout_type"] = ["image_left"]
        validator = ContentValidator(content)
        assert not validator.validate()
        assert validator.get_errors() == ["contentBlocks[0].layout_type must be a string, got list"]

    def test_block_text_number(self):
        content = make_content()
        content["contentBlocks"][1]["text"] = 42
        with pytest.raises(SchemaValidationError, match=r"contentBlocks\[1\].text must be a string"):
            validate_content(content)

    def test_faq_answer_number(self):
        content = make_content()
        content["faqs"][3]["answer"] = 7
        with pytest.raises(SchemaValidationError, match=r"faqs\[3\].answer must be a string"):
            validate_content(content)

    def test_parse_response_numeric_field(self):
        content = make_content()
        content["centeredValueH2"] = 10
        with pytest.raises(SchemaValidationError):
            parse_response(json.dumps(content))
