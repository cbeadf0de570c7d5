"""Tests for per-page generation with retries and phrase feedback."""

import pytest

from pallet_seo.errors import GenerationError, NetworkError
from pallet_seo.generate.llm_generator import ContentGenerator
from pallet_seo.generate.phrases import AvoidPhraseSet
from pallet_seo.generate.validate import REQUIRED_FIELDS
from pallet_seo.pages.registry import get_page_by_slug
from tests.conftest import FakeClient, make_content

AMAZON = get_page_by_slug("amazon-liquidation")
WALMART = get_page_by_slug("walmart-liquidation")


class TestPrompt:
    def test_empty_avoid_list(self):
        generator = ContentGenerator(FakeClient([]))
        prompt = generator.build_prompt(AMAZON)
        assert "- (none yet)" in prompt
        assert '"Amazon" liquidation page (amazon-liquidation)' in prompt
        assert "LPN" in prompt

    def test_avoid_phrase_in_prompt(self):
        phrases = AvoidPhraseSet()
        phrases.add("Fulfilled by Amazon returns")
        generator = ContentGenerator(FakeClient([]), phrases)
        prompt = generator.build_prompt(AMAZON)
        assert '- "fulfilled by amazon returns"' in prompt

    def test_avoid_list_capped_at_recent_30(self):
        phrases = AvoidPhraseSet()
        for i in range(50):
            phrases.add(f"used phrase {i} before")
        prompt = ContentGenerator(FakeClient([]), phrases).build_prompt(WALMART)
        assert '- "used phrase 19 before"' not in prompt
        assert '- "used phrase 20 before"' in prompt
        assert '- "used phrase 49 before"' in prompt

    def test_system_prompt_demands_json(self):
        generator = ContentGenerator(FakeClient([]))
        assert "valid JSON only" in generator.system_prompt


class TestGeneratePage:
    def test_success_first_attempt(self, no_sleep):
        sleep, sleeps = no_sleep
        client = FakeClient([make_content("amazon")])
        generator = ContentGenerator(client, sleep=sleep)

        content = generator.generate_page(AMAZON)

        assert sorted(content) == sorted(REQUIRED_FIELDS)
        assert len(client.calls) == 1
        assert sleeps == []
        assert len(generator.avoid_phrases) > 0

    def test_extra_fields_dropped(self, no_sleep):
        sleep, _ = no_sleep
        response = make_content("amazon")
        response["notes"] = "I wrote this for you"
        content = ContentGenerator(FakeClient([response]), sleep=sleep).generate_page(AMAZON)
        assert "notes" not in content

    def test_invalid_then_valid_retries(self, no_sleep):
        sleep, sleeps = no_sleep
        broken = make_content("amazon")
        del broken["faqSectionH2"]
        client = FakeClient([broken, make_content("amazon")])
        generator = ContentGenerator(client, sleep=sleep)

        content = generator.generate_page(AMAZON)

        assert content["faqSectionH2"] == "amazon Liquidation FAQ"
        assert len(client.calls) == 2
        assert sleeps == [2.0]
        # the same prompt is resent on retry
        assert client.calls[0] == client.calls[1]

    def test_network_error_retries_with_linear_backoff(self, no_sleep):
        sleep, sleeps = no_sleep
        client = FakeClient([
            NetworkError("boom", status_code=500),
            "not json at all",
            make_content("amazon"),
        ])
        ContentGenerator(client, sleep=sleep).generate_page(AMAZON)
        assert sleeps == [2.0, 4.0]

    def test_exhausted_attempts(self, no_sleep):
        sleep, sleeps = no_sleep
        client = FakeClient(["{}", "{}", "{}"])
        generator = ContentGenerator(client, sleep=sleep)

        with pytest.raises(GenerationError) as exc:
            generator.generate_page(AMAZON)

        assert exc.value.slug == "amazon-liquidation"
        assert exc.value.attempts == 3
        assert "after 3 attempts" in str(exc.value)
        assert len(client.calls) == 3
        # no sleep after the final attempt
        assert sleeps == [2.0, 4.0]
        assert len(generator.avoid_phrases) == 0

    def test_unexpected_error_propagates(self, no_sleep):
        sleep, _ = no_sleep
        client = FakeClient([RuntimeError("bug")])
        with pytest.raises(RuntimeError):
            ContentGenerator(client, sleep=sleep).generate_page(AMAZON)

    def test_phrases_feed_next_prompt(self, no_sleep):
        sleep, _ = no_sleep
        client = FakeClient([make_content("amazon"), make_content("walmart")])
        generator = ContentGenerator(client, sleep=sleep)

        generator.generate_page(AMAZON)
        generator.generate_page(WALMART)

        assert "- (none yet)" in client.calls[0]["user"]
        assert "- (none yet)" not in client.calls[1]["user"]

    def test_invalid_max_attempts(self):
        with pytest.raises(ValueError):
            ContentGenerator(FakeClient([]), max_attempts=0)
