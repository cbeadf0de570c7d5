"""
LLM Content Generator

Produces one schema-valid content dict per page definition. Each attempt is a
billed call to the generation API. Malformed output and network failures are
retried with a linear backoff; after the last attempt the page fails as a
whole and nothing of it is kept.
"""

import time
from typing import Optional

from pallet_seo import config
from pallet_seo.errors import GenerationError, NetworkError, SchemaValidationError
from pallet_seo.generate.phrases import AvoidPhraseSet
from pallet_seo.generate.prompts import build_system_prompt, build_user_prompt
from pallet_seo.generate.validate import content_only, parse_response
from pallet_seo.pages.keyword_bank import get_keywords_for_page
from pallet_seo.pages.models import PageDefinition

RETRYABLE_ERRORS = (SchemaValidationError, NetworkError)


class ContentGenerator:
    """Generates page content and feeds results into the run's avoid set."""

    def __init__(
        self,
        client,
        avoid_phrases: Optional[AvoidPhraseSet] = None,
        max_attempts: int = config.MAX_ATTEMPTS,
        backoff_seconds: float = config.RETRY_BACKOFF_SECONDS,
        sleep=time.sleep,
    ):
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")
        self.client = client
        self.avoid_phrases = avoid_phrases if avoid_phrases is not None else AvoidPhraseSet()
        self.max_attempts = max_attempts
        self.backoff_seconds = backoff_seconds
        self.sleep = sleep
        self.system_prompt = build_system_prompt()

    def build_prompt(self, page: PageDefinition) -> str:
        keywords = get_keywords_for_page(page.slug, page.page_type)
        avoid = self.avoid_phrases.recent(config.MAX_AVOID_PHRASES)
        return build_user_prompt(page, avoid, keywords)

    def generate_page(self, page: PageDefinition) -> dict:
        """
        Generate content for a single page.

        Returns:
            Content dict containing exactly the schema fields

        Raises:
            GenerationError: every attempt failed
        """
        user_prompt = self.build_prompt(page)
        last_error = None

        for attempt in range(1, self.max_attempts + 1):
            print(f"  Generating content for {page.slug} (attempt {attempt}/{self.max_attempts})...")
            try:
                text = self.client.complete(self.system_prompt, user_prompt)
                content = parse_response(text)
            except RETRYABLE_ERRORS as e:
                last_error = e
                print(f"  [FAIL] Attempt {attempt} failed: {e}")
                if attempt < self.max_attempts:
                    self.sleep(self.backoff_seconds * attempt)
                continue

            content = content_only(content)
            added = self.avoid_phrases.add_content(content)
            print(f"  [OK] Generated {page.slug} (+{added} phrases)")
            return content

        raise GenerationError(page.slug, self.max_attempts, last_error)
