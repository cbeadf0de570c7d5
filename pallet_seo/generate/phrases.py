"""
Run-scoped avoid-phrase tracking.

Every N-word window of generated copy is remembered and fed back into later
prompts so the model steers away from restating earlier pages. This is a
prompt-level deterrent only: nothing stops the model from reusing a phrase.
"""

import re

from pallet_seo.config import PHRASE_WINDOW

_EDGE_PUNCTUATION = "\"'“”‘’.,;:!?()[]{}"


def normalize_words(text: str) -> list:
    """Lower-case words with surrounding punctuation stripped."""
    words = []
    for raw in re.split(r"\s+", text or ""):
        word = raw.strip(_EDGE_PUNCTUATION).lower()
        if word:
            words.append(word)
    return words


def sliding_windows(text: str, window: int = PHRASE_WINDOW) -> list:
    words = normalize_words(text)
    if len(words) < window:
        return []
    return [" ".join(words[i:i + window]) for i in range(len(words) - window + 1)]


def content_texts(content: dict) -> list:
    """All free-text, heading and FAQ strings of a generated content dict."""
    texts = [
        content.get("metaDescription", ""),
        content.get("heroText", ""),
        content.get("featuredSuppliersText", ""),
        content.get("centeredValueH2", ""),
        content.get("centeredValueText", ""),
        content.get("faqSectionH2", ""),
    ]
    for block in content.get("contentBlocks", []):
        texts.append(block.get("h2", ""))
        texts.append(block.get("text", ""))
    for faq in content.get("faqs", []):
        texts.append(faq.get("question", ""))
        texts.append(faq.get("answer", ""))
    return texts


class AvoidPhraseSet:
    """Append-only, insertion-ordered set of normalized phrases for one run."""

    def __init__(self, window: int = PHRASE_WINDOW):
        if window < 1:
            raise ValueError(f"window must be >= 1, got {window}")
        self.window = window
        self._phrases = {}

    def __len__(self) -> int:
        return len(self._phrases)

    def __contains__(self, phrase: str) -> bool:
        return " ".join(normalize_words(phrase)) in self._phrases

    def add(self, phrase: str) -> bool:
        """Add one phrase. Returns True when it was new."""
        normalized = " ".join(normalize_words(phrase))
        if not normalized or normalized in self._phrases:
            return False
        self._phrases[normalized] = None
        return True

    def extract_phrases(self, content: dict) -> list:
        phrases = []
        for text in content_texts(content):
            phrases.extend(sliding_windows(text, self.window))
        return phrases

    def add_content(self, content: dict) -> int:
        """Merge every window of a generated page. Returns how many were new."""
        added = 0
        for phrase in self.extract_phrases(content):
            if self.add(phrase):
                added += 1
        return added

    def recent(self, limit: int) -> list:
        """The most recently added phrases, oldest first."""
        if limit <= 0:
            return []
        phrases = list(self._phrases)
        return phrases[-limit:]

    def snapshot(self) -> list:
        return list(self._phrases)

    def reset(self):
        self._phrases.clear()
