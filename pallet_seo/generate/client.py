"""Generation API client (Anthropic Messages API via the anthropic SDK)."""

from typing import Optional

import anthropic

from pallet_seo import config
from pallet_seo.errors import NetworkError, SchemaValidationError


class MessagesClient:
    """Sends one system + user instruction pair and returns the reply text."""

    def __init__(
        self,
        api_key: str,
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
        timeout: Optional[float] = None,
        client: Optional[anthropic.Anthropic] = None,
    ):
        self.model = model or config.get_model()
        self.max_tokens = max_tokens or config.get_max_tokens()
        self.timeout = timeout or config.get_request_timeout()
        # SDK retries disabled: attempts and backoff are counted by ContentGenerator
        self.client = client or anthropic.Anthropic(
            api_key=api_key,
            timeout=self.timeout,
            max_retries=0,
        )

    @classmethod
    def from_env(cls) -> "MessagesClient":
        """Build a client from ANTHROPIC_API_KEY. Raises FatalConfigError if unset."""
        return cls(api_key=config.require_env("ANTHROPIC_API_KEY"))

    def complete(self, system: str, user: str) -> str:
        """
        One billed round-trip.

        Raises:
            NetworkError: connection failure, timeout or non-2xx status
            SchemaValidationError: response without a text block
        """
        try:
            message = self.client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                system=system,
                messages=[{"role": "user", "content": user}],
            )
        except anthropic.APIStatusError as e:
            raise NetworkError(
                f"Generation API error {e.status_code}: {e.message}",
                status_code=e.status_code,
            ) from e
        except anthropic.APIConnectionError as e:
            # also covers APITimeoutError
            raise NetworkError(f"Generation API unreachable: {e}") from e

        for block in message.content:
            if getattr(block, "type", None) == "text":
                return block.text

        raise SchemaValidationError("No text content in response")
