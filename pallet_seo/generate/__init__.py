"""Page content generation: prompts, API client, validation and phrase tracking."""
