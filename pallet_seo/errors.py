"""Error taxonomy for the content pipeline."""

from typing import Optional


class PipelineError(Exception):
    """Base class for pipeline errors."""
    pass


class SchemaValidationError(PipelineError):
    """Model output is not valid JSON or does not match the content schema."""
    pass


class NetworkError(PipelineError):
    """Generation API unreachable, timed out, or returned a non-2xx status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(PipelineError):
    """A slug referenced by a snapshot is absent from the store."""
    pass


class FatalConfigError(PipelineError):
    """Required credentials or settings are missing. Aborts the run."""
    pass


class GenerationError(PipelineError):
    """All generation attempts for one page failed."""

    def __init__(self, slug: str, attempts: int, last_error: Optional[Exception] = None):
        self.slug = slug
        self.attempts = attempts
        self.last_error = last_error
        message = f"Failed to generate content for {slug} after {attempts} attempts"
        if last_error is not None:
            message += f": {last_error}"
        super().__init__(message)
