"""formstate exception hierarchy.

Only programmer errors are raised. A failed validation or a path that does
not resolve on read is an expected outcome and is reported through state.
"""


class FormStateError(Exception):
    """Base for all formstate-specific errors."""


class PathError(FormStateError, ValueError):
    """Raised when a field path is malformed or cannot address its target.

    Empty paths, empty segments (``"a..b"``) and key segments used against
    an existing sequence on write all end up here.
    """

    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid field path {path!r}: {detail}")


class RuleSetError(FormStateError, TypeError):
    """Raised when a rule set cannot be normalized.

    Typically caught at ``FormStore.register()`` time, before any value
    is validated.
    """
