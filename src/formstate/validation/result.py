"""Validation result — immutable outcome of a submit-time validation pass."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """The outcome of validating every registered field of a form.

    ``is_valid`` is True when there are no errors.
    The result is falsy when invalid, so you can write::

        result = store.validate()
        if not result:
            render(errors=result.errors)

    ``values`` is the value document that was validated.

    ``errors`` maps field paths to the first failing rule's message::

        {"name": "This field is required",
         "email": "Invalid format"}
    """

    values: Mapping[str, Any]
    errors: Mapping[str, str]

    @property
    def is_valid(self) -> bool:
        """True if validation passed with no errors."""
        return not self.errors

    def __bool__(self) -> bool:
        """Falsy when invalid — enables ``if not result:`` pattern."""
        return self.is_valid
