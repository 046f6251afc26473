"""Form configuration.

FormConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass

DEFAULT_REQUIRED_MESSAGE = "This field is required"
DEFAULT_PATTERN_MESSAGE = "Invalid format"
DEFAULT_INVALID_MESSAGE = "Invalid value"


@dataclass(frozen=True, slots=True)
class FormConfig:
    """Store-wide configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = FormConfig(required_message="Please fill in this field")
        store = FormStore(config=config)

    A message configured on an individual rule always wins over these.
    """

    # Fallback messages when a rule carries none
    required_message: str = DEFAULT_REQUIRED_MESSAGE
    pattern_message: str = DEFAULT_PATTERN_MESSAGE
    invalid_message: str = DEFAULT_INVALID_MESSAGE
