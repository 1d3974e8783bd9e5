"""
Validator filter

Delegates acceptance to a validator applied to the entry's message
"""

from typing import Any

from log_dispatch.core.log_entry import LogEntry
from log_dispatch.exceptions import InvalidArgumentError
from log_dispatch.filters.base_filter import BaseFilter


class ValidatorFilter(BaseFilter):
    """
    Filter log entries using a validator object.

    The validator only needs an ``is_valid(value) -> bool`` method.
    """

    def __init__(self, validator: Any):
        """
        Initialize validator filter.

        Args:
            validator: Object exposing is_valid(value)

        Raises:
            InvalidArgumentError: If validator has no callable is_valid

        Example:
            class Digits:
                def is_valid(self, value):
                    return value.isdigit()

            filter = ValidatorFilter(Digits())
        """
        if not callable(getattr(validator, "is_valid", None)):
            raise InvalidArgumentError(
                "validator must implement is_valid(value)"
            )
        self.validator = validator

    def accept(self, entry: LogEntry) -> bool:
        """Return the validator's verdict on the message."""
        return bool(self.validator.is_valid(entry.message))

    def __repr__(self) -> str:
        """String representation."""
        return f"ValidatorFilter(validator={type(self.validator).__name__})"
