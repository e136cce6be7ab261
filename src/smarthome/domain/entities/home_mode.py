"""Home mode entity."""

from enum import Enum

from smarthome.core.exceptions import ValidationError


class HomeMode(str, Enum):
    """Operating mode of the whole home."""

    NORMAL = "NORMAL"
    AWAY = "AWAY"
    NIGHT = "NIGHT"
    VACATION = "VACATION"

    @classmethod
    def parse(cls, value: str) -> "HomeMode":
        """Parse a mode name case-insensitively.

        Raises:
            ValidationError: If the name is not a known mode.
        """
        normalized = (value or "").strip().upper()
        try:
            return cls[normalized]
        except KeyError:
            raise ValidationError(f"Invalid home mode: {value}") from None
