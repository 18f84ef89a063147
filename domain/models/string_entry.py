"""
StringEntry value object for a single key/value pair of the string map.
"""

from typing import Optional

from pydantic import BaseModel, Field

from domain.converters.text import reverse_text


class StringEntry(BaseModel):
    """
    Value object representing one entry of the string map.

    Under canonical insertion the key is the value reversed. Entries
    produced after re-keying (e.g. uppercasing) may break that relation,
    which `is_reversal` reports.

    Examples:
        >>> entry = StringEntry.from_value("abc")
        >>> entry.key
        'cba'
        >>> entry.is_reversal
        True

        >>> StringEntry(key="CBA", value="abc").is_reversal
        False
    """

    key: Optional[str] = Field(default=None, description="Map key (reversed value)")
    value: Optional[str] = Field(default=None, description="Original string")

    @classmethod
    def from_value(cls, value: str) -> "StringEntry":
        """Build the canonical entry for a value."""
        return cls(key=reverse_text(value), value=value)

    @property
    def is_reversal(self) -> bool:
        """True if the key is exactly the reversed value."""
        if self.key is None or self.value is None:
            return False
        return self.key == reverse_text(self.value)

    def __str__(self) -> str:
        return f"{self.key!r} -> {self.value!r}"

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {"key": "cba", "value": "abc"},
                {"key": "ba", "value": "ab"},
            ]
        },
    }
