"""
Color model - validated "#rrggbb" value

Kernel operations exchange plain "#rrggbb" strings; Color is used where a
string from outside (configuration) has to be validated and normalized.
Uses utils.colors for the actual conversion functions.
"""

import re
from dataclasses import dataclass
from utils.colors import hex_to_rgb, rgb_to_hex

HEX_COLOR_PATTERN = re.compile(r"#[0-9a-fA-F]{6}")


@dataclass(frozen=True)
class Color:
    """
    Immutable RGB color (channels 0-255)

    Example:
        Color.from_hex("#FF8000").to_hex()   # "#ff8000"
    """

    r: int
    g: int
    b: int

    @classmethod
    def from_hex(cls, value: str) -> 'Color':
        """
        Create from "#rrggbb"

        Raises:
            ValueError: If value isn't a 7-character hex color
        """
        if not isinstance(value, str) or not HEX_COLOR_PATTERN.fullmatch(value):
            raise ValueError(f"Invalid hex color: {value!r} (expected #RRGGBB)")
        return cls(*hex_to_rgb(value))

    def to_hex(self) -> str:
        """Lower-case "#rrggbb" representation"""
        return rgb_to_hex(self.r, self.g, self.b)
