from dataclasses import dataclass
from enum import Enum


class ShadeKind(Enum):
    ASCII = "ascii"
    BLOCKS = "blocks"
    HALF = "half"
    CUSTOM = "custom"


# Ramps run from darkest/emptiest to lightest/fullest
ASCII = " .-:=+*#%@"

# Light, medium and dark shade plus full block (U+2591-U+2593, U+2588)
BLOCKS = " ░▒▓█"

# Lower half, upper half and full block; chosen per cell, never by luminance
HALF = " ▄▀█"

RAMPS = {
    ShadeKind.ASCII: ASCII,
    ShadeKind.BLOCKS: BLOCKS,
    ShadeKind.HALF: HALF,
}


@dataclass(frozen=True)
class ShadeMethod:
    kind: ShadeKind
    custom_ramp: str | None = None

    def __post_init__(self):
        if self.kind is ShadeKind.CUSTOM:
            if not self.custom_ramp:
                raise ValueError("Custom shading ramp must contain at least one character")
        elif self.custom_ramp is not None:
            raise ValueError(f"{self.kind.value} shading does not take a custom ramp")

    @classmethod
    def parse(cls, text: str) -> "ShadeMethod":
        """Map a method name (case-insensitive) or a literal ramp string to a ShadeMethod."""
        name = text.lower()
        for kind in RAMPS:
            if name == kind.value:
                return cls(kind)
        return cls(ShadeKind.CUSTOM, text)

    @property
    def ramp(self) -> str:
        if self.kind is ShadeKind.CUSTOM:
            return self.custom_ramp
        return RAMPS[self.kind]

    @property
    def height_multiplier(self) -> int:
        return 2 if self.kind is ShadeKind.HALF else 1

    def __str__(self) -> str:
        return self.kind.value
