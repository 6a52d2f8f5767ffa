from dataclasses import dataclass

from pixshade.adjust import FONT_ASPECT_RATIO
from pixshade.colour import Colour


@dataclass
class RenderOptions:
    scale: float = 1.0
    aspect_ratio: float = FONT_ASPECT_RATIO
    grayscale: bool = False
    invert: bool = False
    brightness: int = 0
    contrast: float = 0.0
    hue_rotation: int = 0
    remove_bg: Colour | None = None
    tolerance: float = 10.0

    def validate(self) -> None:
        if self.scale <= 0:
            raise ValueError(f"Scale must be positive: {self.scale}")
        if self.aspect_ratio <= 0:
            raise ValueError(f"Aspect ratio must be positive: {self.aspect_ratio}")
        if self.tolerance < 0:
            raise ValueError(f"Tolerance must not be negative: {self.tolerance}")
