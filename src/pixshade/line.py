from pixshade.colour import Colour

RESET = "\033[0m"


def fg_escape(colour: Colour) -> str:
    r, g, b = colour
    return f"\033[38;2;{r};{g};{b}m"


def bg_escape(colour: Colour) -> str:
    r, g, b = colour
    return f"\033[48;2;{r};{g};{b}m"


class LineEmitter:
    """Accumulates one output row, emitting style escapes only where the style changes.

    A run of cells sharing a (foreground, background) pair costs one set of
    escapes, however long the run is. Each style change is preceded by a full
    reset so a background never bleeds into a following cell that has none.
    """

    def __init__(self):
        self._parts: list[str] = []
        self._foreground: Colour | None = None
        self._background: Colour | None = None

    def add(self, glyph: str, foreground: Colour, background: Colour | None = None) -> None:
        if (foreground, background) != (self._foreground, self._background) and self._parts:
            self._parts.append(RESET)
            # The reset cleared the terminal's colours, so both must be set again
            self._foreground = None
            self._background = None
        if foreground != self._foreground:
            self._parts.append(fg_escape(foreground))
            self._foreground = foreground
        if background is not None and background != self._background:
            self._parts.append(bg_escape(background))
            self._background = background
        self._parts.append(glyph)

    def finish(self) -> str:
        self._parts.append(RESET)
        return "".join(self._parts)

    def clear(self) -> None:
        self._parts.clear()
        self._foreground = None
        self._background = None
