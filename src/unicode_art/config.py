from dataclasses import dataclass
from enum import Enum

from unicode_art import charsets
from unicode_art.errors import ConfigurationError

DEFAULT_NUM_COLS = 80
DEFAULT_THRESHOLD = 127
DEFAULT_TERM_WIDTH = 80


class Preset(str, Enum):
    STANDARD = "standard"
    LEVEL_10 = "level_10"
    LEVEL_16 = "level_16"
    LEVEL_19 = "level_19"
    LEVEL_23 = "level_23"
    BLOCK = "block"
    BRAILLE = "braille"
    SUBPIXEL = "subpixel"

    @classmethod
    def parse(cls, name: "str | Preset") -> "Preset":
        if isinstance(name, Preset):
            return name
        key = str(name).strip().lower().replace("-", "_")
        try:
            return cls(key)
        except ValueError:
            choices = ", ".join(p.value for p in cls)
            raise ConfigurationError(f"Unsupported preset {name!r} (choose from: {choices})") from None

    @property
    def palette(self) -> str | None:
        """Character ramp for the classic presets, None for the other renderers."""
        return _PALETTES.get(self)


_PALETTES = {
    Preset.STANDARD: charsets.STANDARD,
    Preset.LEVEL_10: charsets.LEVELS_10,
    Preset.LEVEL_16: charsets.LEVELS_16,
    Preset.LEVEL_19: charsets.LEVELS_19,
    Preset.LEVEL_23: charsets.LEVELS_23,
}

CLASSIC_PRESETS = tuple(_PALETTES)


@dataclass(frozen=True)
class RenderOptions:
    preset: Preset = Preset.STANDARD
    num_cols: int = DEFAULT_NUM_COLS
    threshold: int = DEFAULT_THRESHOLD
    colour: bool = False
    invert: bool = False
    fit_terminal: bool = False
    term_width: int = DEFAULT_TERM_WIDTH

    def __post_init__(self):
        object.__setattr__(self, "preset", Preset.parse(self.preset))
        if isinstance(self.num_cols, bool) or not isinstance(self.num_cols, int) or self.num_cols < 1:
            raise ConfigurationError(f"num_cols must be a positive integer, got {self.num_cols!r}")
        if isinstance(self.threshold, bool) or not isinstance(self.threshold, int) or not 0 <= self.threshold <= 255:
            raise ConfigurationError(f"threshold must be an integer in 0..255, got {self.threshold!r}")
        if isinstance(self.term_width, bool) or not isinstance(self.term_width, int) or self.term_width < 1:
            raise ConfigurationError(f"term_width must be a positive integer, got {self.term_width!r}")
