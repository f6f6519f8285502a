from dataclasses import dataclass
from enum import Enum


class Pitch(Enum):
    C = "C"
    C_SHARP = "C#"
    D = "D"
    D_SHARP = "D#"
    E = "E"
    F = "F"
    F_SHARP = "F#"
    G = "G"
    G_SHARP = "G#"
    A = "A"
    A_SHARP = "A#"
    B = "B"
    P = "P"

    def __str__(self) -> str:
        return self.value


# Alternate spellings found in the wild.
PITCH_ALIASES = {
    "H": "B",
    ";": "P",
}


def pitch_from_text(text: str) -> Pitch:
    text = text.upper()
    return Pitch(PITCH_ALIASES.get(text, text))


@dataclass(frozen=True)
class Defaults:
    duration: int = 4
    octave: int = 6
    bpm: int = 63

    def __str__(self) -> str:
        return f"d={self.duration},o={self.octave},b={self.bpm}"


@dataclass(frozen=True)
class Note:
    duration: int
    pitch: Pitch
    octave: int
    dots: int = 0

    @property
    def is_pause(self) -> bool:
        return self.pitch == Pitch.P

    @property
    def length(self) -> float:
        """Length of the note as a fraction of a whole note."""
        return (1 / self.duration) * sum(1 / (2**i) for i in range(self.dots + 1))
