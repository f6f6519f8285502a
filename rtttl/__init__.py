
from .parser import ParseResult, Parser, parse
from .tables import (
    BPM,
    DURATION,
    OCTAVE,
    is_valid_bpm,
    is_valid_duration,
    is_valid_octave,
    nearest_bpm,
    nearest_duration,
    nearest_octave,
)
from .typing import Defaults, Note, Pitch

__all__ = [
    "ParseResult",
    "Parser",
    "parse",
    "BPM",
    "DURATION",
    "OCTAVE",
    "is_valid_bpm",
    "is_valid_duration",
    "is_valid_octave",
    "nearest_bpm",
    "nearest_duration",
    "nearest_octave",
    "Defaults",
    "Note",
    "Pitch",
]
