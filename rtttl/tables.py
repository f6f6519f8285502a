from typing import Sequence

BPM = (
    25, 28, 31, 35, 40, 45, 50,
    56, 63, 70, 80, 90, 100, 112,
    125, 140, 160, 180, 200, 225, 250,
    285, 320, 355, 400, 450, 500, 565,
    635, 715, 800, 900,
)

DURATION = (1, 2, 4, 8, 16, 32)

OCTAVE = (5, 6, 7, 8)


def is_valid(table: Sequence[int], value: int) -> bool:
    return value in table


def nearest(table: Sequence[int], value: int) -> int:
    """Returns the table entry closest to value.

        The table must be sorted in ascending order. When value sits half way
        between two entries, the lower one wins.
    """
    for i, entry in enumerate(table):
        if entry == value:
            return entry
        if entry > value:
            if i >= 1:
                low, high = table[i - 1], entry
                return low if (value - low) <= (high - value) else high
            return entry
    return table[-1]


def is_valid_bpm(bpm: int) -> bool:
    return is_valid(BPM, bpm)


def nearest_bpm(bpm: int) -> int:
    return nearest(BPM, bpm)


def is_valid_duration(duration: int) -> bool:
    return is_valid(DURATION, duration)


def nearest_duration(duration: int) -> int:
    return nearest(DURATION, duration)


def is_valid_octave(octave: int) -> bool:
    return is_valid(OCTAVE, octave)


def nearest_octave(octave: int) -> int:
    return nearest(OCTAVE, octave)
