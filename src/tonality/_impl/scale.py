from collections.abc import Sequence

from .diatonic import MAJOR_SCALE_TONES, MINOR_SCALE_TONES
from .key import Key
from .pitchset import PitchSet
from .utils.collection import cycRoll
from .utils.number import isInt

__all__ = ["Modes", "TRIAD_STEPS", "getScale", "getChord"]


class Modes:
    """Scale tones of the supported modes, relative to the tonic."""

    MAJOR = IONIAN = MAJOR_SCALE_TONES
    MINOR = AEOLIAN = MINOR_SCALE_TONES


TRIAD_STEPS: Sequence[int] = (0, 2, 4)
"""Scale steps making up a triad: the root, the third and the fifth."""


def _resolveShift(shift: int) -> int:
    if not isInt(shift):
        raise TypeError(f"shift must be an integer, got {shift.__class__.__name__}")
    return int(shift)


def getScale(key: Key | str, shift: int = 0) -> PitchSet:
    """
    Returns the major or natural minor scale of `key`, starting from the tonic of the key.

    A nonzero `shift` rotates the scale to start from another step while keeping it
    ascending: notes moved from the front to the back are raised by an octave, e.g.
    `getScale("c,m", 1)` gives `d, es, f, g, as, bes, c`. A negative `shift` moves notes from
    the back to the front, lowered by an octave.
    """
    key = Key(key)
    shift = _resolveShift(shift)
    tones = [key.tonic + int(tone) for tone in key.tones]
    return PitchSet(cycRoll(tones, shift, 12))


def getChord(key: Key | str, shift: int = 0) -> PitchSet:
    """
    Returns the tonic triad of `key`. `shift` selects an inversion the same way it rotates a
    scale in `getScale()`, e.g. `getChord("cm", 1)` gives `es g c'`.
    """
    key = Key(key)
    shift = _resolveShift(shift)
    tones = [key.tonic + int(key.tones[step]) for step in TRIAD_STEPS]
    return PitchSet(cycRoll(tones, shift, 12))
