from __future__ import annotations

from collections.abc import Callable, Sequence
from bisect import bisect_left, bisect_right
from functools import lru_cache
import typing as t

from .diatonic import MAJOR_SCALE_TONES, STEPS_CO5
from .errors import InvalidPitch
from .note import noteName
from .utils.number import isInt, smod

if t.TYPE_CHECKING:  # pragma: no cover
    from .key import Key

__all__ = ["AcciPref", "AcciPrefs", "spell"]

type AcciPref = Callable[[int], int]
"""
Type alias for a function that takes a pitch class and returns the preferred step (letter)
for that pitch class. The accidental can be later computed by taking the difference between
the given pitch class and the standard tone of the step in C major scale. Some predefined
accidental preference rules can be found in `AcciPrefs`, and every `Key` provides its own
through `Key.acciPref`.
"""


class AcciPrefs:
    """See `AcciPref` for details."""

    @staticmethod
    def SHARP(tone: int) -> int:
        """
        Use the natural step when the pitch class is in C major scale, otherwise the lower
        step and a sharp sign.

        Examples:

        | input | output | preferred name |
        |:-|:-|:-|
        | `1` | `0` | `cis` |
        | `3` | `1` | `dis` |
        | `6` | `3` | `fis` |
        | `8` | `4` | `gis` |
        | `10` | `5` | `ais` |
        """
        return bisect_right(MAJOR_SCALE_TONES, tone % 12) - 1

    @staticmethod
    def FLAT(tone: int) -> int:
        """
        Use the natural step when the pitch class is in C major scale, otherwise the upper
        step and a flat sign.

        Examples:

        | input | output | preferred name |
        |:-|:-|:-|
        | `1` | `1` | `des` |
        | `3` | `2` | `es` |
        | `6` | `4` | `ges` |
        | `8` | `5` | `as` |
        | `10` | `6` | `bes` |
        """
        return bisect_left(MAJOR_SCALE_TONES, tone % 12)


@lru_cache
def _signature(fifths: int) -> tuple[int, ...]:
    """Accidental of each step, from C to B, in the key with `fifths` sharps (or flats)."""
    accis = [0] * 7
    if fifths >= 0:
        for step in STEPS_CO5[:fifths]:
            accis[step] += 1
    else:
        for step in STEPS_CO5[::-1][:-fifths]:
            accis[step] -= 1
    return tuple(accis)


@lru_cache
def _keyAcciPref(fifths: int) -> AcciPref:
    signature = _signature(fifths)
    fallback = AcciPrefs.SHARP if fifths >= 0 else AcciPrefs.FLAT

    def _pref(tone: int) -> int:
        tone %= 12
        # the spelling the key signature itself gives, if any
        for step, acci in enumerate(signature):
            if (int(MAJOR_SCALE_TONES[step]) + acci - tone) % 12 == 0:
                return step
        return fallback(tone)

    return _pref


def _acci(step: int, tone: int) -> int:
    return int(smod(tone - int(MAJOR_SCALE_TONES[step]), 12, 5))


def _spell(value: int, acciPref: AcciPref) -> tuple[int, int, int]:
    step = acciPref(value % 12)
    acci = _acci(step, value % 12)
    octave = (value - int(MAJOR_SCALE_TONES[step]) - acci) // 12
    return step, acci, octave


def _spellAll(values: Sequence[int], acciPref: AcciPref) -> list[str]:
    return [noteName(*_spell(value, acciPref)) for value in values]


def spell(value: int, key: Key | str | None = None) -> str:
    """
    Spells a semitone value as a note token in the context of `key` (C major when omitted).

    Pitch classes belonging to the key are spelled the way its key signature writes them.
    Other pitch classes use a natural letter when possible, and otherwise a single sharp in
    keys with sharps (and in C major / A minor) or a single flat in keys with flats.
    """
    if not isInt(value):
        raise InvalidPitch(f"Invalid pitch value: {value!r}")
    from .key import Key  # avoid cyclic import

    acciPref = AcciPrefs.SHARP if key is None else Key(key).acciPref
    return noteName(*_spell(int(value), acciPref))
