from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache
from typing import Self, Any
import typing as t

from .diatonic import (
    MAJOR_SCALE_TONES,
    MINOR_SCALE_TONES,
    STEP_NAMES_CO5,
    _co5Pos,
)
from .errors import InvalidKey, InvalidNote
from .note import _parseNote, noteName
from .spelling import AcciPref, _keyAcciPref, _signature, _spell
from .utils.cls import NewHelperMixin, cachedGetter
from .utils.number import isInt

if t.TYPE_CHECKING:  # pragma: no cover
    from .pitchset import PitchSet

__all__ = ["Key", "getAccidentals", "getDualKey"]


def _canonicalFifths(tonic: int, minor: bool) -> int:
    """
    Number of sharps (positive) or flats (negative) of a key determined by its tonic pitch
    class only. Major keys range from 5 flats (D flat) to 6 sharps (F sharp).
    """
    if minor:
        tonic += 3
    fifths = tonic * 7 % 12
    if fifths > 6:
        fifths -= 12
    return fifths


class Key(NewHelperMixin):
    """
    A major or minor key, written as a note name optionally followed by `m` for minor, e.g.
    `"d"`, `"bes"`, `"cism"`, `"c,m"`.

    The octave marks of the name place the tonic, which matters to `scale()` and `chord()`
    but not to the key signature.
    """

    __slots__ = ("_tonic", "_minor", "_fifths", "_hash")
    _tonic: int
    _minor: bool
    _fifths: int

    def __new__(cls, src: str | Key) -> Self:
        if isinstance(src, Key):
            return src
        if isinstance(src, str):
            return cls._parse(src)
        raise InvalidKey(f"Invalid key name: {src!r}")

    @classmethod
    def _newImpl(cls, tonic: int, minor: bool, fifths: int) -> Self:
        self = super().__new__(cls)
        self._tonic = tonic
        self._minor = minor
        self._fifths = fifths
        return self

    @classmethod
    @lru_cache
    def _parse(cls, src: str) -> Self:
        minor = src.endswith("m")
        noteSrc = src[:-1] if minor else src
        try:
            step, acci, octave = _parseNote(noteSrc)
        except InvalidNote as e:
            raise InvalidKey(f"Invalid key name: {src}") from e
        tonic = int(MAJOR_SCALE_TONES[step]) + acci + octave * 12
        # follow the written spelling when it names a real key signature
        fifths = _co5Pos(step, acci) - (3 if minor else 0)
        if abs(fifths) > 7:
            fifths = _canonicalFifths(tonic, minor)
        return cls._newHelper(tonic, minor, fifths)

    @classmethod
    def fromTonic(cls, tonic: int, minor: bool = False) -> Self:
        """
        Creates a key from the semitone value of its tonic. The key signature is chosen by
        the pitch class of the tonic, from 5 flats to 6 sharps for major keys.
        """
        if not isInt(tonic):
            raise InvalidKey(f"Invalid key tonic: {tonic!r}")
        tonic = int(tonic)
        minor = bool(minor)
        return cls._newHelper(tonic, minor, _canonicalFifths(tonic, minor))

    @classmethod
    def co5(cls, n: int = 0, minor: bool = False) -> Self:
        """
        Returns the key with `n` sharps (positive `n`) or `-n` flats (negative `n`) in its key
        signature, its tonic placed in the unmarked octave.
        """
        if not isInt(n) or abs(n) > 7:
            raise InvalidKey(f"Invalid number of fifths: {n!r}")
        n = int(n)
        step = n * 4 % 7
        acci = (n + 1) // 7
        key = cls._newHelper(int(MAJOR_SCALE_TONES[step]) + acci, False, n)
        return key.dual if minor else key

    @property
    def tonic(self) -> int:
        """Semitone value of the tonic."""
        return self._tonic

    @property
    def pc(self) -> int:
        """Pitch class of the tonic."""
        return self._tonic % 12

    @property
    def minor(self) -> bool:
        return self._minor

    @property
    def fifths(self) -> int:
        """
        Position of the key on the circle of fifths, relative to C major / A minor. Equals the
        number of sharps for positive values and minus the number of flats for negative
        values.
        """
        return self._fifths

    @property
    def tones(self) -> Sequence[int]:
        """Scale tones of the key relative to its tonic."""
        return MINOR_SCALE_TONES if self._minor else MAJOR_SCALE_TONES

    @property
    def signature(self) -> tuple[int, ...]:
        """Accidental the key signature puts on each step, from C to B."""
        return _signature(self._fifths)

    @property
    def accidentals(self) -> list[str]:
        """
        Accidentals of the key signature in the order they are written, e.g. `["f#", "c#"]`
        for D major and `["bb", "eb", "ab"]` for C minor.
        """
        if self._fifths >= 0:
            return [f"{name}#" for name in STEP_NAMES_CO5[: self._fifths]]
        else:
            return [f"{name}b" for name in STEP_NAMES_CO5[::-1][: -self._fifths]]

    @property
    def acciPref(self) -> AcciPref:
        """Accidental preference used to spell notes in this key."""
        return _keyAcciPref(self._fifths)

    @property
    def dual(self) -> Self:
        """
        The relative key, sharing the same key signature: the relative minor of a major key
        (a minor third below) or the relative major of a minor key (a minor third above). The
        new tonic is written in the same octave as the current one.
        """
        tonic = self._tonic + (3 if self._minor else -3)
        o = _spell(self._tonic, self.acciPref)[2]
        newO = _spell(tonic, self.acciPref)[2]
        tonic += (o - newO) * 12
        return self._newHelper(tonic, not self._minor, self._fifths)

    def isEnharmonic(self, other: Key | str) -> bool:
        other = Key(other)
        return self.pc == other.pc and self._minor == other._minor

    def scale(self, shift: int = 0) -> PitchSet:
        """Equivalent to `getScale(self, shift)`."""
        from .scale import getScale  # avoid cyclic import

        return getScale(self, shift)

    def chord(self, shift: int = 0) -> PitchSet:
        """Equivalent to `getChord(self, shift)`."""
        from .scale import getChord  # avoid cyclic import

        return getChord(self, shift)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Key):
            return False
        return (
            self._tonic == other._tonic
            and self._minor == other._minor
            and self._fifths == other._fifths
        )

    @cachedGetter
    def __hash__(self) -> int:
        return hash((self._tonic, self._minor, self._fifths))

    def __str__(self) -> str:
        name = noteName(*_spell(self._tonic, self.acciPref))
        return f"{name}m" if self._minor else name

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}("{self!s}")'

    def __reduce__(self):
        return (self._newImpl, (self._tonic, self._minor, self._fifths))


def getAccidentals(key: Key | str) -> list[str]:
    """Accidentals of the key signature of `key`. See `Key.accidentals`."""
    return Key(key).accidentals


def getDualKey(key: Key | str) -> str:
    """Name of the relative key of `key`. See `Key.dual`."""
    return str(Key(key).dual)
