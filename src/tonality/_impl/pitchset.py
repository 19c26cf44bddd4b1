from __future__ import annotations

from collections.abc import Sequence, Iterable, Iterator
from numbers import Real
from typing import Self, Any, overload
import typing as t
import importlib.util

import numpy as np
from sortedcontainers import SortedSet

from .errors import InvalidPitch
from .note import parseNote
from .spelling import AcciPrefs, _spellAll
from .utils.cls import cachedGetter, lazyIsInstance
from .utils.number import isInt, resolveInt

if t.TYPE_CHECKING:  # pragma: no cover
    import music21 as m21  # type: ignore
    from .key import Key

__all__ = ["PitchSet", "makeTonality", "equals"]

# values are stored as 64-bit integers
_TONE_INFO = np.iinfo(np.int64)


def _checkRange(tone: int) -> int:
    if not _TONE_INFO.min <= tone <= _TONE_INFO.max:
        raise InvalidPitch(f"Pitch value out of range: {tone}")
    return tone


def _resolveTone(src: Any) -> int:
    if isInt(src):
        return _checkRange(resolveInt(src))
    if lazyIsInstance(src, "music21.pitch.Pitch"):
        # relative to middle C
        tone = src.ps - 60
        if isInt(tone):
            return _checkRange(int(tone))
    raise InvalidPitch(f"Invalid pitch value: {src!r}")


class PitchSet(Sequence[int]):
    """
    An ordered collection of semitone values, such as a scale, a chord or a melody. Values are
    relative to the C of the unmarked octave in Lilypond notation (`c`), so that `c'` is `12`
    and `c,` is `-12`.

    A `PitchSet` is immutable. Operations like `transpose()` and `reverse()` return new
    objects.
    """

    __slots__ = ("_tones", "_hash")
    _tones: np.ndarray

    @classmethod
    def _newFromTrustedArray(cls, tones: np.ndarray) -> Self:
        self = super().__new__(cls)
        self._tones = tones
        self._tones.flags.writeable = False
        return self

    if t.TYPE_CHECKING:  # pragma: no cover

        @overload
        def __new__(cls, src: str) -> Self:
            """
            Creates a `PitchSet` from whitespace separated note names, e.g. `"d e fis g"`.
            See `parseNote()` for the accepted note notation.
            """
            ...

        @overload
        def __new__(cls, src: int) -> Self:
            """Creates a `PitchSet` holding a single semitone value."""
            ...

        @overload
        def __new__(cls, src: Iterable[int | m21.pitch.Pitch]) -> Self:
            """
            Creates a `PitchSet` from semitone values. Elements must be integers, or real
            numbers with integer values. `music21` pitches are also accepted.
            """
            ...

        @overload
        def __new__(cls, src: PitchSet) -> Self:
            """Returns `src` itself."""
            ...

    def __new__(cls, src=()) -> Self:
        if isinstance(src, PitchSet):
            return src
        if isinstance(src, str):
            tones = [parseNote(token) for token in src.split()]
        elif isinstance(src, Real) or lazyIsInstance(src, "music21.pitch.Pitch"):
            tones = [_resolveTone(src)]
        elif isinstance(src, Iterable):
            tones = [_resolveTone(tone) for tone in src]
        else:
            raise InvalidPitch(f"Invalid pitch collection: {src!r}")
        return cls._newFromTrustedArray(np.array(tones, dtype=np.int64))

    @property
    def tones(self) -> np.ndarray:
        """Semitone values as a read-only `numpy` array."""
        return self._tones

    def transpose(self, n: int) -> Self:
        """Returns a new `PitchSet` with every value raised by `n` semitones."""
        if not isInt(n):
            raise InvalidPitch(f"Invalid transposition: {n!r}")
        n = _checkRange(int(n))
        if len(self._tones) > 0:
            _checkRange(int(self._tones.min()) + n)
            _checkRange(int(self._tones.max()) + n)
        return self._newFromTrustedArray(self._tones + n)

    def reverse(self) -> Self:
        """Returns a new `PitchSet` with the values in reverse order."""
        return self._newFromTrustedArray(self._tones[::-1].copy())

    def render(self, key: Key | str | None = None) -> str:
        """
        Renders the values as note names separated by spaces, spelled in the context of
        `key`. When `key` is omitted, C major is assumed and notes outside of it are spelled
        with sharps.
        """
        if key is None:
            acciPref = AcciPrefs.SHARP
        else:
            from .key import Key  # avoid cyclic import

            acciPref = Key(key).acciPref
        return " ".join(_spellAll(self.tolist(), acciPref))

    def pitchClasses(self) -> SortedSet:
        """Distinct pitch classes of the values, in ascending order."""
        return SortedSet(int(tone) % 12 for tone in self._tones)

    def intervals(self) -> np.ndarray:
        """
        Returns the differences between adjacent values, in semitones.
        """
        return np.diff(self._tones)

    def tolist(self) -> list[int]:
        return [int(tone) for tone in self._tones]

    def m21(self, key: Key | str | None = None) -> list[m21.pitch.Pitch]:
        """
        Convert to a list of `music21.pitch.Pitch` objects, spelled as `render(key)` does.
        `c` is mapped to middle C (`C4`).

        **Note**: `music21` must be installed first for this method to work.
        """
        if importlib.util.find_spec("music21") is None:
            raise ImportError("`music21` must be installed first for the conversion.")
        import music21 as m21

        from .key import Key  # avoid cyclic import
        from .spelling import _spell

        acciPref = AcciPrefs.SHARP if key is None else Key(key).acciPref
        result = []
        for tone in self.tolist():
            step, acci, o = _spell(tone, acciPref)
            result.append(
                m21.pitch.Pitch(
                    step="CDEFGAB"[step],
                    accidental=acci if acci != 0 else None,
                    octave=o + 4,
                )
            )
        return result

    @overload
    def __getitem__(self, key: int) -> int: ...

    @overload
    def __getitem__(self, key: slice) -> Self: ...

    def __getitem__(self, key: int | slice) -> int | Self:
        if isinstance(key, slice):
            return self._newFromTrustedArray(self._tones[key].copy())
        return int(self._tones[key])

    def __len__(self) -> int:
        return len(self._tones)

    def __iter__(self) -> Iterator[int]:
        return iter(self.tolist())

    def __add__(self, other: Any) -> Self:
        if not isInt(other):
            return NotImplemented
        return self.transpose(other)

    __radd__ = __add__

    def __sub__(self, other: Any) -> Self:
        if not isInt(other):
            return NotImplemented
        return self.transpose(-other)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, PitchSet):
            return False
        return self._tones.shape == other._tones.shape and bool(
            np.all(self._tones == other._tones)
        )

    @cachedGetter
    def __hash__(self) -> int:
        return hash(self._tones.tobytes())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}("{self!s}")'

    def __copy__(self) -> Self:
        return self

    def __deepcopy__(self, memo) -> Self:
        return self


def makeTonality(src: str | int | Iterable[int] | PitchSet = ()) -> PitchSet:
    """
    Creates a `PitchSet` from note names, a single semitone value, a sequence of semitone
    values or another `PitchSet`. Equivalent to `PitchSet(src)`.
    """
    return PitchSet(src)


def equals(
    a: str | int | Iterable[int] | PitchSet, b: str | int | Iterable[int] | PitchSet
) -> bool:
    """
    Whether `a` and `b` denote the same ordered semitone values. Enharmonic spellings are not
    distinguished, so `equals("dis", "es")` is `True`.
    """
    return PitchSet(a) == PitchSet(b)
