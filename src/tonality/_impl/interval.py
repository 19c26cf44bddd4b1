from functools import lru_cache
import re

from .diatonic import MAJOR_SCALE_TONES, _intervalQualityMap, _qualInvMap
from .errors import InvalidInterval
from .note import parseNote
from .utils.number import isInt

__all__ = ["interval2semitones", "semitones2interval", "getSemitones"]

_intervalRe = re.compile(
    r"(?P<sign>[+-]?)(?:(?P<tritone>TT)|(?P<qual>[A-Za-z]*)(?P<num>\d+))"
)
_multipleAugRe = re.compile(r"^A+$")
_multipleDimRe = re.compile(r"^d+$")

# simplest name of each interval within an octave, as (quality, number)
_simpleIntervals = (
    ("P", 1),
    ("m", 2),
    ("M", 2),
    ("m", 3),
    ("M", 3),
    ("P", 4),
    ("A", 4),
    ("P", 5),
    ("m", 6),
    ("M", 6),
    ("m", 7),
    ("M", 7),
)
_TRITONE = 6


def _parseQual(src: str) -> int:
    if len(src) == 0:  # bare number, taken as perfect
        return 0
    quality = _intervalQualityMap.get(src)
    if quality is None:
        if _multipleAugRe.match(src):
            return len(src) + 1
        elif _multipleDimRe.match(src):
            return -len(src) - 1
        raise InvalidInterval(f"Invalid interval quality: {src}")
    return quality


@lru_cache
def _parseInterval(src: str) -> int:
    match = _intervalRe.fullmatch(src)
    if match is None:
        raise InvalidInterval(f"Invalid interval format: {src}")
    if match.group("tritone"):
        tone = _TRITONE
    else:
        step = int(match.group("num"))
        if step == 0:
            raise InvalidInterval("Interval number cannot be zero.")
        step -= 1
        qual = _parseQual(match.group("qual"))
        octave, ostep = divmod(step, 7)
        tone = int(MAJOR_SCALE_TONES[ostep]) + octave * 12 + _qualInvMap(ostep, qual)
    return -tone if match.group("sign") == "-" else tone


def interval2semitones(src: str) -> int:
    """
    Converts an interval name to a signed number of semitones.

    ```ebnf
    interval = [sign], ("TT" | [quality], number);
    sign     = "+" | "-";
    quality  = "P" | "M" | "m" | "A", {"A"} | "d", {"d"};
    number   = ? positive integer ?;
    ```

    A bare number is read as a perfect interval. Numbers greater than 8 denote compound
    intervals.

    Examples:

    | input | output |
    |:-|-:|
    | `"P5"` | `7` |
    | `"m7"` | `10` |
    | `"d8"` | `11` |
    | `"TT"` | `6` |
    | `"-P4"` | `-5` |
    | `"m16"` | `25` |
    """
    if not isinstance(src, str):
        raise InvalidInterval(f"Invalid interval format: {src!r}")
    return _parseInterval(src)


def semitones2interval(n: int, tritone: bool = True) -> str:
    """
    Returns the simplest interval name spanning `n` semitones, the inverse of
    `interval2semitones()`. Minor intervals are preferred over augmented ones, e.g. `3` gives
    `"m3"` instead of `"A2"`. The simple tritone is named `"TT"` unless `tritone` is `False`,
    in which case it is named `"A4"`.
    """
    if not isInt(n):
        raise InvalidInterval(f"Invalid number of semitones: {n!r}")
    n = int(n)
    if n < 0:
        return f"-{semitones2interval(-n, tritone)}"
    octave, tone = divmod(n, 12)
    if tone == _TRITONE and octave == 0 and tritone:
        return "TT"
    qual, num = _simpleIntervals[tone]
    return f"{qual}{num + octave * 7}"


def getSemitones(a: str, b: str) -> int:
    """
    Number of semitones from note `a` up to note `b`, negative when `b` is lower than `a`.
    """
    return parseNote(b) - parseNote(a)
