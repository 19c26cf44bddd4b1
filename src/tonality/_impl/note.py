from functools import lru_cache
import re

from .diatonic import MAJOR_SCALE_TONES, STEP_NAMES, _stepNamesInvMap
from .errors import InvalidNote

__all__ = ["parseNote", "noteName"]

_noteRe = re.compile(
    r"(?P<step>[a-h])(?P<acci>(?:is)*|(?:es)*|(?<=[ea])s(?:es)*)(?P<marks>[',]*)",
    re.IGNORECASE,
)


def _parseAcci(src: str) -> int:
    if len(src) == 0:  # no accidental (natural)
        return 0
    if src[0] == "i":  # "is" for sharp
        return len(src) // 2
    else:  # "es" for flat, or "s" contracted after "e" and "a"
        return -((len(src) + 1) // 2)


def _parseMarks(src: str) -> int:
    return src.count("'") - src.count(",")


@lru_cache
def _parseNote(src: str) -> tuple[int, int, int]:
    """
    Parses a note token into its written spelling `(step, acci, octave)`, where `step` is the
    letter as a C major scale step from 0 (C) to 6 (B), `acci` the accidental in semitones and
    `octave` the sum of octave marks.
    """
    match = _noteRe.fullmatch(src)
    if match is None:
        raise InvalidNote(f"Invalid note name: {src}")
    step = _stepNamesInvMap[match.group("step").lower()]
    acci = _parseAcci(match.group("acci").lower())
    octave = _parseMarks(match.group("marks"))
    return step, acci, octave


def parseNote(src: str) -> int:
    """
    Parses a single note token in Lilypond notation into a semitone value relative to the C
    of the unmarked octave.

    ```ebnf
    note     = letter, [acci], {mark};
    letter   = "c" | "d" | "e" | "f" | "g" | "a" | "b" | "h" |
               ? any case variants of these items ?;
    acci     = sharps | flats;
    sharps   = "is", {"is"};
    flats    = "es", {"es"} | "s", {"es"} (* "s" only after "e" and "a" *);
    mark     = "'" | ",";
    ```

    `h` is read as B natural. Octave marks can be mixed freely, e.g. `"f,'"` is the same
    note as `"f"`.

    Examples:

    | input | output |
    |:-|-:|
    | `"c"` | `0` |
    | `"fis"` | `6` |
    | `"es"` | `3` |
    | `"ases"` | `7` |
    | `"bes,"` | `-2` |
    | `"d'"` | `14` |
    """
    if not isinstance(src, str):
        raise InvalidNote(f"Invalid note name: {src!r}")
    step, acci, octave = _parseNote(src)
    return int(MAJOR_SCALE_TONES[step]) + acci + octave * 12


def _acci2Str(step: int, acci: int) -> str:
    if acci > 0:
        return "is" * acci
    elif acci < 0:
        suffix = "es" * -acci
        if STEP_NAMES[step] in ("e", "a"):
            suffix = suffix[1:]
        return suffix
    else:
        return ""


def _marks2Str(octave: int) -> str:
    if octave >= 0:
        return "'" * octave
    else:
        return "," * -octave


def noteName(step: int, acci: int = 0, octave: int = 0) -> str:
    """
    Renders a spelled pitch as a note token. Unlike parsing, octave marks are never mixed in
    the output.
    """
    return f"{STEP_NAMES[step % 7]}{_acci2Str(step % 7, acci)}{_marks2Str(octave)}"
