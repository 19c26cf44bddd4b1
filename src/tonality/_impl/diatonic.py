from collections.abc import Sequence

import numpy as np
import pyrsistent as pyr
from bidict import bidict

__all__ = [
    "STEPS_CO5",
    "MAJOR_SCALE_TONES_CO5",
    "MAJOR_SCALE_TONES",
    "MINOR_SCALE_TONES",
    "PERFECTABLE_STEPS",
    "STEP_NAMES",
    "STEP_NAMES_CO5",
]

STEPS_CO5: Sequence[int] = np.arange(-1, 6) * 4 % 7
"""
major scale steps in circle of fifths order

*Value*: `np.array([3, 0, 4, 1, 5, 2, 6])`
"""
STEPS_CO5.flags.writeable = False

MAJOR_SCALE_TONES_CO5: Sequence[int] = np.arange(-1, 6) * 7 % 12
"""major scale tones in circle of fifths order"""
MAJOR_SCALE_TONES_CO5.flags.writeable = False

MAJOR_SCALE_TONES: Sequence[int] = np.sort(MAJOR_SCALE_TONES_CO5)
"""
Major scale tones in increasing order.

**Value**: `np.array([0, 2, 4, 5, 7, 9, 11])`
"""
MAJOR_SCALE_TONES.flags.writeable = False

MINOR_SCALE_TONES: Sequence[int] = np.array([0, 2, 3, 5, 7, 8, 10])
"""
Natural minor scale tones in increasing order, i.e. the major scale rolled to its sixth
step.
"""
MINOR_SCALE_TONES.flags.writeable = False

PERFECTABLE_STEPS = frozenset((0, 3, 4))
"""Collection of interval step difference values that can have quality "perfect"."""

STEP_NAMES: Sequence[str] = np.array(["c", "d", "e", "f", "g", "a", "b"])
"""step names from C to B, as written in notation"""
STEP_NAMES.flags.writeable = False

STEP_NAMES_CO5: Sequence[str] = STEP_NAMES[STEPS_CO5]
"""step names in circle of fifths order"""
STEP_NAMES_CO5.flags.writeable = False

# position of each step on the circle of fifths, relative to C
_stepCo5Pos = np.empty(7, dtype=int)
_stepCo5Pos[STEPS_CO5] = np.arange(-1, 6)
_stepCo5Pos.flags.writeable = False

_stepNamesInvMap = pyr.pmap(
    {str(name): i for i, name in enumerate(STEP_NAMES)} | {"h": 6}
)
"""note letter to step, with `h` accepted as the German name of B natural"""

_intervalQualityMap = bidict(
    (
        ("d", -2),  # diminished
        ("m", -1),  # minor
        ("P", 0),  # perfect
        ("M", 1),  # major
        ("A", 2),  # augmented
    )
)


def _qualInvMap(step: int, qual: int) -> int:
    """
    Mapping from interval quality to the semitone adjustment relative to the major scale tone
    of `step`. "Perfect" and "major" both leave the tone unchanged and "minor" always lowers
    it by one semitone, whatever the step.
    """
    if qual >= 1:
        return qual - 1
    elif qual >= -1:
        return qual
    elif step % 7 in PERFECTABLE_STEPS:
        return qual + 1
    else:
        return qual


def _co5Pos(step: int, acci: int) -> int:
    """Position of a spelled pitch on the circle of fifths, e.g. `0` for C, `-6` for G flat."""
    return int(_stepCo5Pos[step % 7]) + 7 * acci
