"""
# `tonality`: Lilypond-Style Pitch Notation and Interval Arithmetic

This is the top-level module of the `tonality` library. You can access everything from here:
parsing notes into semitone values (`parseNote`, `makeTonality`), rendering them back with
key-aware spelling (`PitchSet.render`, `spell`), interval arithmetic (`interval2semitones`,
`getSemitones`) and keys, scales and chords (`Key`, `getScale`, `getChord`).
"""

from ._impl import *  # noqa: F401, F403
