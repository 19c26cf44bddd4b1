"""
Command line queries, e.g. `python -m tonality scale "d,"` or
`python -m tonality interval -- m7 -P4`.
"""

from __future__ import annotations

from collections.abc import Sequence
import argparse
import logging
import sys

from ._impl import (
    TonalityError,
    PitchSet,
    getAccidentals,
    getChord,
    getDualKey,
    getScale,
    getSemitones,
    interval2semitones,
)

LOGGER_NAME = "tonality"

logger = logging.getLogger(LOGGER_NAME)


def _setupLogging(verbose: bool) -> None:
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def _render(args: argparse.Namespace) -> str:
    notes = PitchSet(args.notes)
    logger.debug("parsed %r into %s", args.notes, notes.tolist())
    if args.transpose:
        notes = notes.transpose(args.transpose)
    if args.reverse:
        notes = notes.reverse()
    return notes.render(args.key)


def _interval(args: argparse.Namespace) -> str:
    return "\n".join(str(interval2semitones(name)) for name in args.names)


def _semitones(args: argparse.Namespace) -> str:
    return str(getSemitones(args.a, args.b))


def _accidentals(args: argparse.Namespace) -> str:
    return " ".join(getAccidentals(args.key))


def _dual(args: argparse.Namespace) -> str:
    return getDualKey(args.key)


def _scale(args: argparse.Namespace) -> str:
    scale = getScale(args.key, args.shift)
    logger.debug("scale of %r: %s", args.key, scale.tolist())
    return scale.render(args.key)


def _chord(args: argparse.Namespace) -> str:
    chord = getChord(args.key, args.shift)
    logger.debug("chord of %r: %s", args.key, chord.tolist())
    return chord.render(args.key)


def _buildParser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tonality",
        description="Query notes, intervals, keys, scales and chords in Lilypond notation.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Print debugging information."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    render = subparsers.add_parser("render", help="Respell notes in a key.")
    render.add_argument("notes", help='Notes separated by spaces, e.g. "d e fis g".')
    render.add_argument("--key", default=None, help="Key used for spelling (default: c).")
    render.add_argument(
        "--transpose", type=int, default=0, help="Semitones to transpose by."
    )
    render.add_argument("--reverse", action="store_true", help="Reverse the notes.")
    render.set_defaults(func=_render)

    interval = subparsers.add_parser(
        "interval", help="Convert interval names to semitones."
    )
    # names starting with "-" go after "--", e.g. `interval -- -P4`
    interval.add_argument("names", nargs="+", help='Interval names, e.g. "m7".')
    interval.set_defaults(func=_interval)

    semitones = subparsers.add_parser(
        "semitones", help="Count the semitones between two notes."
    )
    semitones.add_argument("a", help="Starting note.")
    semitones.add_argument("b", help="Ending note.")
    semitones.set_defaults(func=_semitones)

    accidentals = subparsers.add_parser(
        "accidentals", help="List the key signature of a key."
    )
    accidentals.add_argument("key", help='Key name, e.g. "d" or "cm".')
    accidentals.set_defaults(func=_accidentals)

    dual = subparsers.add_parser("dual", help="Find the relative key of a key.")
    dual.add_argument("key", help='Key name, e.g. "d" or "cm".')
    dual.set_defaults(func=_dual)

    for name, func, what in (("scale", _scale, "scale"), ("chord", _chord, "triad")):
        sub = subparsers.add_parser(name, help=f"Print the {what} of a key.")
        sub.add_argument("key", help='Key name, e.g. "d," or "c,m".')
        sub.add_argument(
            "--shift", type=int, default=0, help="Step to start from (default: 0)."
        )
        sub.set_defaults(func=func)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _buildParser()
    args = parser.parse_args(argv)
    _setupLogging(args.verbose)

    try:
        print(args.func(args))
    except TonalityError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
