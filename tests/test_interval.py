import unittest
from pathlib import Path
import sys

DIR = Path(__file__).parent if "__file__" in locals() else Path.cwd()
sys.path.append(str(DIR / "../src"))

import tonality as tn  # noqa: E402


class TestInterval(unittest.TestCase):
    def test_perfect(self):
        testData = (
            ("P1", 0),
            ("P4", 5),
            ("P5", 7),
            ("P8", 12),
            ("P11", 17),
            ("P15", 24),
        )
        for src, ans in testData:
            self.assertEqual(tn.interval2semitones(src), ans)
            # bare numbers are perfect intervals
            self.assertEqual(tn.interval2semitones(src[1:]), ans)

    def test_major_minor(self):
        testData = (
            ("m2", 1),
            ("M2", 2),
            ("m3", 3),
            ("M3", 4),
            ("m6", 8),
            ("M6", 9),
            ("m7", 10),
            ("M7", 11),
            ("M9", 14),
            ("m16", 25),
        )
        for src, ans in testData:
            self.assertEqual(tn.interval2semitones(src), ans)

    def test_augmented_diminished(self):
        testData = (
            ("A2", 3),
            ("d3", 2),
            ("d8", 11),
            ("A5", 8),
            ("d14", 21),
            ("A7", 12),
            ("A4", 6),
            ("d5", 6),
            ("A1", 1),
            ("d7", 9),
            ("AA4", 7),
            ("dd5", 5),
            ("dd3", 1),
        )
        for src, ans in testData:
            self.assertEqual(tn.interval2semitones(src), ans)

    def test_sign(self):
        testData = (
            ("-P4", -5),
            ("-m7", -10),
            ("-A5", -8),
            ("-d14", -21),
            ("+P5", 7),
            ("-P1", 0),
        )
        for src, ans in testData:
            self.assertEqual(tn.interval2semitones(src), ans)

    def test_tritone(self):
        self.assertEqual(tn.interval2semitones("TT"), 6)
        self.assertEqual(tn.interval2semitones("TT"), tn.interval2semitones("d5"))
        self.assertEqual(tn.interval2semitones("TT"), tn.interval2semitones("A4"))
        self.assertEqual(tn.interval2semitones("-TT"), -6)

    def test_invalid(self):
        for src in ("", "P", "X5", "P0", "0", "M", "TT5", "P-5", "5P", "Pm5"):
            with self.assertRaises(tn.InvalidInterval, msg=src):
                tn.interval2semitones(src)
        with self.assertRaises(ValueError):
            tn.interval2semitones(5)  # type: ignore

    def test_semitones2interval(self):
        testData = (
            (0, "P1"),
            (1, "m2"),
            (3, "m3"),
            (5, "P4"),
            (6, "TT"),
            (7, "P5"),
            (11, "M7"),
            (12, "P8"),
            (17, "P11"),
            (18, "A11"),
            (25, "m16"),
            (-5, "-P4"),
            (-6, "-TT"),
        )
        for n, ans in testData:
            self.assertEqual(tn.semitones2interval(n), ans)
        self.assertEqual(tn.semitones2interval(6, tritone=False), "A4")
        for n in range(-30, 31):
            self.assertEqual(tn.interval2semitones(tn.semitones2interval(n)), n)
        with self.assertRaises(tn.InvalidInterval):
            tn.semitones2interval(1.5)

    def test_getSemitones(self):
        self.assertEqual(tn.getSemitones("c", "d"), 2)
        self.assertEqual(tn.getSemitones("c", "c'"), 12)
        self.assertEqual(tn.getSemitones("c", "c,"), -12)
        self.assertEqual(tn.getSemitones("fis", "c"), -6)
        self.assertEqual(tn.getSemitones("bes,", "d'"), 16)
        with self.assertRaises(tn.InvalidNote):
            tn.getSemitones("c", "x")


if __name__ == "__main__":
    unittest.main()
