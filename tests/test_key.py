import unittest
from pathlib import Path
import sys
import pickle

DIR = Path(__file__).parent if "__file__" in locals() else Path.cwd()
sys.path.append(str(DIR / "../src"))

import tonality as tn  # noqa: E402


class TestKey(unittest.TestCase):
    def test_slots(self):
        self.assertNotIn("__dict__", dir(tn.Key))
        with self.assertRaises(AttributeError):
            tn.Key("c").x = 1  # type: ignore

    def test_parse(self):
        testData = (
            ("c", 0, False, 0),
            ("d", 2, False, 2),
            ("bes", 10, False, -2),
            ("h", 11, False, 5),
            ("ges", 6, False, -6),
            ("fis", 6, False, 6),
            ("ces", -1, False, -7),
            ("cis", 1, False, 7),
            ("am", 9, True, 0),
            ("cm", 0, True, -3),
            ("gm", 7, True, -2),
            ("cism", 1, True, 4),
            ("aism", 10, True, 7),
            ("esm", 3, True, -6),
            ("c,m", -12, True, -3),
            ("d'", 14, False, 2),
        )
        for src, tonic, minor, fifths in testData:
            key = tn.Key(src)
            self.assertEqual(key.tonic, tonic, src)
            self.assertEqual(key.minor, minor, src)
            self.assertEqual(key.fifths, fifths, src)

    def test_unusual_spelling(self):
        # spellings without a real key signature fall back to the pitch class
        self.assertEqual(tn.Key("desm").fifths, 4)
        self.assertEqual(tn.Key("disis").fifths, 4)
        self.assertEqual(tn.Key("fes").fifths, 4)
        self.assertTrue(tn.Key("desm").isEnharmonic("cism"))

    def test_invalid(self):
        for src in ("", "m", "x", "cmm", "c m", "fiss"):
            with self.assertRaises(tn.InvalidKey, msg=src):
                tn.Key(src)
        with self.assertRaises(tn.InvalidKey):
            tn.Key(0)  # type: ignore
        with self.assertRaises(ValueError):
            tn.getAccidentals("xm")

    def test_cache(self):
        self.assertIs(tn.Key("d"), tn.Key("d"))
        self.assertIs(tn.Key(tn.Key("d")), tn.Key("d"))
        self.assertEqual(tn.Key("D"), tn.Key("d"))
        self.assertNotEqual(tn.Key("c"), tn.Key("c'"))
        self.assertNotEqual(tn.Key("fis"), tn.Key("ges"))
        self.assertEqual(len({tn.Key("c"), tn.Key("c"), tn.Key("cm")}), 2)
        self.assertEqual(pickle.loads(pickle.dumps(tn.Key("bes"))), tn.Key("bes"))

    def test_str(self):
        for src in ("c", "d", "bes", "fis", "ges", "ces", "cism", "esm", "c,m", "d'"):
            self.assertEqual(str(tn.Key(src)), src)
        self.assertEqual(repr(tn.Key("es")), 'Key("es")')
        self.assertEqual(str(tn.Key("h")), "b")

    def test_co5(self):
        sharpKeys = ("c", "g", "d", "a", "e", "b", "fis", "cis")
        flatKeys = ("c", "f", "bes", "es", "as", "des", "ges", "ces")
        for i, ans in enumerate(sharpKeys):
            self.assertEqual(tn.Key.co5(i), tn.Key(ans))
        for i, ans in enumerate(flatKeys):
            self.assertEqual(tn.Key.co5(-i), tn.Key(ans))
        self.assertEqual(tn.Key.co5(2, minor=True), tn.Key("bm"))
        self.assertEqual(tn.Key.co5(-3, minor=True), tn.Key("cm"))
        with self.assertRaises(tn.InvalidKey):
            tn.Key.co5(8)

    def test_fromTonic(self):
        testData = (
            (0, False, "c"),
            (1, False, "des"),
            (6, False, "fis"),
            (11, False, "b"),
            (13, False, "des'"),
            (9, True, "am"),
            (1, True, "cism"),
            (3, True, "dism"),
            (8, True, "gism"),
        )
        for tonic, minor, ans in testData:
            self.assertEqual(str(tn.Key.fromTonic(tonic, minor)), ans)
        with self.assertRaises(tn.InvalidKey):
            tn.Key.fromTonic(0.5)

    def test_signature(self):
        self.assertEqual(tn.Key("c").signature, (0, 0, 0, 0, 0, 0, 0))
        self.assertEqual(tn.Key("d").signature, (1, 0, 0, 1, 0, 0, 0))
        self.assertEqual(tn.Key("cm").signature, (0, 0, -1, 0, 0, -1, -1))
        self.assertEqual(tn.Key("cis").signature, (1,) * 7)

    def test_accidentals(self):
        self.assertEqual(tn.getAccidentals("c"), [])
        self.assertEqual(tn.getAccidentals("am"), [])
        self.assertEqual(tn.getAccidentals("d"), ["f#", "c#"])
        self.assertEqual(tn.getAccidentals("cm"), ["bb", "eb", "ab"])
        self.assertEqual(len(tn.getAccidentals("h")), 5)
        self.assertEqual(len(tn.getAccidentals("ges")), 6)
        self.assertEqual(
            tn.getAccidentals("cis"), ["f#", "c#", "g#", "d#", "a#", "e#", "b#"]
        )
        self.assertEqual(tn.Key("f").accidentals, ["bb"])

    def test_dual(self):
        testData = (
            ("c", "am"),
            ("d", "bm"),
            ("e", "cism"),
            ("cm", "es"),
            ("dm", "f"),
            ("desm", "e"),
            ("fis", "dism"),
            ("ges", "esm"),
            ("cis", "aism"),
            ("ces", "asm"),
            ("c'", "a'm"),
            ("c,m", "es,"),
        )
        for src, ans in testData:
            self.assertEqual(tn.getDualKey(src), ans, src)

    def test_dual_roundtrip(self):
        for n in range(-7, 8):
            for minor in (False, True):
                key = tn.Key.co5(n, minor)
                self.assertEqual(key.dual.dual, key)
                self.assertEqual(key.dual.fifths, key.fifths)
                self.assertNotEqual(key.dual.minor, key.minor)

    def test_isEnharmonic(self):
        self.assertTrue(tn.Key("fis").isEnharmonic("ges"))
        self.assertTrue(tn.Key("c").isEnharmonic("c'"))
        self.assertTrue(tn.Key("aism").isEnharmonic(tn.Key("besm")))
        self.assertFalse(tn.Key("c").isEnharmonic("cm"))


if __name__ == "__main__":
    unittest.main()
