import unittest

from rtttl.typing import Defaults, Note, Pitch, pitch_from_text


class TestTyping(unittest.TestCase):

    def test_pitch_from_text(self):
        self.assertEqual(pitch_from_text("c#"), Pitch.C_SHARP)
        self.assertEqual(pitch_from_text("h"), Pitch.B)
        self.assertEqual(pitch_from_text(";"), Pitch.P)
        self.assertEqual(pitch_from_text("p"), Pitch.P)
        self.assertEqual(str(Pitch.G_SHARP), "G#")

    def test_defaults(self):
        self.assertEqual(Defaults(), Defaults(4, 6, 63))
        self.assertEqual(str(Defaults(8, 5, 200)), "d=8,o=5,b=200")

    def test_note_length(self):
        self.assertEqual(Note(4, Pitch.C, 6).length, 0.25)
        self.assertEqual(Note(4, Pitch.C, 6, 1).length, 0.25 + 0.125)
        self.assertEqual(Note(4, Pitch.C, 6, 2).length, 0.25 + 0.125 + 0.0625)
        self.assertTrue(Note(8, Pitch.P, 5).is_pause)
        self.assertFalse(Note(8, Pitch.A, 5).is_pause)
