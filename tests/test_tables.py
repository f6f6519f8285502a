import unittest

from rtttl.tables import (
    BPM,
    DURATION,
    OCTAVE,
    is_valid,
    is_valid_bpm,
    is_valid_duration,
    is_valid_octave,
    nearest,
    nearest_bpm,
    nearest_duration,
    nearest_octave,
)


class TestTables(unittest.TestCase):

    def test_is_valid(self):
        self.assertTrue(is_valid_bpm(63))
        self.assertFalse(is_valid_bpm(64))
        self.assertTrue(is_valid_duration(32))
        self.assertFalse(is_valid_duration(3))
        self.assertTrue(is_valid_octave(5))
        self.assertFalse(is_valid_octave(4))
        self.assertFalse(is_valid(OCTAVE, 9))

    def test_nearest_boundaries(self):
        self.assertEqual(nearest_bpm(24), 25)
        self.assertEqual(nearest_bpm(1000), 900)
        self.assertEqual(nearest_octave(4), 5)
        self.assertEqual(nearest_octave(0), 5)
        self.assertEqual(nearest_octave(99), 8)
        self.assertEqual(nearest_duration(99), 32)
        self.assertEqual(nearest_duration(0), 1)

    def test_nearest_ties_pick_lower(self):
        self.assertEqual(nearest_duration(3), 2)
        self.assertEqual(nearest_duration(6), 4)
        self.assertEqual(nearest_duration(24), 16)
        self.assertEqual(nearest_bpm(90 + 5), 90)

    def test_nearest_between(self):
        self.assertEqual(nearest_duration(5), 4)
        self.assertEqual(nearest_duration(7), 8)
        self.assertEqual(nearest_bpm(64), 63)
        self.assertEqual(nearest_bpm(67), 70)
        self.assertEqual(nearest_bpm(120), 125)

    def test_nearest_members(self):
        for table in (BPM, DURATION, OCTAVE):
            for value in range(-5, 1000):
                self.assertIn(nearest(table, value), table)
            for value in table:
                self.assertEqual(nearest(table, value), value)

    def test_single_entry_table(self):
        self.assertEqual(nearest((7,), 1), 7)
        self.assertEqual(nearest((7,), 10), 7)
