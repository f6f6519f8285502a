import tempfile
import unittest
from pathlib import Path

from config import Config
from rtttl import parse
from rtttl.typing import Defaults


class TestConfig(unittest.TestCase):

    def test_defaults(self):
        self.assertEqual(parse("Test::c").defaults, Defaults(4, 6, 63))
        self.assertEqual(parse("Test::c", Config(bpm=100)).bpm, 100)

    def test_save_load(self):
        config = Config(duration=8, octave=5, bpm=125, name_length=12)
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            config.save(path)
            self.assertEqual(Config.load(path), config)

    def test_parse_with_config(self):
        config = Config(duration=8, octave=7, name_length=12)
        result = parse("Twelve chars:b=100:c,4d5", config)
        self.assertTrue(result.name_valid)
        self.assertEqual(result.defaults, Defaults(8, 7, 100))
        self.assertEqual(result.notes[0].duration, 8)
        self.assertEqual(result.notes[0].octave, 7)
        self.assertEqual(result.notes[1].octave, 5)
