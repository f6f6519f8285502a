import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Union, cast

from utils import from_json


@dataclass(frozen=True)
class Config:
    # Hardcoded defaults, used when the defaults part leaves a key out.
    duration: int = 4
    octave: int = 6
    bpm: int = 63

    # Name part limits: above name_length warns, above max_name_length fails.
    name_length: int = 10
    max_name_length: int = 20

    def save(self, path: Union[str, Path]):
        with open(path, "w+") as fp:
            json.dump(asdict(self), fp, indent=2)

    @classmethod
    def load(cls, path: Union[str, Path]) -> 'Config':
        with open(path, "r") as fp:
            obj = json.load(fp)
        return cast(Config, from_json(cls, obj))
