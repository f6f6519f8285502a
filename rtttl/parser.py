# RTTTL syntax in EBNF: http://members.tripod.lycos.nl/jupp/linux/soft/rtttl_player/EBNF.txt
# Format overview: https://en.wikipedia.org/wiki/Ring_Tone_Transfer_Language
import logging
import re
from dataclasses import dataclass, field, replace
from typing import Callable, List, Optional, Tuple

from config import Config
from rtttl.tables import (
    is_valid_bpm,
    is_valid_duration,
    is_valid_octave,
    nearest_bpm,
    nearest_duration,
    nearest_octave,
)
from rtttl.typing import Defaults, Note, pitch_from_text
from utils import split_fields


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing one RTTTL string.

        The three parts are None when the string could not be split into
        exactly three parts, in which case the only diagnostic is the error
        reporting that.
    """
    rtttl: str
    part_name: Optional[str] = None
    part_defaults: Optional[str] = None
    part_notes: Optional[str] = None
    name_valid: bool = False
    defaults_valid: bool = False
    notes_valid: bool = False
    defaults: Defaults = field(default_factory=Defaults)
    notes: Tuple[Note, ...] = ()
    errors: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()

    @property
    def bpm(self) -> int:
        return self.defaults.bpm

    @property
    def note_count(self) -> int:
        return len(self.notes)

    @property
    def has_errors(self) -> int:
        return len(self.errors)

    @property
    def has_warnings(self) -> int:
        return len(self.warnings)

    @property
    def is_valid(self) -> bool:
        return self.name_valid and self.defaults_valid and self.notes_valid

    def canonical(self, max_name_length: int = 20) -> Optional[str]:
        """Rebuilds an RTTTL string from the parsed parts.

            The name is cut to max_name_length characters, the defaults part
            is kept verbatim when valid and rebuilt from the effective
            defaults otherwise. The notes part is always kept verbatim.
        """
        if self.part_name is None or self.part_notes is None:
            return None
        if self.defaults_valid:
            defaults = self.part_defaults
        else:
            defaults = str(self.defaults)
        return f"{self.part_name[:max_name_length]}:{defaults}:{self.part_notes}"

    def dump(self) -> str:
        lines = [
            f"Name part: {self.part_name or ''}",
            f"Defaults part: {self.part_defaults or ''}",
            f"Notes part: {self.part_notes or ''}",
            f"Effective defaults: {self.defaults}",
            "Effective notes (duration,note,octave,dots):",
        ]
        for note in self.notes:
            lines.append(
                f"\t[ {note.duration:>2} , {str(note.pitch):>2} , {note.octave} , {note.dots} ]")
        lines.append("WARNINGS:")
        lines.extend(f"\t{warning}" for warning in self.warnings)
        lines.append("ERRORS:")
        lines.extend(f"\t{error}" for error in self.errors)
        return "\n".join(lines) + "\n"


class Parser:
    """Accumulates diagnostics while validating one RTTTL string.

        Use parse() rather than this class directly: it runs the parser once
        and hands back the frozen ParseResult.
    """

    rtttl: str
    config: Config

    parts: List[str]
    defaults: Defaults
    notes: List[Note]
    errors: List[str]
    warnings: List[str]

    name_valid: bool = False
    defaults_valid: bool = False
    notes_valid: bool = False

    def __init__(self, rtttl: str, config: Optional[Config] = None):
        if rtttl is None:
            raise TypeError("RTTTL parameter missing or undefined!")
        self.rtttl = rtttl
        self.config = config or Config()
        self.parts = list([])
        self.defaults = Defaults(self.config.duration, self.config.octave, self.config.bpm)
        self.notes = list([])
        self.errors = list([])
        self.warnings = list([])

    def error(self, msg: str):
        logging.debug(f"RTTTL error: {msg}")
        self.errors.append(msg)

    def warning(self, msg: str):
        logging.debug(f"RTTTL warning: {msg}")
        self.warnings.append(msg)

    def parse(self) -> bool:
        parts = split_fields(self.rtttl, ":")
        if len(parts) != 3:
            self.error(
                "Invalid number of parts. Should be 3 parts: "
                "<name> <sep> [<defaults>] <sep> <note-command>+")
            return False
        self.parts = parts
        name, defaults, notes = parts
        self.name_valid = self.parse_name(name)
        self.defaults_valid = self.parse_defaults(defaults)
        self.notes_valid = self.parse_notes(notes)
        return True

    def parse_name(self, name: str) -> bool:
        if len(name) <= self.config.name_length:
            self.name_valid = True
            return True
        elif len(name) <= self.config.max_name_length:
            self.warning(
                f"Length of name part exceeds {self.config.name_length} characters: {name}")
        else:
            self.error(
                f"Length of name part exceeds {self.config.max_name_length} characters: {name}")
        return False

    DEFAULT_RE = re.compile(r'([dob])=(\d+)', re.ASCII)
    WHITESPACE_RE = re.compile(r'\s')

    # Key: (label, validity check, nearest lookup, whether a substitution is an error).
    DEFAULT_KEYS: dict[str, Tuple[str, Callable[[int], bool], Callable[[int], int], bool]] = {
        'd': ("duration", is_valid_duration, nearest_duration, True),
        'o': ("octave (scale)", is_valid_octave, nearest_octave, True),
        # BPM substitution only warns.
        'b': ("BPM", is_valid_bpm, nearest_bpm, False),
    }

    def parse_defaults(self, part: str) -> bool:
        result = True
        values: dict[str, int] = {}
        if part:
            part, count = self.WHITESPACE_RE.subn("", part)
            if count:
                self.warning("White space found and removed from defaults part.")
            for entry in split_fields(part, ","):
                if not (m := self.DEFAULT_RE.fullmatch(entry)):
                    self.warning(f"Invalid entry in defaults part: {entry}")
                    result = False
                    continue
                key, value = m.group(1), int(m.group(2))
                label, is_valid, nearest, is_error = self.DEFAULT_KEYS[key]
                if key in values:
                    self.warning(
                        f"{label[0].upper()}{label[1:]} entry in defaults specified more than once: {part}")
                    result = False
                if not is_valid(value):
                    substitute = nearest(value)
                    msg = (f"Invalid {label} setting "
                           f"{value} in defaults replaced with {substitute}: {part}")
                    if is_error:
                        self.error(msg)
                    else:
                        self.warning(msg)
                    value = substitute
                    result = False
                values[key] = value
        self.defaults = replace(
            self.defaults,
            duration=values.get('d', self.defaults.duration),
            octave=values.get('o', self.defaults.octave),
            bpm=values.get('b', self.defaults.bpm),
        )
        return result

    # Dots may follow the pitch, the octave, or both.
    NOTE_RE = re.compile(
        r'(\d{0,2})([P;BEH]|[CDFGA]#?)(\.{0,2})([4-8]?)(\.{0,2})',
        re.IGNORECASE | re.ASCII
    )

    def resolve(self, label: str, value: int, is_valid, nearest, index: int, entry: str) -> int:
        if is_valid(value):
            return value
        substitute = nearest(value)
        self.warning(
            f"Invalid {label} {value} in note {index} replaced with {substitute}: {entry}.")
        return substitute

    def parse_notes(self, part: str) -> bool:
        entries = split_fields(part, ",")
        if not entries:
            self.error("No notes present in notes part.")
            return False
        result = True
        # Effective defaults are final once the defaults part is parsed.
        default_duration = self.defaults.duration
        default_octave = self.defaults.octave
        for index, entry in enumerate(entries, start=1):
            if not (m := self.NOTE_RE.fullmatch(entry)):
                self.error(f"Invalid syntax in note {index}: {entry}.")
                result = False
                continue
            duration_text, pitch, leading_dots, octave_text, trailing_dots = m.groups()
            dots = len(leading_dots) + len(trailing_dots)
            if dots > 2:
                self.error(f"More than 2 dots present in note {index}: {entry}.")
                result = False
                continue
            duration = default_duration
            if duration_text:
                duration = self.resolve(
                    "duration", int(duration_text), is_valid_duration, nearest_duration, index, entry)
            octave = default_octave
            if octave_text:
                octave = self.resolve(
                    "octave", int(octave_text), is_valid_octave, nearest_octave, index, entry)
            self.notes.append(Note(
                duration=duration,
                pitch=pitch_from_text(pitch),
                octave=octave,
                dots=dots,
            ))
        return result

    def result(self) -> ParseResult:
        name, defaults, notes = self.parts if self.parts else (None, None, None)
        return ParseResult(
            rtttl=self.rtttl,
            part_name=name,
            part_defaults=defaults,
            part_notes=notes,
            name_valid=self.name_valid,
            defaults_valid=self.defaults_valid,
            notes_valid=self.notes_valid,
            defaults=self.defaults,
            notes=tuple(self.notes),
            errors=tuple(self.errors),
            warnings=tuple(self.warnings),
        )


def parse(rtttl: str, config: Optional[Config] = None) -> ParseResult:
    """Parses and validates an RTTTL string.

        Raises:
            TypeError: rtttl is None.
    """
    parser = Parser(rtttl, config)
    parser.parse()
    result = parser.result()
    logging.info(
        f"Parsed RTTTL '{result.part_name}': {result.note_count} notes, "
        f"{len(result.errors)} errors, {len(result.warnings)} warnings.")
    return result
