"""Notes, sound settings and phrases that make up a music score."""

from __future__ import annotations

import copy
from dataclasses import dataclass

KEY_C = 0
KEY_B = 11
KEY_NUM = 12

_KEYS = "C+D+EF+G+A+B"

# 24 is the length of a quarter note.
QUARTER_NOTE_LENGTH = 24.0

_REST_CHARS = (None, "", "\0", "R")


class Note:
    """One note or rest with its timing, pitch and loudness."""

    def __init__(
        self,
        tempo,
        octave,
        tone,
        note,
        dot=False,
        length=QUARTER_NOTE_LENGTH,
        sign=None,
        volume=8.0,
        quantity=8,
        and_=False,
    ):
        self.tempo = tempo
        self.octave = octave
        self.tone = tone
        self.dot = dot
        self.length = float(length)
        self.sign = sign
        self.sec = self.get_sec(tempo, self.length)
        self.gate = 0.0
        self.key = -1
        self.set_key_from_char(note)
        self.volume = float(volume)
        self.quantity = quantity
        self.and_ = and_

    def __repr__(self):
        return (
            f"Note(tempo={self.tempo}, octave={self.octave}, tone={self.tone}, "
            f"key={self.key}, length={self.length}, sec={self.sec}, "
            f"gate={self.gate}, and_={self.and_})"
        )

    def get_sec(self, tempo, length):
        """Return the duration in seconds of a note of ``length`` at ``tempo``."""
        if tempo == 0:
            raise ValueError("tempo must not be zero")
        if self.dot:
            return length * (60.0 * 1.5 / QUARTER_NOTE_LENGTH) / tempo
        return length * (60.0 / QUARTER_NOTE_LENGTH) / tempo

    def set_key_from_char(self, ch):
        """Set the key (0-11) from a note letter and the note's sign; rests get -1."""
        if ch in _REST_CHARS:
            self.key = -1
            return
        if not isinstance(ch, str) or len(ch) != 1 or ch not in _KEYS:
            raise ValueError(f"invalid note character: {ch!r}")
        key = _KEYS.index(ch)
        if self.sign in ("+", "#"):
            key = KEY_C if key == KEY_B else key + 1
        elif self.sign == "-":
            key = KEY_B if key == KEY_C else key - 1
        self.key = key


@dataclass
class SoundSetting:
    """Current tempo, octave, default length, tone and loudness of a voice."""

    tempo: int = 120
    octave: int = 4 - 1
    length: float = QUARTER_NOTE_LENGTH
    tone: int = 0
    fm: bool = False
    volume: float = 8.0
    quantity: int = 8

    def reset(self):
        """Restore every setting to its default."""
        self.tempo = 120
        self.octave = 4 - 1
        self.length = QUARTER_NOTE_LENGTH
        self.tone = 0
        self.fm = False
        self.volume = 8.0
        self.quantity = 8


class Phrase:
    """A sequence of notes played with one sound setting."""

    def __init__(self, setting=None):
        self.goal = 0.0
        self.setting = copy.copy(setting) if setting is not None else SoundSetting()
        self.notes = []

    def add_note(
        self, note, dot=False, length=None, sign=None, quantity=None, tone=None, and_=False
    ):
        """Append a note given by its letter ('R' for a rest)."""
        setting = self.setting
        self.notes.append(
            Note(
                setting.tempo,
                setting.octave,
                setting.tone if tone is None else tone,
                note,
                dot,
                setting.length if length is None else length,
                sign,
                setting.volume,
                setting.quantity if quantity is None else quantity,
                and_,
            )
        )

    def add_key(self, key, dot=False, length=None, sign=None, quantity=None, tone=None):
        """Append a note given by an absolute key number (96 means 0)."""
        setting = self.setting
        if key == 96:
            key = 0
        note = Note(
            setting.tempo,
            0,
            setting.tone if tone is None else tone,
            None,
            dot,
            setting.length if length is None else length,
            sign,
            setting.volume,
            setting.quantity if quantity is None else quantity,
        )
        note.key = key
        self.notes.append(note)

    def rescan_notes(self):
        """Merge tied notes into the first note of each tie."""
        merged = []
        notes = iter(self.notes)
        for note in notes:
            if note.and_:
                length, sec = note.length, note.sec
                current = note
                while current.and_:
                    following = next(notes, None)
                    if following is None:
                        break
                    length += following.length
                    sec += following.sec
                    current = following
                note.length = length
                note.sec = sec
            merged.append(note)
        self.notes = merged

    def calc_total(self):
        """Set each note's start time and the phrase's total duration."""
        gate = 0.0
        for note in self.notes:
            note.gate = gate
            gate += note.sec
        self.goal = gate