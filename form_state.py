import curses
from typing import List

from field_validator import VALIDATORS, Verdict


FIELD_AMOUNT = 0
FIELD_CATEGORY = 1
FIELD_DATE = 2
FIELD_DESCRIPTION = 3
FIELD_COUNT = 4

FIELD_LABELS = (
    "Enter Amount",
    "Enter Category",
    "Enter Date (YYYY-MM-DD)",
    "Enter Description",
)

_BACKSPACE_KEYS = (curses.KEY_BACKSPACE, 127, 8)


class FormField:
    """A single-line text buffer with a cursor and a validity annotation."""

    def __init__(self, validator):
        self.validator = validator
        self.buffer = ""
        self.cursor = 0
        self.modified = False
        self.verdict: Verdict = validator("")

    def reset(self):
        self.buffer = ""
        self.cursor = 0
        self.modified = False
        self.verdict = self.validator(self.buffer)

    def validate(self) -> bool:
        self.verdict = self.validator(self.buffer)
        return self.verdict.ok

    def handle_key(self, ch) -> bool:
        """Apply an editing key. Returns True when the text changed."""
        if ch in _BACKSPACE_KEYS:
            if self.cursor > 0:
                self.buffer = self.buffer[: self.cursor - 1] + self.buffer[self.cursor :]
                self.cursor -= 1
                return True
            return False

        if ch == curses.KEY_DC:
            if self.cursor < len(self.buffer):
                self.buffer = self.buffer[: self.cursor] + self.buffer[self.cursor + 1 :]
                return True
            return False

        if ch == curses.KEY_LEFT:
            self.cursor = max(0, self.cursor - 1)
            return False

        if ch == curses.KEY_RIGHT:
            self.cursor = min(len(self.buffer), self.cursor + 1)
            return False

        if ch == curses.KEY_HOME:
            self.cursor = 0
            return False

        if ch == curses.KEY_END:
            self.cursor = len(self.buffer)
            return False

        if isinstance(ch, int) and 32 <= ch <= 126:
            ch = chr(ch)
        if isinstance(ch, str) and len(ch) == 1 and ch.isprintable():
            self.buffer = self.buffer[: self.cursor] + ch + self.buffer[self.cursor :]
            self.cursor += 1
            return True

        return False


class FormState:
    def __init__(self):
        self.fields: List[FormField] = [FormField(v) for v in VALIDATORS]
        self.active = FIELD_AMOUNT

    @property
    def active_field(self) -> FormField:
        return self.fields[self.active]

    def reset(self):
        for f in self.fields:
            f.reset()
        self.active = FIELD_AMOUNT

    def next_field(self):
        self.active = (self.active + 1) % FIELD_COUNT

    def previous_field(self):
        self.active = (self.active + FIELD_COUNT - 1) % FIELD_COUNT

    def input_to_active_field(self, ch) -> bool:
        field = self.active_field
        if not field.handle_key(ch):
            return False
        field.modified = True
        # an emptied buffer keeps its previous annotation until submission
        if field.buffer:
            field.validate()
        return True

    def text(self, index: int) -> str:
        return self.fields[index].buffer

    def validate_all(self) -> bool:
        """Re-run every validator; untouched fields pass regardless."""
        ok = True
        for f in self.fields:
            valid = f.validate()
            if f.modified and not valid:
                ok = False
        return ok
