import math
import re
from dataclasses import dataclass
from datetime import date, datetime

from transaction import DATE_FORMAT


OK_MESSAGE = "OK"

# A plain decimal literal: optional sign, digits with an optional fraction
# (either side may be empty, not both), optional exponent.
_AMOUNT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


@dataclass(frozen=True)
class Verdict:
    ok: bool
    message: str


def parse_amount(text: str) -> float:
    if text == "":
        raise ValueError("cannot parse float from empty string")
    if not _AMOUNT_RE.fullmatch(text):
        raise ValueError(f"invalid float literal: {text!r}")
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"number out of range: {text!r}")
    return value


def parse_date(text: str) -> date:
    if not _DATE_RE.fullmatch(text):
        raise ValueError(f"date must look like YYYY-MM-DD: {text!r}")
    return datetime.strptime(text, DATE_FORMAT).date()


def validate_amount(text: str) -> Verdict:
    # sign is imposed at submission, not checked here
    try:
        parse_amount(text)
    except ValueError as exc:
        return Verdict(False, f"ERROR: {exc}")
    return Verdict(True, OK_MESSAGE)


def validate_category(text: str) -> Verdict:
    if not text or any(not (ch.isalnum() or ch.isspace()) for ch in text):
        return Verdict(False, "ERROR: Invalid Category")
    return Verdict(True, OK_MESSAGE)


def validate_date(text: str) -> Verdict:
    try:
        parse_date(text)
    except ValueError:
        return Verdict(False, "ERROR: Invalid Date Format")
    return Verdict(True, OK_MESSAGE)


def validate_description(text: str) -> Verdict:
    if not text:
        return Verdict(False, "ERROR: Enter a Description")
    return Verdict(True, OK_MESSAGE)


# index order matches the form fields
VALIDATORS = (
    validate_amount,
    validate_category,
    validate_date,
    validate_description,
)
