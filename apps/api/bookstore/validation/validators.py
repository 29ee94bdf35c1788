"""Leaf validators for primitive field types.

Every validator takes the raw value and answers ``True`` or ``False``. None of
them raise: malformed input that trips up a parser is reported as invalid.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

import phonenumbers
from email_validator import EmailNotValidError, validate_email

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s")
_ALPHA = re.compile(r"[A-Za-z]+")
_ALPHANUMERIC = re.compile(r"[0-9A-Za-z]+")
_ALPHA_NAME_IGNORED = frozenset("-'#$@!_*&^%(){}|\\/")
_INTEGER = re.compile(r"[-+]?[0-9]+")
_NUMBER = re.compile(r"[-+]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?")
_LOWER = re.compile(r"[a-z]")
_UPPER = re.compile(r"[A-Z]")
_DIGIT = re.compile(r"[0-9]")
_SYMBOL = re.compile(r"[^0-9A-Za-z]")


@dataclass(frozen=True, slots=True)
class PasswordPolicy:
    """Minimum character counts a password must meet."""

    min_length: int = 8
    min_lowercase: int = 1
    min_uppercase: int = 1
    min_digits: int = 1
    min_symbols: int = 1


DEFAULT_PASSWORD_POLICY = PasswordPolicy()


def is_email(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def is_strong_password(value: Any, policy: PasswordPolicy = DEFAULT_PASSWORD_POLICY) -> bool:
    if not isinstance(value, str):
        return False
    return (
        len(value) >= policy.min_length
        and len(_LOWER.findall(value)) >= policy.min_lowercase
        and len(_UPPER.findall(value)) >= policy.min_uppercase
        and len(_DIGIT.findall(value)) >= policy.min_digits
        and len(_SYMBOL.findall(value)) >= policy.min_symbols
    )


def is_pure_name(value: Any) -> bool:
    """Letters only; whitespace is ignored."""
    if not isinstance(value, str):
        return False
    return _ALPHA.fullmatch(_WHITESPACE.sub("", value)) is not None


def is_alpha_name(value: Any) -> bool:
    """Letters and digits plus a fixed set of punctuation; whitespace is ignored."""
    if not isinstance(value, str):
        return False
    stripped = "".join(ch for ch in _WHITESPACE.sub("", value) if ch not in _ALPHA_NAME_IGNORED)
    return _ALPHANUMERIC.fullmatch(stripped) is not None


def parse_phone(value: Any) -> phonenumbers.PhoneNumber | None:
    if not isinstance(value, str):
        return None
    try:
        return phonenumbers.parse(value, None)
    except phonenumbers.NumberParseException as exc:
        logger.debug("validation.phone_unparsable reason=%s", exc.error_type)
        return None


def is_phone(value: Any) -> bool:
    number = parse_phone(value)
    return number is not None and phonenumbers.is_valid_number(number)


def is_integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    try:
        text = str(value)
        if _INTEGER.fullmatch(text) is None:
            return False
        # int() caps digit strings (sys.set_int_max_str_digits).
        int(text)
    except ValueError:
        return False
    return True


def is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    try:
        return _NUMBER.fullmatch(str(value)) is not None
    except ValueError:
        return False


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool) or value in ("true", "false")


def is_json(value: Any) -> bool:
    try:
        json.dumps(value)
    except (TypeError, ValueError):
        return False
    return True


def is_datetime(value: Any) -> bool:
    if isinstance(value, (datetime, date)):
        return True
    if not isinstance(value, str) or not value.strip():
        return False
    try:
        datetime.fromisoformat(value.strip())
    except ValueError:
        return False
    return True


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_array(value: Any) -> bool:
    return isinstance(value, list)


def is_object(value: Any) -> bool:
    return isinstance(value, dict)


__all__ = [
    "DEFAULT_PASSWORD_POLICY",
    "PasswordPolicy",
    "is_alpha_name",
    "is_array",
    "is_boolean",
    "is_datetime",
    "is_email",
    "is_integer",
    "is_json",
    "is_number",
    "is_object",
    "is_phone",
    "is_pure_name",
    "is_string",
    "is_strong_password",
    "parse_phone",
]
