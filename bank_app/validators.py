"""
Credential validators used during customer registration.
"""

import re


EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")
PASSWORD_MIN_LENGTH = 6
PASSWORD_SPECIAL_CHARACTERS = "@#$%^&!"

_PASSWORD_RULES = (
    re.compile(r"[A-Z]"),
    re.compile(r"[a-z]"),
    re.compile(r"[0-9]"),
    re.compile("[" + re.escape(PASSWORD_SPECIAL_CHARACTERS) + "]"),
)


def is_valid_email(email: str) -> bool:
    """Check the local@domain.tld shape with no whitespace or extra '@'."""
    if not isinstance(email, str):
        return False
    return EMAIL_PATTERN.fullmatch(email) is not None


def is_valid_password(password: str) -> bool:
    """
    Check password strength.

    A valid password has at least PASSWORD_MIN_LENGTH characters and contains
    an uppercase letter, a lowercase letter, a digit and one of
    PASSWORD_SPECIAL_CHARACTERS.
    """
    if not isinstance(password, str):
        return False

    if len(password) < PASSWORD_MIN_LENGTH:
        return False

    return all(rule.search(password) for rule in _PASSWORD_RULES)
