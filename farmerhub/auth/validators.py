"""Registration field validation (username, email, password policy)."""
import re

MIN_USERNAME_LENGTH = 4
MIN_PASSWORD_LENGTH = 8
PASSWORD_SPECIAL_CHARS = "@#$%^&+="

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,6}$")
UPPERCASE_PATTERN = re.compile(r"[A-Z]")
DIGIT_PATTERN = re.compile(r"[0-9]")
SPECIAL_PATTERN = re.compile("[" + re.escape(PASSWORD_SPECIAL_CHARS) + "]")

# Password policy rule names, reported back when a password is rejected
RULE_MIN_LENGTH = "min_length"
RULE_UPPERCASE = "uppercase"
RULE_DIGIT = "digit"
RULE_SPECIAL = "special_char"


def is_valid_username(username: str) -> bool:
    """Username (already trimmed) must be at least 4 characters."""
    return len(username) >= MIN_USERNAME_LENGTH


def is_valid_email(email: str) -> bool:
    """
    Check the local@domain.tld shape.

    Local part: letters, digits and ._%+-; domain must contain a dot and end
    in a 2-6 letter TLD.
    """
    return EMAIL_PATTERN.fullmatch(email) is not None


def password_policy_failures(password: str) -> tuple[str, ...]:
    """
    Return the names of the password rules that `password` fails.

    Each rule is checked independently over the whole string, so the
    position of the uppercase letter, digit or special character does not
    matter.
    """
    failures = []
    if len(password) < MIN_PASSWORD_LENGTH:
        failures.append(RULE_MIN_LENGTH)
    if not UPPERCASE_PATTERN.search(password):
        failures.append(RULE_UPPERCASE)
    if not DIGIT_PATTERN.search(password):
        failures.append(RULE_DIGIT)
    if not SPECIAL_PATTERN.search(password):
        failures.append(RULE_SPECIAL)
    return tuple(failures)


def is_valid_password(password: str) -> bool:
    """True when the password satisfies every policy rule."""
    return not password_policy_failures(password)
