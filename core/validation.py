"""Field validators for the profile form."""
import re

# Same class of strings as Android's Patterns.EMAIL_ADDRESS
EMAIL_PATTERN = re.compile(
    r"[a-zA-Z0-9+._%\-]{1,256}"
    r"@"
    r"[a-zA-Z0-9][a-zA-Z0-9\-]{0,64}"
    r"(\.[a-zA-Z0-9][a-zA-Z0-9\-]{0,25})+"
)

NAME_ERROR_MESSAGE = "Name cannot be empty"
EMAIL_ERROR_MESSAGE = "Invalid email address format"


def is_valid_name(name):
    return bool(name)


def is_valid_email(email):
    """Return True when email is a syntactically valid address."""
    if not email:
        return False
    return EMAIL_PATTERN.fullmatch(email) is not None
