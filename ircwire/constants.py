"""
Protocol and runtime constants for ircwire

Protocol constants are fixed by the IRC wire format. Runtime settings can be
overridden by setting an environment variable with the same name.
"""

import os


def _get_env_int(name: str, default: int) -> int:
    """Retrieve an integer value from an environment variable.

    Attempts to parse the environment variable as an integer. If the variable
    is not set or cannot be parsed, prints a warning and returns the default.

    Args:
        name: The name of the environment variable to read.
        default: The default integer value to return if parsing fails.

    Returns:
        The parsed integer value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            print(
                f"Warning: Invalid integer value for {name}='{value}', using default {default}"
            )
    return default


def _get_env_bool(name: str, default: bool) -> bool:
    """Retrieve a boolean flag from an environment variable.

    'true', '1' and 'yes' (any case) are truthy; any other set value is falsy.
    """
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("true", "1", "yes")


# Wire format
CRLF = "\r\n"
TAG_PREFIX = "@"
SOURCE_PREFIX = ":"
TRAILING_PREFIX = ":"
TAG_SEPARATOR = ";"
TAG_KEY_VALUE_SEPARATOR = "="

# Tag component escaping (IRCv3 message-tags), raw character -> escape letter
TAG_ESCAPES = {
    "\\": "\\",
    " ": "s",
    ";": ":",
    "\r": "r",
    "\n": "n",
}
# Escape letter -> raw character. Letters not listed decode to themselves.
TAG_UNESCAPES = {
    ":": ";",
    "s": " ",
    "n": "\n",
    "r": "\r",
}

# Runtime settings
IRCWIRE_JSON_INDENT = _get_env_int("IRCWIRE_JSON_INDENT", 2)
