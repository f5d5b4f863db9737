"""
Utility functions: digit conversion and integer parsing of user input.
"""

_DIGITS = str.maketrans(
    "٠١٢٣٤٥٦٧٨٩" "۰۱۲۳۴۵۶۷۸۹",
    "0123456789" "0123456789",
)


def convert_arabic_digits(text: str) -> str:
    """
    Convert Arabic-Indic (٠-٩) and Extended/Persian (۰-۹) numerals to 0-9.

    Args:
        text: Input string

    Returns:
        String with converted digits
    """
    return text.translate(_DIGITS)


def safe_int(text: str, default=None) -> int:
    """
    Safely parse an integer from user input, handling Arabic digits.

    Only plain ASCII digits (after conversion) are accepted, so signs,
    underscores and surrounding junk all fall back to *default*.

    Args:
        text: User input string
        default: Default value if parsing fails

    Returns:
        Integer value or default
    """
    try:
        value = convert_arabic_digits(text.strip())
    except AttributeError:
        return default
    if not value.isascii() or not value.isdigit():
        return default
    return int(value)
