"""
String helpers.
"""


def capitalize(string: str) -> str:
    """
    Upper-case the first character of string and lower-case the rest.

    Interior capitals are lowered too, so this is not str.title() and not a
    "first letter only" upper-casing.

    Example:
        >>> capitalize("hELLO")
        'Hello'
        >>> capitalize("")
        ''
    """
    return string[:1].upper() + string[1:].lower()
