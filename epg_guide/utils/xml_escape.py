"""
XML text escaping utilities

This module cleans arbitrary text so it can be embedded in XMLTV attributes and
element bodies. Characters XML 1.0 cannot carry are stripped before the five
markup characters are replaced with entities.
"""
import re

_HIGH_SURROGATES = range(0xD800, 0xDC00)
_LOW_SURROGATES = range(0xDC00, 0xE000)

_ENTITIES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)

_LINE_BREAKS = re.compile(r"\n|\r")
_REPEATED_SPACES = re.compile(r"  +")


def is_control_char(code_point: int) -> bool:
    """
    Check for C0/C1 control characters that XML text must not carry.

    TAB, LF and CR are allowed (line breaks are normalized later), as is
    NEL (U+0085).
    """
    if code_point <= 0x08 or code_point in (0x0B, 0x0C):
        return True
    if 0x0E <= code_point <= 0x1F:
        return True
    return 0x7F <= code_point <= 0x9F and code_point != 0x85


def is_noncharacter(code_point: int) -> bool:
    """
    Check for Unicode non-characters and the replacement character.

    Covers U+FDD0-U+FDEF, U+FFFD-U+FFFF and the last two code points of
    every supplementary plane (U+1FFFE/U+1FFFF through U+10FFFE/U+10FFFF).
    """
    if 0xFDD0 <= code_point <= 0xFDEF:
        return True
    if 0xFFFD <= code_point <= 0xFFFF:
        return True
    return code_point > 0xFFFF and (code_point & 0xFFFE) == 0xFFFE


def is_lone_surrogate(text: str, index: int) -> bool:
    """Check whether the surrogate code unit at ``index`` has no partner."""
    code_point = ord(text[index])
    if code_point in _HIGH_SURROGATES:
        return index + 1 >= len(text) or ord(text[index + 1]) not in _LOW_SURROGATES
    if code_point in _LOW_SURROGATES:
        return index == 0 or ord(text[index - 1]) not in _HIGH_SURROGATES
    return False


def _combine_surrogates(high: str, low: str) -> str:
    return chr(0x10000 + ((ord(high) - 0xD800) << 10) + (ord(low) - 0xDC00))


def strip_invalid_xml_chars(text: str) -> str:
    """
    Remove every character XML 1.0 cannot legally encode.

    Surrogate pairs left as two code units (e.g. text decoded with
    ``surrogatepass``) are joined into the character they encode; unpaired
    surrogates are dropped.
    """
    kept: list[str] = []
    index = 0
    length = len(text)

    while index < length:
        char = text[index]
        code_point = ord(char)

        if code_point in _HIGH_SURROGATES or code_point in _LOW_SURROGATES:
            if is_lone_surrogate(text, index):
                index += 1
                continue
            char = _combine_surrogates(char, text[index + 1])
            code_point = ord(char)
            index += 1

        index += 1
        if is_control_char(code_point) or is_noncharacter(code_point):
            continue
        kept.append(char)

    return "".join(kept)


def escape_string(value, default: str = "") -> str:
    """
    Escape free text for an XMLTV attribute or element body.

    Args:
        value: Text to escape; non-string values are converted with str()
        default: Returned unchanged when value is missing or empty

    Returns:
        Escaped single-line text with collapsed spaces and no outer whitespace
    """
    if not value:
        return default

    text = strip_invalid_xml_chars(str(value))

    for char, entity in _ENTITIES:
        text = text.replace(char, entity)

    text = _LINE_BREAKS.sub(" ", text)
    text = _REPEATED_SPACES.sub(" ", text)

    return text.strip()
