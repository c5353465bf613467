# src/edi_parser/loader/tokenizer.py

"""
Escape-aware tokenizer for delimited EDI text.

Every level of an interchange is split the same way, only the separator
changes:

    interchange --segment-->  segments
    segment     --data------> data elements (tag dropped)
    element     --component-> components
    element     --repetition> repetitions

A separator preceded by the escape (release) character is literal content:

    split_with_escape("UNOC?+3+SENDER", "?", "+")  ->  ["UNOC+3", "SENDER"]
"""

from __future__ import annotations

from typing import List

from edi_parser.core.exceptions import InvalidArgumentError, require
from .separators import Separators

_EOL = "\r\n"


def split_with_escape(
    contents: str,
    escape: str,
    separator: str,
    remove_empty: bool = False,
    escape_the_escape: bool = False,
) -> List[str]:
    """
    Split ``contents`` on ``separator`` unless the separator is escaped.

    Args:
        contents: Text to split.
        escape: Escape marker. Empty disables escaping (plain split).
        separator: Separator to split on. Only its first character is
            matched while scanning with an escape marker.
        remove_empty: Drop empty tokens from the result.
        escape_the_escape: Collapse a doubled escape marker inside a token
            to a single literal marker.

    Returns:
        Tokens in document order. The last token is trimmed of surrounding
        whitespace when escaping is active.
    """
    require(contents, "contents")
    if not separator:
        raise InvalidArgumentError("Argument 'separator' is required")

    if not escape:
        tokens = contents.split(separator)
        return [t for t in tokens if t] if remove_empty else tokens

    boundary = separator[0]
    marker = escape[0]
    doubled = escape + escape

    result: List[str] = []
    line = ""
    previous = None

    for symbol in contents:
        if symbol == boundary:
            if previous != marker:
                # Genuine boundary
                if line.endswith(doubled):
                    line = line[:-1]

                result.append(line)
                line = ""
                previous = None
                continue

            # Escaped separator: drop the marker, keep the separator as text
            line = line.rstrip(escape)

        if escape_the_escape and line.endswith(doubled):
            line = line[:-1]

        line += symbol

        # An escaped escape cannot escape the next character
        if previous == symbol == marker:
            previous = None
        else:
            previous = symbol

    result.append(line.strip())

    if remove_empty:
        result = [t for t in result if t]

    return result


# ---------- Call-site helpers ----------


def get_segments(message: str, separators: Separators) -> List[str]:
    """
    Split a whole interchange/group/message into segment texts.

    Line breaks around segments are discarded unless the segment terminator
    is itself a newline sequence.
    """
    require(message, "message")
    require(separators, "separators")

    newline_terminated = separators.segment.strip(_EOL) == ""
    if not newline_terminated:
        message = message.strip(_EOL)

    segments = split_with_escape(
        message,
        separators.escape,
        separators.segment,
        remove_empty=True,
    )
    segments = [s.strip(_EOL) for s in segments]
    return [s for s in segments if s]


def get_data_elements(segment: str, separators: Separators) -> List[str]:
    """Return the data elements of a segment, without the leading tag."""
    if not segment:
        raise InvalidArgumentError("Argument 'segment' is required")
    require(separators, "separators")

    tokens = split_with_escape(segment, separators.escape, separators.data_element)
    return tokens[1:]


def get_component_data_elements(data_element: str, separators: Separators) -> List[str]:
    """Return the components of one data element."""
    require(separators, "separators")
    if not data_element:
        raise InvalidArgumentError("Argument 'data_element' is required")

    return split_with_escape(
        data_element,
        separators.escape,
        separators.component_data_element,
        escape_the_escape=True,
    )


def get_repetitions(value: str, separators: Separators) -> List[str]:
    """Return the repetitions of one data element."""
    require(separators, "separators")
    if not value:
        raise InvalidArgumentError("Argument 'value' is required")

    return split_with_escape(value, separators.escape, separators.repetition_data_element)
