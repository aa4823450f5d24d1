"""Argument escaping for Outlook's ``/m`` command-line switch.

Outlook parses the ``/m`` value like the tail of a ``mailto:`` URL::

    to1;to2&cc=a;b&bcc=c&subject=Hello&body=Line 1
    Line 2

Only the characters that are structural in that grammar are
percent-encoded (``%``, ``"``, ``&`` and ``?``). Spaces and newlines
pass through untouched, so multi-line bodies keep their line breaks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

#: Replacements applied by :func:`percent_escape`, in order.
#: ``%`` has to be first to avoid double-encoding.
ESCAPES: tuple[tuple[str, str], ...] = (
    ("%", "%25"),
    ('"', "%22"),
    ("&", "%26"),
    ("?", "%3F"),
)

#: Separator between recipients of the same kind.
RECIPIENT_SEPARATOR = ";"

#: Separator between the parts of the composite argument.
FIELD_SEPARATOR = "&"

#: Keyed parts of the composite argument, in emission order.
FIELD_KEYS = ("cc", "bcc", "subject", "body")

_LIST_KEYS = frozenset({"to", "cc", "bcc"})


def percent_escape(text: str) -> str:
    """Escape the characters Outlook treats as structural.

    Args:
        text: Raw field value.

    Returns:
        The escaped value. Text without ``% " & ?`` is returned unchanged.

    Examples:
        >>> percent_escape("Tom & Jerry?")
        'Tom %26 Jerry%3F'
        >>> percent_escape('say "100%"')
        'say %22100%25%22'
        >>> percent_escape("Line 1\\nLine 2")
        'Line 1\\nLine 2'
    """
    for char, escaped in ESCAPES:
        text = text.replace(char, escaped)
    return text


def percent_unescape(text: str) -> str:
    """Reverse :func:`percent_escape`.

    Args:
        text: Escaped field value.

    Returns:
        The original text.

    Examples:
        >>> percent_unescape("Tom %26 Jerry%3F")
        'Tom & Jerry?'
    """
    for char, escaped in reversed(ESCAPES):
        text = text.replace(escaped, char)
    return text


def build_message_argument(
    to: Sequence[str] = (),
    cc: Sequence[str] = (),
    bcc: Sequence[str] = (),
    subject: str = "",
    body: str = "",
) -> str:
    """Assemble the composite ``/m`` argument.

    Recipients come first without a key; the other parts are emitted as
    ``key=value`` only when set, joined with ``&``.

    Args:
        to: Primary recipients.
        cc: Carbon-copy recipients.
        bcc: Blind carbon-copy recipients.
        subject: Subject line.
        body: Message body, newlines preserved.

    Returns:
        The composite argument, empty when nothing is set.

    Examples:
        >>> build_message_argument(["a@example.org"], subject="Hi & bye")
        'a@example.org&subject=Hi %26 bye'
        >>> build_message_argument(body="x")
        'body=x'
    """
    argument = percent_escape(RECIPIENT_SEPARATOR.join(to))
    values = {
        "cc": RECIPIENT_SEPARATOR.join(cc),
        "bcc": RECIPIENT_SEPARATOR.join(bcc),
        "subject": subject,
        "body": body,
    }
    for key in FIELD_KEYS:
        value = values[key]
        if not value:
            continue
        if argument:
            argument += FIELD_SEPARATOR
        argument += f"{key}={percent_escape(value)}"
    return argument


def parse_message_argument(argument: str) -> dict[str, object]:
    """Decode a composite ``/m`` argument back into its fields.

    Reference parser mirroring what Outlook does with the value; used
    for dry runs and tests.

    Args:
        argument: Composite argument built by :func:`build_message_argument`.

    Returns:
        Mapping with ``to``, ``cc`` and ``bcc`` lists and ``subject`` and
        ``body`` strings. Missing parts come back empty.

    Raises:
        ValueError: If a part has an unknown key.

    Examples:
        >>> parse_message_argument("a@x.org;b@x.org&subject=Hi")["to"]
        ['a@x.org', 'b@x.org']
    """
    fields: dict[str, object] = {"to": [], "cc": [], "bcc": [], "subject": "", "body": ""}
    if not argument:
        return fields

    parts = argument.split(FIELD_SEPARATOR)
    if not parts[0].startswith(tuple(f"{key}=" for key in FIELD_KEYS)):
        fields["to"] = _split_recipients(parts.pop(0))

    for part in parts:
        key, sep, value = part.partition("=")
        if not sep or key not in FIELD_KEYS:
            raise ValueError(f"Unknown message argument part: {part!r}")
        if key in _LIST_KEYS:
            fields[key] = _split_recipients(value)
        else:
            fields[key] = percent_unescape(value)
    return fields


def _split_recipients(value: str) -> list[str]:
    if not value:
        return []
    return [percent_unescape(item) for item in value.split(RECIPIENT_SEPARATOR)]


__all__ = [
    "ESCAPES",
    "FIELD_KEYS",
    "FIELD_SEPARATOR",
    "RECIPIENT_SEPARATOR",
    "build_message_argument",
    "parse_message_argument",
    "percent_escape",
    "percent_unescape",
]
