"""Render runtime values and sequences as text.

Public API
----------
repr_value(value)                                 → str in language syntax
print_list(items, is_tuple, render)               → str, every element shown
print_abbreviated_list(items, is_tuple, ...)      → str, one-line summary

The abbreviated form is what diagnostics use. It stops listing elements once
either the element limit or the character limit is reached and closes the
listing with an ellipsis marker instead. Limits default to the process-wide
settings from `sprig.print_limits()`.
"""

__all__ = ["repr_value", "print_list", "print_abbreviated_list", "ELLIPSIS"]

import sprig


ELLIPSIS = "..."
SEPARATOR = ", "

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def _brackets(is_tuple):
    return ("(", ")") if is_tuple else ("[", "]")


def repr_value(value):
    """Convert a runtime value to its source literal form.

    A list that contains itself, directly or through other sequences, prints
    the repeated sequence as `[...]` or `(...)`.

    Args:
        value: (object) Runtime value

    Returns:
        (str) Text that reads back as the same value
    """
    return _repr(value, set())


def _repr(value, active):
    """Render value, `active` holds ids of sequences being rendered."""
    if value is None:
        return "None"
    if value is True:
        return "True"
    if value is False:
        return "False"
    if isinstance(value, str):
        escaped = "".join(_ESCAPES.get(c, c) for c in value)
        return f'"{escaped}"'
    if isinstance(value, sprig.SequenceValue):
        if id(value) in active:
            open_, close = _brackets(value.is_tuple)
            return f"{open_}{ELLIPSIS}{close}"
        active.add(id(value))
        try:
            return print_list(value, value.is_tuple, lambda item: _repr(item, active))
        finally:
            active.discard(id(value))
    return str(value)


def print_list(items, is_tuple, render=repr_value):
    """Render every element of a sequence.

    A tuple holding exactly one element keeps a trailing comma so it cannot be
    mistaken for a parenthesized value.

    Args:
        items: (Iterable) Elements to render
        is_tuple: (bool) Use tuple parentheses instead of list brackets
        render: (callable) Converts one element to text

    Returns:
        (str) Rendered sequence
    """
    open_, close = _brackets(is_tuple)
    parts = [render(item) for item in items]
    trailer = "," if is_tuple and len(parts) == 1 else ""
    return f"{open_}{SEPARATOR.join(parts)}{trailer}{close}"


def print_abbreviated_list(items, is_tuple, max_count=None, max_length=None, render=str):
    """Render a possibly truncated single line summary of a sequence.

    Elements are rendered with `render`; pass strings with the default `str`
    to use pre-rendered text unchanged. When every element fits within both
    limits the result matches `print_list`. Otherwise as many leading elements
    as fit are shown followed by the ellipsis marker, and the result is never
    longer than `max_length` unless even the bare `[...]` does not fit.

    Args:
        items: (Iterable) Elements or already rendered element strings
        is_tuple: (bool) Use tuple parentheses instead of list brackets
        max_count: (int | None) Element limit, defaults to configured limit
        max_length: (int | None) Character limit, defaults to configured limit
        render: (callable) Converts one element to text

    Returns:
        (str) Rendered summary
    """
    if max_count is None or max_length is None:
        limits = sprig.print_limits()
        if max_count is None:
            max_count = limits.max_count
        if max_length is None:
            max_length = limits.max_length

    items = list(items)
    open_, close = _brackets(is_tuple)

    if len(items) <= max_count:
        rendered = [render(item) for item in items]
        full = print_list(rendered, is_tuple, render=lambda text: text)
        if len(full) <= max_length:
            return full
    else:
        rendered = [render(item) for item in items[:max_count]]

    shown = []
    length = len(open_) + len(close) + len(ELLIPSIS)
    for text in rendered:
        extra = len(text) + len(SEPARATOR)
        if length + extra > max_length:
            break
        shown.append(text)
        length += extra
    shown.append(ELLIPSIS)
    return f"{open_}{SEPARATOR.join(shown)}{close}"
