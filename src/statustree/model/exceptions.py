# topmark:header:start
#
#   project      : StatusTree
#   file         : exceptions.py
#   file_relpath : src/statustree/model/exceptions.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exception introspection helpers used when importing errors into a status tree.

These functions adapt Python exceptions to the shape the tree import expects:

- *cause*: the explicit ``__cause__`` or, unless suppressed, the implicit
  ``__context__``;
- *suppressed exceptions*: the members of an exception group (``.exceptions``);
- *message*: ``str(exc)``, or the bare ``message`` of an exception group so the
  ``"(N sub-exceptions)"`` suffix does not leak into the tree;
- *default string form*: the qualified class name, followed by ``": message"``
  when there is a message (the module is omitted for builtins).

`clean_exception` collapses wrapper exceptions that only repeat their cause.
"""

from __future__ import annotations

from statustree.core.errors import FormattedError


def exception_cause(exc: BaseException) -> BaseException | None:
    """Return the exception that caused ``exc``, if any."""
    if exc.__cause__ is not None:
        return exc.__cause__
    if exc.__suppress_context__:
        return None
    return exc.__context__


def suppressed_exceptions(exc: BaseException) -> tuple[BaseException, ...]:
    """Return the exceptions grouped under ``exc`` (empty unless it is a group)."""
    nested: object = getattr(exc, "exceptions", None)
    if not isinstance(nested, (tuple, list)):
        return ()
    return tuple(e for e in nested if isinstance(e, BaseException))


def exception_message(exc: BaseException) -> str | None:
    """Return the message of ``exc``, or None when it has no message."""
    if suppressed_exceptions(exc):
        group_message: object = getattr(exc, "message", None)
        if isinstance(group_message, str):
            return group_message or None
    return str(exc) or None


def qualified_class_name(exc: BaseException) -> str:
    """Return ``module.QualName`` for ``exc`` (just ``QualName`` for builtins)."""
    cls = type(exc)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def default_string_form(exc: BaseException) -> str:
    """Return the qualified class name plus the message, if present."""
    message: str | None = exception_message(exc)
    name: str = qualified_class_name(exc)
    return f"{name}: {message}" if message is not None else name


def format_exception_message(exc: BaseException) -> str:
    """Return the display text for ``exc`` in a status tree.

    - `FormattedError` instances are shown verbatim;
    - exceptions without a message use the default string form;
    - all others are rendered as ``"ClassName: message"``.
    """
    if isinstance(exc, FormattedError):
        return str(exc)
    message: str | None = exception_message(exc)
    if message is None:
        return default_string_form(exc)
    return f"{type(exc).__name__}: {message}"


def clean_exception(exc: BaseException) -> BaseException:
    """Skip wrapper exceptions whose message only repeats their cause.

    Walks down the cause chain for as long as the current exception has a cause,
    has no suppressed exceptions, and its message (or qualified class name when
    there is no message) equals the cause's message or the cause's default string
    form. Stops at the first exception that adds information, or before a cause
    already visited on a cyclic chain.

    Args:
        exc: The exception to clean.

    Returns:
        The first exception in the chain that is not a redundant wrapper.
    """
    current: BaseException = exc
    visited: dict[int, BaseException] = {id(exc): exc}
    while True:
        cause: BaseException | None = exception_cause(current)
        if cause is None or id(cause) in visited or suppressed_exceptions(current):
            return current
        visited[id(cause)] = cause

        message: str = exception_message(current) or qualified_class_name(current)
        if message != exception_message(cause) and message != default_string_form(cause):
            return current

        current = cause
