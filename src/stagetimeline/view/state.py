# SPDX-License-Identifier: MIT

from contextvars import ContextVar

# Set once per CLI invocation by the root callback
_show_header: ContextVar[bool] = ContextVar("stagetimeline_show_header", default=True)


def set_show_header(value: bool) -> None:
    """Turn the title block printed above each report on or off."""
    _show_header.set(value)


def get_show_header() -> bool:
    return _show_header.get()
