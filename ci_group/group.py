"""Collapsible log groups that always close."""

from __future__ import annotations

import logging
import os
import sys
from typing import IO, Any, Callable, TypeVar

from ci_group.config import PLAIN_HEADERS_VAR, TRUTHY_VALUES
from ci_group.dialect import Dialect, detect, sanitize

logger = logging.getLogger(__name__)

T = TypeVar("T")

_COMMAND_PREFIX_CHARS = " \t:#"


def _plain_headers_enabled() -> bool:
    return os.environ.get(PLAIN_HEADERS_VAR, "").strip().lower() in TRUTHY_VALUES


def _plain_header(name: str) -> str:
    # Leading "::" or "##" would be parsed as a workflow command on a real runner.
    return f"{name.lstrip(_COMMAND_PREFIX_CHARS)}:"


class Group:
    """One open section of CI log output.

    The open marker is written by the constructor, so output produced by the
    caller afterwards always lands inside the section. The close marker is
    written by :meth:`close`, at most once, whether it is called directly or
    by leaving a ``with`` block normally or through an exception.

    Nested groups are fine as long as they are closed innermost first; the CI
    UI pairs markers by order and this class keeps no registry of live groups.
    """

    def __init__(self, name: str | None, *, dialect: Dialect | None = None, stream: IO[str] | None = None) -> None:
        self.name = sanitize(name)
        self.dialect = detect() if dialect is None else dialect
        self._stream = stream
        self._closed = False

        if self.dialect.is_active:
            self._write(self.dialect.open_marker(self.name))
        elif _plain_headers_enabled():
            self._write(_plain_header(self.name))

    @property
    def closed(self) -> bool:
        return self._closed

    def _write(self, line: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        print(line, file=stream, flush=True)

    def close(self) -> None:
        if self._closed:
            return
        # Flag first: a failed write must not turn into a second close later.
        self._closed = True
        if self.dialect.is_active:
            self._write(self.dialect.close_marker())

    def __enter__(self) -> Group:
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        if exc_type is None:
            self.close()
            return
        try:
            self.close()
        except (OSError, ValueError):
            # ValueError: the stream was closed inside the block.
            logger.debug("Could not write close marker for %r", self.name, exc_info=True)

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"<Group {self.name!r} {self.dialect.value} {state}>"


def open(name: str, **kwargs: Any) -> Group:
    """Open a group named *name*. Use the result in a ``with`` statement."""
    return Group(name, **kwargs)


def release(group: Group) -> None:
    group.close()


def run_in_group(name: str, func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """Call ``func(*args, **kwargs)`` inside a group and return its result.

    Exceptions raised by *func* propagate unchanged, after the group closes.
    """
    with Group(name):
        return func(*args, **kwargs)
