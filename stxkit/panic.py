"""Panics: unrecoverable errors reported through a process-wide hook."""

from __future__ import annotations

import inspect
import sys
import threading
from dataclasses import dataclass
from typing import Callable, Optional

__all__ = [
    "Panic",
    "SourceLocation",
    "PanicHook",
    "is_panicking",
    "default_panic_hook",
    "attach_panic_hook",
    "take_panic_hook",
    "begin_panic",
    "panic",
]

_RECURSIVE_PANIC_MESSAGE = "thread panicked while processing a panic. aborting...\n"


@dataclass(frozen=True)
class SourceLocation:
    """Where in the code a panic was raised."""

    file: str = "unknown"
    line: int = 0
    column: int = 0
    function: str = "unknown"

    @classmethod
    def current(cls, depth: int = 1) -> "SourceLocation":
        """Location of the caller, ``depth`` frames above this call."""
        frame = inspect.currentframe()
        try:
            for _ in range(depth):
                if frame is None:
                    break
                frame = frame.f_back
            if frame is None:
                return cls()
            return cls(
                file=frame.f_code.co_filename,
                line=frame.f_lineno,
                column=0,
                function=frame.f_code.co_name,
            )
        finally:
            del frame

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"


PanicHook = Callable[[str, str, SourceLocation], None]


class Panic(RuntimeError):
    """Raised once a panic has been reported through the panic hook."""

    def __init__(
        self,
        info: str,
        error_report: str = "",
        location: Optional[SourceLocation] = None,
        recursive: bool = False,
    ) -> None:
        self.info = info
        self.error_report = error_report
        self.location = location if location is not None else SourceLocation()
        self.recursive = recursive
        message = f"{info}: {error_report}" if error_report else info
        super().__init__(message)


class _PanicState(threading.local):
    count = 0


_state = _PanicState()
_hook_lock = threading.Lock()
_hook: Optional[PanicHook] = None


def is_panicking() -> bool:
    """Whether the current thread is in the middle of handling a panic."""
    return _state.count != 0


def default_panic_hook(info: str, error_report: str, location: SourceLocation) -> None:
    """Write a panic report for the current thread to standard error."""
    thread = threading.current_thread()
    message = f"{info}: {error_report}" if error_report else info
    sys.stderr.write(
        f"\nthread '{thread.name}' (id: {thread.ident}) panicked with: '{message}'"
        f" at function: '{location.function}' [{location}]\n"
    )
    sys.stderr.flush()


def attach_panic_hook(hook: PanicHook) -> bool:
    """Install ``hook`` for all threads; refused while this thread panics."""
    global _hook
    if is_panicking():
        return False
    with _hook_lock:
        _hook = hook
    return True


def take_panic_hook() -> Optional[PanicHook]:
    """Remove and return the installed hook (the default one if none).

    Returns ``None`` if the current thread is panicking.
    """
    global _hook
    if is_panicking():
        return None
    with _hook_lock:
        hook, _hook = _hook, None
    return hook if hook is not None else default_panic_hook


def begin_panic(info: str, error_report: str, location: SourceLocation) -> None:
    """Report a panic through the hook, then raise :class:`Panic`."""
    if is_panicking():
        sys.stderr.write(_RECURSIVE_PANIC_MESSAGE)
        sys.stderr.flush()
        raise Panic(info, error_report, location, recursive=True)

    _state.count += 1
    try:
        with _hook_lock:
            hook = _hook
        (hook if hook is not None else default_panic_hook)(info, error_report, location)
    finally:
        _state.count -= 1
    raise Panic(info, error_report, location)


def panic(
    info: str = "explicit panic",
    error_report: str = "",
    location: Optional[SourceLocation] = None,
) -> None:
    """Panic with ``info``; the location defaults to the caller's."""
    if location is None:
        location = SourceLocation.current(2)
    begin_panic(info, error_report, location)