"""Shared state between the executor and the users of an asynchronous operation."""

from __future__ import annotations

import copy as _copy
import threading
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Callable, Generic, Optional, TypeVar

__all__ = [
    "FutureStatus",
    "InfoFutureStatus",
    "TerminalFutureStatus",
    "FutureError",
    "FutureResultError",
    "CancelState",
    "SuspendState",
    "PreemptState",
    "RequestType",
    "ServiceToken",
    "FutureExecutionState",
    "FutureRequestState",
    "FutureState",
]

T = TypeVar("T")

_U8_MAX = 255


class FutureStatus(IntEnum):
    """Observable status of an asynchronous operation.

    Only the terminal states (``Canceled`` and ``Completed``) are guaranteed to
    mean anything for the program's state; the others are informational.
    """

    Scheduled = 0
    Submitted = 1
    Preempted = 2
    Executing = 3
    Canceling = 4
    Suspending = 5
    Suspended = 6
    Resuming = 7
    Canceled = 8
    Completing = 9
    Completed = 10
    Pending = _U8_MAX


class InfoFutureStatus(IntEnum):
    """The informational, non-terminal statuses."""

    Scheduled = FutureStatus.Scheduled.value
    Submitted = FutureStatus.Submitted.value
    Preempted = FutureStatus.Preempted.value
    Executing = FutureStatus.Executing.value
    Canceling = FutureStatus.Canceling.value
    Suspending = FutureStatus.Suspending.value
    Suspended = FutureStatus.Suspended.value
    Resuming = FutureStatus.Resuming.value


class TerminalFutureStatus(IntEnum):
    """The terminal statuses, plus ``Pending`` while none has been reached."""

    Canceled = FutureStatus.Canceled.value
    Completing = FutureStatus.Completing.value
    Completed = FutureStatus.Completed.value
    Pending = FutureStatus.Pending.value


class FutureError(Enum):
    """Why a result could not be obtained from a future."""

    Pending = 0
    Canceled = 1

    def __str__(self) -> str:
        return self.name


class FutureResultError(Exception):
    """Raised when a future's result is requested but not available."""

    def __init__(self, error: FutureError) -> None:
        self.error = error
        super().__init__(str(error))


class CancelState(Enum):
    Executing = 0
    Canceled = 1


class SuspendState(Enum):
    Executing = 0
    Suspended = 1


class PreemptState(Enum):
    Executing = 0
    Preempted = 1


class RequestType(Enum):
    Suspend = 0
    Cancel = 1
    Preempt = 2


@dataclass(frozen=True)
class ServiceToken:
    """Tells why a task returned; plain data, does not check for requests."""

    type: RequestType = RequestType.Suspend


class FutureExecutionState:
    """Status of an operation, written by the executor and read by users.

    The terminal status is only ever set once; it overrides the informational
    status when both are present.
    """

    def __init__(self) -> None:
        self._info = InfoFutureStatus.Scheduled
        self._term = TerminalFutureStatus.Pending
        self._term_lock = threading.Lock()

    def notify_info(self, status: InfoFutureStatus) -> None:
        """Record an informational status; these may arrive in any order."""
        self._info = InfoFutureStatus(status)

    def _notify_terminal(self, status: TerminalFutureStatus) -> bool:
        with self._term_lock:
            if self._term is not TerminalFutureStatus.Pending:
                return False
            self._term = status
            return True

    def notify_canceled(self) -> bool:
        """Enter the canceled state unless a terminal state was already reached."""
        return self._notify_terminal(TerminalFutureStatus.Canceled)

    def complete_with_void(self) -> bool:
        """Enter the completed state unless a terminal state was already reached."""
        return self._notify_terminal(TerminalFutureStatus.Completed)

    def complete_with_result(self, setter: Callable[[], None]) -> bool:
        """Run ``setter`` and complete, at most once across all executors.

        Returns whether ``setter`` ran. If ``setter`` raises, the state goes
        back to pending and the exception propagates.
        """
        if not self._notify_terminal(TerminalFutureStatus.Completing):
            return False
        try:
            setter()
        except BaseException:
            with self._term_lock:
                self._term = TerminalFutureStatus.Pending
            raise
        with self._term_lock:
            self._term = TerminalFutureStatus.Completed
        return True

    def fetch_status(self) -> FutureStatus:
        with self._term_lock:
            term = self._term
        if term is TerminalFutureStatus.Pending:
            return FutureStatus(self._info.value)
        return FutureStatus(term.value)

    def is_done(self) -> bool:
        return self.fetch_status() in (FutureStatus.Canceled, FutureStatus.Completed)


class FutureRequestState:
    """Requests sent to the executor: cancelation, suspension and preemption."""

    def __init__(self) -> None:
        self._cancel = CancelState.Executing
        self._suspend = SuspendState.Executing
        self._preempt = PreemptState.Executing

    def fetch_cancel_request(self) -> CancelState:
        return self._cancel

    def fetch_suspend_request(self) -> SuspendState:
        return self._suspend

    def fetch_preempt_request(self) -> PreemptState:
        return self._preempt

    def request_cancel(self) -> None:
        """Request cancelation; this cannot be withdrawn."""
        self._cancel = CancelState.Canceled

    def request_resume(self) -> None:
        self._suspend = SuspendState.Executing

    def request_suspend(self) -> None:
        self._suspend = SuspendState.Suspended

    def request_preempt(self) -> None:
        self._preempt = PreemptState.Preempted

    def clear_preempt_request(self) -> None:
        self._preempt = PreemptState.Executing


class FutureState(FutureExecutionState, FutureRequestState, Generic[T]):
    """Full shared state of a future, including storage for its result."""

    def __init__(self) -> None:
        FutureExecutionState.__init__(self)
        FutureRequestState.__init__(self)
        self._storage: Optional[T] = None
        self._storage_lock = threading.Lock()

    def complete_with_object(self, value: T) -> bool:
        """Store ``value`` and complete; ignored if already terminal."""

        def _store() -> None:
            with self._storage_lock:
                self._storage = value

        return self.complete_with_result(_store)

    def _result(self, extract: Callable[[T], T]) -> T:
        status = self.fetch_status()
        if status is FutureStatus.Completed:
            with self._storage_lock:
                return extract(self._storage)  # type: ignore[arg-type]
        if status is FutureStatus.Canceled:
            raise FutureResultError(FutureError.Canceled)
        raise FutureResultError(FutureError.Pending)

    def copy_result(self) -> T:
        """A shallow copy of the result; raises :class:`FutureResultError` if unavailable."""
        return self._result(_copy.copy)

    def move_result(self) -> T:
        """The result object handed over; raises :class:`FutureResultError` if unavailable."""
        return self._result(lambda value: value)

    def ref_result(self) -> T:
        """The stored result object itself; raises :class:`FutureResultError` if unavailable."""
        return self._result(lambda value: value)