"""Promises and futures: the two ends of an asynchronous operation's shared state.

The executor holds a :class:`Promise` and reports progress and completion
through it. Users hold a :class:`Future`, which observes the executor's
progress and sends cancelation, suspension and resumption requests back.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar, Union

from stxkit.future_state import (
    CancelState,
    FutureState,
    FutureStatus,
    InfoFutureStatus,
    PreemptState,
    SuspendState,
)

__all__ = [
    "Future",
    "FutureAny",
    "Promise",
    "PromiseAny",
    "RequestProxy",
    "make_promise",
]

T = TypeVar("T")


class Future(Generic[T]):
    """The user's end of an operation: observes status and fetches the result.

    A future made for an operation without a value (``has_value`` false) has
    no result to fetch; ``copy``, ``move`` and ``ref`` raise :class:`TypeError`.
    """

    __slots__ = ("state", "has_value")

    def __init__(self, state: FutureState, has_value: bool = True) -> None:
        self.state = state
        self.has_value = has_value

    def fetch_status(self) -> FutureStatus:
        return self.state.fetch_status()

    def request_cancel(self) -> None:
        self.state.request_cancel()

    def request_suspend(self) -> None:
        self.state.request_suspend()

    def request_resume(self) -> None:
        self.state.request_resume()

    def is_done(self) -> bool:
        return self.state.is_done()

    def _require_value(self) -> None:
        if not self.has_value:
            raise TypeError("this future carries no result value")

    def copy(self) -> T:
        """A shallow copy of the result; raises ``FutureResultError`` if unavailable."""
        self._require_value()
        return self.state.copy_result()

    def move(self) -> T:
        """The result object handed over; raises ``FutureResultError`` if unavailable."""
        self._require_value()
        return self.state.move_result()

    def ref(self) -> T:
        """The stored result object itself; raises ``FutureResultError`` if unavailable."""
        self._require_value()
        return self.state.ref_result()

    def share(self) -> "Future[T]":
        """Another future over the same shared state."""
        return Future(self.state, self.has_value)


class FutureAny:
    """A future of any result type; observes and sends requests only."""

    __slots__ = ("state",)

    def __init__(self, source: Union[Future[Any], FutureState]) -> None:
        self.state = _state_of(source, (Future, FutureAny))

    def fetch_status(self) -> FutureStatus:
        return self.state.fetch_status()

    def request_cancel(self) -> None:
        self.state.request_cancel()

    def request_suspend(self) -> None:
        self.state.request_suspend()

    def request_resume(self) -> None:
        self.state.request_resume()

    def is_done(self) -> bool:
        return self.state.is_done()

    def share(self) -> "FutureAny":
        return FutureAny(self.state)


class Promise(Generic[T]):
    """The executor's end of an operation: reports progress and completes it."""

    __slots__ = ("state", "has_value")

    def __init__(self, state: FutureState, has_value: bool = True) -> None:
        self.state = state
        self.has_value = has_value

    def notify_scheduled(self) -> None:
        self.state.notify_info(InfoFutureStatus.Scheduled)

    def notify_submitted(self) -> None:
        self.state.notify_info(InfoFutureStatus.Submitted)

    def notify_preempted(self) -> None:
        self.state.notify_info(InfoFutureStatus.Preempted)

    def notify_executing(self) -> None:
        self.state.notify_info(InfoFutureStatus.Executing)

    def notify_cancel_begin(self) -> None:
        self.state.notify_info(InfoFutureStatus.Canceling)

    def notify_canceled(self) -> None:
        self.state.notify_canceled()

    def notify_suspend_begin(self) -> None:
        self.state.notify_info(InfoFutureStatus.Suspending)

    def notify_suspended(self) -> None:
        self.state.notify_info(InfoFutureStatus.Suspended)

    def notify_resume_begin(self) -> None:
        self.state.notify_info(InfoFutureStatus.Resuming)

    def notify_completed(self, *args: Any) -> None:
        """Complete the operation, with one value if the promise carries one.

        Ignored if the operation has already reached a terminal state.
        """
        if self.has_value:
            if len(args) != 1:
                raise TypeError("notify_completed takes exactly one value for this promise")
            self.state.complete_with_object(args[0])
        else:
            if args:
                raise TypeError("notify_completed takes no value for this promise")
            self.state.complete_with_void()

    def request_cancel(self) -> None:
        self.state.request_cancel()

    def request_suspend(self) -> None:
        self.state.request_suspend()

    def request_resume(self) -> None:
        self.state.request_resume()

    def request_preempt(self) -> None:
        self.state.request_preempt()

    def clear_preempt_request(self) -> None:
        self.state.clear_preempt_request()

    def fetch_cancel_request(self) -> CancelState:
        return self.state.fetch_cancel_request()

    def fetch_preempt_request(self) -> PreemptState:
        return self.state.fetch_preempt_request()

    def fetch_suspend_request(self) -> SuspendState:
        return self.state.fetch_suspend_request()

    def fetch_status(self) -> FutureStatus:
        return self.state.fetch_status()

    def is_done(self) -> bool:
        return self.state.is_done()

    def get_future(self) -> Future[T]:
        return Future(self.state, self.has_value)

    def share(self) -> "Promise[T]":
        return Promise(self.state, self.has_value)


class PromiseAny:
    """A promise of any result type; cannot complete with a value."""

    __slots__ = ("state",)

    def __init__(self, source: Union[Promise[Any], FutureState]) -> None:
        self.state = _state_of(source, (Promise, PromiseAny))

    def notify_scheduled(self) -> None:
        self.state.notify_info(InfoFutureStatus.Scheduled)

    def notify_submitted(self) -> None:
        self.state.notify_info(InfoFutureStatus.Submitted)

    def notify_preempted(self) -> None:
        self.state.notify_info(InfoFutureStatus.Preempted)

    def notify_executing(self) -> None:
        self.state.notify_info(InfoFutureStatus.Executing)

    def notify_cancel_begin(self) -> None:
        self.state.notify_info(InfoFutureStatus.Canceling)

    def notify_canceled(self) -> None:
        self.state.notify_canceled()

    def notify_suspend_begin(self) -> None:
        self.state.notify_info(InfoFutureStatus.Suspending)

    def notify_suspended(self) -> None:
        self.state.notify_info(InfoFutureStatus.Suspended)

    def notify_resume_begin(self) -> None:
        self.state.notify_info(InfoFutureStatus.Resuming)

    def request_cancel(self) -> None:
        self.state.request_cancel()

    def request_suspend(self) -> None:
        self.state.request_suspend()

    def request_resume(self) -> None:
        self.state.request_resume()

    def request_preempt(self) -> None:
        self.state.request_preempt()

    def clear_preempt_request(self) -> None:
        self.state.clear_preempt_request()

    def fetch_cancel_request(self) -> CancelState:
        return self.state.fetch_cancel_request()

    def fetch_preempt_request(self) -> PreemptState:
        return self.state.fetch_preempt_request()

    def fetch_suspend_request(self) -> SuspendState:
        return self.state.fetch_suspend_request()

    def fetch_status(self) -> FutureStatus:
        return self.state.fetch_status()

    def is_done(self) -> bool:
        return self.state.is_done()

    def get_future(self) -> FutureAny:
        return FutureAny(self.state)

    def share(self) -> "PromiseAny":
        return PromiseAny(self.state)


class RequestProxy:
    """Read-only view of the requests sent to an operation's executor."""

    __slots__ = ("state",)

    def __init__(self, source: Any) -> None:
        self.state = _state_of(
            source, (Promise, PromiseAny, Future, FutureAny, RequestProxy)
        )

    def fetch_cancel_request(self) -> CancelState:
        return self.state.fetch_cancel_request()

    def fetch_preempt_request(self) -> PreemptState:
        return self.state.fetch_preempt_request()

    def fetch_suspend_request(self) -> SuspendState:
        return self.state.fetch_suspend_request()

    def share(self) -> "RequestProxy":
        return RequestProxy(self.state)


def _state_of(source: Any, accepted: tuple) -> FutureState:
    if isinstance(source, FutureState):
        return source
    if isinstance(source, accepted):
        return source.state
    raise TypeError(f"cannot take a future state from {type(source).__name__}")


def make_promise(with_value: bool = True) -> Promise[Any]:
    """A promise over fresh shared state, completing with a value or without one."""
    return Promise(FutureState(), with_value)