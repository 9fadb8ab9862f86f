import pytest

from stxkit.future_state import (
    CancelState,
    FutureError,
    FutureResultError,
    FutureState,
    FutureStatus,
    PreemptState,
    SuspendState,
)
from stxkit.promise import (
    Future,
    FutureAny,
    Promise,
    PromiseAny,
    RequestProxy,
    make_promise,
)


def test_new_promise_is_scheduled_and_not_done():
    promise = make_promise()
    future = promise.get_future()
    assert future.fetch_status() is FutureStatus.Scheduled
    assert promise.fetch_status() is FutureStatus.Scheduled
    assert not future.is_done()


def test_pending_result_raises_pending():
    future = make_promise().get_future()
    with pytest.raises(FutureResultError) as info:
        future.copy()
    assert info.value.error is FutureError.Pending


@pytest.mark.parametrize(
    "notify, expected",
    [
        ("notify_scheduled", FutureStatus.Scheduled),
        ("notify_submitted", FutureStatus.Submitted),
        ("notify_preempted", FutureStatus.Preempted),
        ("notify_executing", FutureStatus.Executing),
        ("notify_cancel_begin", FutureStatus.Canceling),
        ("notify_suspend_begin", FutureStatus.Suspending),
        ("notify_suspended", FutureStatus.Suspended),
        ("notify_resume_begin", FutureStatus.Resuming),
    ],
)
def test_informational_notifications(notify, expected):
    promise = make_promise()
    getattr(promise, notify)()
    assert promise.get_future().fetch_status() is expected
    assert not promise.is_done()


def test_completed_value_results():
    promise = make_promise()
    future = promise.get_future()
    value = [1, 2, 3]
    promise.notify_completed(value)
    assert future.is_done()
    assert future.fetch_status() is FutureStatus.Completed
    copied = future.copy()
    assert copied == value and copied is not value
    assert future.ref() is value
    assert future.move() is value


def test_cancel_is_terminal():
    promise = make_promise()
    future = promise.get_future()
    promise.notify_canceled()
    promise.notify_completed(5)
    assert future.fetch_status() is FutureStatus.Canceled
    assert future.is_done()
    with pytest.raises(FutureResultError) as info:
        future.move()
    assert info.value.error is FutureError.Canceled


def test_informational_after_completion_does_not_override():
    promise = make_promise()
    promise.notify_completed("done")
    promise.notify_suspended()
    assert promise.fetch_status() is FutureStatus.Completed
    assert promise.get_future().ref() == "done"


def test_second_completion_is_ignored():
    promise = make_promise()
    promise.notify_completed("first")
    promise.share().notify_completed("second")
    assert promise.get_future().copy() == "first"


def test_void_promise():
    promise = make_promise(False)
    future = promise.get_future()
    promise.notify_completed()
    assert future.is_done()
    assert future.fetch_status() is FutureStatus.Completed
    with pytest.raises(TypeError):
        future.copy()


def test_notify_completed_argument_checks():
    with pytest.raises(TypeError):
        make_promise(False).notify_completed(1)
    with pytest.raises(TypeError):
        make_promise(True).notify_completed()


def test_requests_from_future_reach_promise():
    promise = make_promise()
    future = promise.get_future()
    assert promise.fetch_cancel_request() is CancelState.Executing
    future.request_suspend()
    assert promise.fetch_suspend_request() is SuspendState.Suspended
    future.request_resume()
    assert promise.fetch_suspend_request() is SuspendState.Executing
    future.request_cancel()
    assert promise.fetch_cancel_request() is CancelState.Canceled


def test_preempt_request_and_clear():
    promise = make_promise()
    promise.request_preempt()
    assert promise.fetch_preempt_request() is PreemptState.Preempted
    promise.clear_preempt_request()
    assert promise.fetch_preempt_request() is PreemptState.Executing


def test_shared_future_sees_same_state():
    promise = make_promise()
    future = promise.get_future()
    shared = future.share()
    assert shared.state is future.state
    promise.notify_completed(7)
    assert shared.copy() == 7


def test_future_any_from_future():
    promise = make_promise()
    any_future = FutureAny(promise.get_future())
    assert any_future.state is promise.state
    any_future.request_cancel()
    assert promise.fetch_cancel_request() is CancelState.Canceled
    promise.notify_canceled()
    assert any_future.share().is_done()
    assert any_future.fetch_status() is FutureStatus.Canceled


def test_promise_any_drives_typed_future():
    promise = make_promise()
    future = promise.get_future()
    any_promise = PromiseAny(promise.share())
    any_promise.notify_executing()
    assert future.fetch_status() is FutureStatus.Executing
    any_future = any_promise.get_future()
    assert isinstance(any_future, FutureAny)
    any_promise.share().notify_canceled()
    assert any_future.is_done()
    assert future.fetch_status() is FutureStatus.Canceled


def test_request_proxy_sources():
    promise = make_promise()
    future = promise.get_future()
    proxies = [
        RequestProxy(promise),
        RequestProxy(future),
        RequestProxy(FutureAny(future)),
        RequestProxy(PromiseAny(promise)),
        RequestProxy(promise.state),
    ]
    future.request_suspend()
    promise.request_preempt()
    future.request_cancel()
    for proxy in proxies:
        shared = proxy.share()
        assert shared.state is promise.state
        assert shared.fetch_suspend_request() is SuspendState.Suspended
        assert shared.fetch_preempt_request() is PreemptState.Preempted
        assert shared.fetch_cancel_request() is CancelState.Canceled


def test_request_proxy_rejects_other_objects():
    with pytest.raises(TypeError):
        RequestProxy(object())
    with pytest.raises(TypeError):
        FutureAny(make_promise())


def test_direct_construction_over_state():
    state = FutureState()
    promise = Promise(state)
    future = Future(state)
    promise.notify_completed({"key": 1})
    assert future.ref() == {"key": 1}
    assert future.copy() is not state.ref_result()