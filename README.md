# stxkit

A small toolkit of building blocks for Python programs.

## Modules

- `stxkit.panic`: process-wide panic hooks.
  - `panic(info="explicit panic", error_report="", location=None)` reports an
    unrecoverable error through the attached hook and then raises `Panic`.
    The location defaults to the caller's `SourceLocation`.
  - `begin_panic(info, error_report, location)` does the same with an explicit
    location. A panic raised while the same thread is already reporting one
    writes a short message to standard error and raises `Panic` with
    `recursive=True`, without running the hook.
  - `attach_panic_hook(hook)` installs a hook for all threads and returns
    `True`, or returns `False` while the current thread is panicking.
  - `take_panic_hook()` removes and returns the installed hook, or
    `default_panic_hook` if none was installed; it returns `None` while the
    current thread is panicking.
  - `default_panic_hook` writes a report naming the thread, message and
    location to standard error.
  - `is_panicking()` tells whether the current thread is reporting a panic.
- `stxkit.some`: `Some`, a dataclass wrapping a present value, with
  `copy()` (a shallow copy), `move()` and `ref()`.
- `stxkit.span`: `Span(data, start=0, size=None)`, a view over a window of a
  mutable sequence. Writes through the span change the sequence. It offers
  `at`, `slice`, `last`, `equals`, `is_any`, `is_all`, `is_none`,
  `all_equals`, `any_equals`, `none_equals`, `copy`, `for_each`, `generate`,
  `fill`, `find`, `contains`, `which`, `map`, `sort`, `is_sorted`,
  `partition`, `unstable_partition` and `reverse`. Out-of-bounds indexing,
  slicing or mismatched `map` sizes panic. `is_all` is false for an empty
  span.
- `stxkit.future_state`: the state shared by an executor and the code that
  waits on it: the `FutureStatus`, `InfoFutureStatus` and
  `TerminalFutureStatus` enums, cancel, suspend and preempt requests
  (`CancelState`, `SuspendState`, `PreemptState`), `RequestType`,
  `ServiceToken`, and `FutureState`, whose terminal state and result are set
  at most once.
- `stxkit.promise`: `Promise`, `Future`, `PromiseAny`, `FutureAny` and
  `RequestProxy` handles over that shared state, created with
  `make_promise(with_value=True)`.

## Installing

```
pip install stxkit
```

## Examples

```python
from stxkit.span import Span

data = [1, 2, 3, 4, 5, 6]
view = Span(data)
view.fill(8)
assert view.all_equals(8)

low, high = Span(list(range(1, 11))).partition(lambda x: x < 5)
assert (len(low), len(high)) == (4, 6)
```

```python
from stxkit.promise import make_promise
from stxkit.future_state import FutureStatus

promise = make_promise(True)
future = promise.get_future()
promise.notify_executing()
assert future.fetch_status() is FutureStatus.Executing

promise.notify_completed(42)
assert future.is_done()
assert future.copy() == 42
```

If a future is asked for its result before it has one, it raises
`FutureResultError`. The error's `error` attribute is a `FutureError`:
`FutureError.Pending` or `FutureError.Canceled`. A future from
`make_promise(False)` carries no value; its `copy`, `move` and `ref` raise
`TypeError`, and its promise completes with `notify_completed()`.

## What it does not do

The package provides the shared state and the handles for asynchronous
operations, but no scheduler, thread pool or executor that runs tasks. Status
changes and completion happen only when code calls the promise's `notify_*`
methods.

## Running the tests

```
pip install -e ".[test]"
pytest
```