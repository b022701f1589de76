"""Unit tests for MemoizedInitializer."""

import pytest

from asyncbuild import (
    MAX_INIT_ARGS,
    ConfigurationError,
    InitConfig,
    LifecycleError,
    MemoizedInitializer,
)


@pytest.mark.unit
@pytest.mark.init
def test_basic_getter_runs_once_and_disposes_final_value():
    """The getter runs once per identity and the disposer sees the final value"""
    getter_count = 42
    disposed = []

    def get_int():
        nonlocal getter_count
        value = getter_count
        getter_count += 1
        return value

    def get_int2():
        return get_int()

    initializer = MemoizedInitializer(
        InitConfig.of(get_int, builder=lambda v: f"{v}", disposer=disposed.append)
    )
    initializer.activate()
    assert initializer.build() == "42"

    # Same getter: no re-run
    initializer.reconfigure(
        InitConfig.of(get_int, builder=lambda v: f"{v}", disposer=disposed.append)
    )
    assert initializer.build() == "42"

    # New getter identity: re-run, no dispose yet
    initializer.reconfigure(
        InitConfig.of(get_int2, builder=lambda v: f"{v}", disposer=disposed.append)
    )
    assert initializer.build() == "43"
    assert disposed == []

    initializer.deactivate()
    assert disposed == [43]


@pytest.mark.unit
@pytest.mark.init
def test_arg_getter_reruns_only_when_args_change():
    """Changing an argument re-runs the getter; equal arguments do not"""
    getter_count = 0
    disposed = []

    def get_string(prefix, offset):
        nonlocal getter_count
        value = f"{prefix}{offset + getter_count}"
        getter_count += 1
        return value

    initializer = MemoizedInitializer()
    initializer.activate(InitConfig.of(get_string, "foo", 42, disposer=disposed.append))
    assert initializer.value == "foo42"

    initializer.reconfigure(InitConfig.of(get_string, "foo", 42, disposer=disposed.append))
    assert initializer.value == "foo42"

    initializer.reconfigure(
        InitConfig.of(get_string, "foobar", 42, disposer=disposed.append)
    )
    assert initializer.value == "foobar43"

    initializer.deactivate()
    assert disposed == ["foobar43"]


@pytest.mark.unit
@pytest.mark.init
def test_disposal_timing_across_reconfigurations():
    """Construction counts and disposal follow the memo record lifecycle"""
    constructed = []
    disposed = []

    def make(a):
        constructed.append(a)
        return {"a": a}

    initializer = MemoizedInitializer(InitConfig.of(make, 1, disposer=disposed.append))
    initializer.activate()

    initializer.reconfigure(InitConfig.of(make, 1, disposer=disposed.append))
    assert constructed == [1]

    initializer.reconfigure(InitConfig.of(make, 2, disposer=disposed.append))
    assert constructed == [1, 2]
    assert disposed == []

    initializer.deactivate()
    assert disposed == [{"a": 2}]
    assert initializer.init_count == 2


@pytest.mark.unit
@pytest.mark.init
def test_deactivate_is_idempotent():
    """The disposer runs exactly once"""
    disposed = []
    initializer = MemoizedInitializer(InitConfig.of(object, disposer=disposed.append))
    initializer.activate()

    initializer.deactivate()
    initializer.deactivate()

    assert len(disposed) == 1
    assert initializer.is_active is False


@pytest.mark.unit
@pytest.mark.init
def test_no_disposer_is_fine():
    """Deactivating without a disposer just releases the record"""
    initializer = MemoizedInitializer(InitConfig.of(lambda: "value"))
    initializer.activate()

    initializer.deactivate()

    with pytest.raises(LifecycleError):
        initializer.value


@pytest.mark.unit
@pytest.mark.init
def test_build_without_builder_returns_value():
    """build() falls back to the memoized value itself"""
    with MemoizedInitializer(InitConfig.of(lambda x: x * 2, 21)) as initializer:
        assert initializer.build() == 42


@pytest.mark.unit
@pytest.mark.init
def test_context_manager_activates_and_disposes():
    """The with block spans the memo record's life"""
    disposed = []

    with MemoizedInitializer(InitConfig.of(list, disposer=disposed.append)) as init:
        value = init.value
        assert init.is_active

    assert disposed == [value]
    assert disposed[0] is value


@pytest.mark.unit
@pytest.mark.init
def test_arguments_compare_by_equality():
    """Equal but distinct argument objects do not trigger reconstruction"""
    calls = []

    def make(items):
        calls.append(items)
        return len(items)

    with MemoizedInitializer(InitConfig.of(make, [1, 2])) as initializer:
        initializer.reconfigure(InitConfig.of(make, [1, 2]))
        assert len(calls) == 1

        initializer.reconfigure(InitConfig.of(make, [1, 2, 3]))
        assert initializer.value == 3


@pytest.mark.unit
@pytest.mark.init
@pytest.mark.edge_case
def test_argument_count_change_reinitializes():
    """A different number of arguments is a different configuration"""
    def make(*args):
        return args

    with MemoizedInitializer(InitConfig.of(make, 1)) as initializer:
        initializer.reconfigure(InitConfig.of(make, 1, None))
        assert initializer.value == (1, None)


@pytest.mark.unit
@pytest.mark.init
def test_seven_arguments_supported():
    """Up to seven positional arguments are accepted"""
    args = tuple(range(MAX_INIT_ARGS))

    with MemoizedInitializer(InitConfig.of(lambda *a: sum(a), *args)) as initializer:
        assert initializer.value == sum(args)


@pytest.mark.unit
@pytest.mark.init
def test_too_many_arguments_rejected():
    """More than seven arguments is a configuration error"""
    with pytest.raises(ConfigurationError):
        InitConfig.of(lambda *a: a, *range(MAX_INIT_ARGS + 1))


@pytest.mark.unit
@pytest.mark.init
def test_non_callable_getter_rejected():
    """The getter must be callable"""
    with pytest.raises(ConfigurationError):
        InitConfig(getter="not callable")


@pytest.mark.unit
@pytest.mark.init
def test_lifecycle_errors():
    """Reconfiguring before activation and activating twice are rejected"""
    initializer = MemoizedInitializer(InitConfig.of(object))

    with pytest.raises(LifecycleError):
        initializer.reconfigure(InitConfig.of(object))

    initializer.activate()
    with pytest.raises(LifecycleError):
        initializer.activate()


@pytest.mark.unit
@pytest.mark.init
def test_uses_latest_disposer():
    """The disposer of the current configuration performs disposal"""
    first, second = [], []
    make = lambda: "value"  # noqa: E731

    initializer = MemoizedInitializer(InitConfig.of(make, disposer=first.append))
    initializer.activate()
    initializer.reconfigure(InitConfig.of(make, disposer=second.append))
    initializer.deactivate()

    assert first == []
    assert second == ["value"]


@pytest.mark.unit
@pytest.mark.init
@pytest.mark.edge_case
def test_failed_reinitialization_is_retried_with_same_config():
    """A raising getter keeps the previous record, so the same config runs it again"""
    calls = []
    failures = [RuntimeError("not ready")]

    def scaled(a):
        calls.append(a)
        if a == 2 and failures:
            raise failures.pop()
        return a * 10

    initializer = MemoizedInitializer(InitConfig.of(scaled, 1))
    initializer.activate()
    assert initializer.value == 10

    with pytest.raises(RuntimeError, match="not ready"):
        initializer.reconfigure(InitConfig.of(scaled, 2))
    assert initializer.value == 10
    assert initializer.config.args == (1,)
    assert initializer.init_count == 1

    assert initializer.reconfigure(InitConfig.of(scaled, 2)) == 20
    assert calls == [1, 2, 2]
    assert initializer.init_count == 2
