"""Tests for the TearDownAccepter contract and its delegating mixin."""

from __future__ import annotations

from tearstack.services.accepter import TearDownAccepter, TearDownAccepterMixin
from tearstack.services.stack import TearDownStack
from tests.conftest import RecordingLogger, Tidy


class _Fixture(TearDownAccepterMixin):
    """A test helper that owns its own stack."""

    def __init__(self) -> None:
        self.teardown_stack = TearDownStack(skip_optional=True, logger=RecordingLogger())


class TestTearDownAccepter:
    def test_stack_is_an_accepter(self) -> None:
        assert isinstance(TearDownStack(skip_optional=False), TearDownAccepter)

    def test_mixin_host_is_an_accepter(self) -> None:
        assert isinstance(_Fixture(), TearDownAccepter)

    def test_plain_object_is_not(self) -> None:
        assert not isinstance(object(), TearDownAccepter)


class TestTearDownAccepterMixin:
    def test_delegates_registration(self) -> None:
        messages: list[str] = []
        host = _Fixture()
        host.add_teardown(Tidy(messages, "optional"))
        host.add_required_teardown(Tidy(messages, "required"))

        entries = host.teardown_stack.entries
        assert [e.required for e in entries] == [False, True]

        host.teardown_stack.run()
        assert messages == ["required"]

    def test_returns_action(self) -> None:
        host = _Fixture()
        action = Tidy([], "x")
        assert host.add_teardown(action) is action
        assert host.add_required_teardown(action) is action
