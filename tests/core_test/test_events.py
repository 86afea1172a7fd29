# tests/core_test/test_events.py

import pytest

from list_items_api.models.selection import ChartSelection

from list_items_core.tool_view.events import (
    SelectionChangeNotifier,
    SubscribeOptions,
    Subscription,
)


class _Recorder:
    """Listener that remembers every delivery."""

    def __init__(self):
        self.calls = []

    def __call__(self, selection, application):
        self.calls.append((selection, application))


@pytest.fixture
def recorder():
    return _Recorder()


class TestSubscribe:

    def test_returns_handle(self, notifier, recorder):
        sub = notifier.subscribe(recorder)
        assert isinstance(sub, Subscription)
        assert sub.active is True
        assert len(notifier) == 1

    def test_no_immediate_delivery_by_default(self, notifier, recorder):
        notifier.subscribe(recorder)
        assert recorder.calls == []

    def test_dispatch_now(self, notifier, recorder, selection, application):
        notifier.subscribe(recorder, SubscribeOptions(dispatch_now=True))
        assert recorder.calls == [(selection, application)]

    def test_default_state(self, recorder):
        notifier = SelectionChangeNotifier()
        notifier.subscribe(recorder, SubscribeOptions(dispatch_now=True))
        selection, application = recorder.calls[0]
        assert len(selection) == 0
        assert application.schema.entity_types == []


class TestPublish:

    def test_delivers_to_every_listener(self, notifier):
        first, second = _Recorder(), _Recorder()
        notifier.subscribe(first)
        notifier.subscribe(second)

        new_selection = ChartSelection()
        notifier.publish(new_selection)

        assert first.calls[0][0] is new_selection
        assert second.calls[0][0] is new_selection

    def test_keeps_application_when_omitted(self, notifier, recorder, application):
        notifier.subscribe(recorder)
        notifier.publish(ChartSelection())
        assert recorder.calls[0][1] is application

    def test_last_write_wins(self, notifier, recorder):
        notifier.subscribe(recorder)
        a, b = ChartSelection(), ChartSelection()
        notifier.publish(a)
        notifier.publish(b)
        assert notifier.selection is b
        assert [call[0] for call in recorder.calls] == [a, b]

    def test_listener_errors_propagate(self, notifier):
        def broken(selection, application):
            raise RuntimeError("boom")

        notifier.subscribe(broken)
        with pytest.raises(RuntimeError):
            notifier.publish(ChartSelection())


class TestCancel:

    def test_no_delivery_after_cancel(self, notifier, recorder):
        sub = notifier.subscribe(recorder)
        sub.cancel()
        notifier.publish(ChartSelection())

        assert recorder.calls == []
        assert sub.active is False
        assert len(notifier) == 0

    def test_cancel_is_idempotent(self, notifier, recorder):
        sub = notifier.subscribe(recorder)
        sub.cancel()
        sub.cancel()
        sub()
        assert len(notifier) == 0

    def test_handle_is_callable(self, notifier, recorder):
        sub = notifier.subscribe(recorder)
        sub()
        assert sub.active is False

    def test_cancel_during_publish_stops_pending_delivery(self, notifier, recorder):
        handles = {}

        def canceller(selection, application):
            handles["late"].cancel()

        notifier.subscribe(canceller)
        handles["late"] = notifier.subscribe(recorder)

        notifier.publish(ChartSelection())
        assert recorder.calls == []

    def test_cancel_one_keeps_others(self, notifier):
        first, second = _Recorder(), _Recorder()
        sub = notifier.subscribe(first)
        notifier.subscribe(second)

        sub.cancel()
        notifier.publish(ChartSelection())

        assert first.calls == []
        assert len(second.calls) == 1
