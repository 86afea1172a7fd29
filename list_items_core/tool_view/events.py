"""
    Selection-change notification — the host's "chart selection changed" event.

    Design Pattern: Observer
    ────────────────────────
    ``subscribe(listener, options)`` returns a ``Subscription`` handle.
    Cancelling the handle is idempotent and guarantees no further delivery,
    including deliveries still pending inside a ``publish`` that is running
    when the cancellation happens.

    Immediate delivery (``dispatch_now``) is an option of the subscription
    and goes through the same delivery path as later events.
"""
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from list_items_api.models.schema import ChartApplication
from list_items_api.models.selection import ChartSelection

logger = logging.getLogger(__name__)

SelectionListener = Callable[[ChartSelection, ChartApplication], None]


@dataclass(frozen=True)
class SubscribeOptions:
    """
    Attributes:
        dispatch_now: Also invoke the listener at subscribe time with the
                      current selection.
    """
    dispatch_now: bool = False


class Subscription:
    """Cancellation handle returned by ``SelectionChangeNotifier.subscribe``."""

    def __init__(self, notifier: 'SelectionChangeNotifier',
                 listener: SelectionListener, options: SubscribeOptions):
        self._notifier = notifier
        self._listener = listener
        self.options = options
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        """Stop delivery. Calling it again does nothing."""
        if not self._active:
            return
        self._active = False
        self._notifier._remove(self)

    def __call__(self) -> None:
        self.cancel()

    def _deliver(self, selection: ChartSelection, application: ChartApplication) -> None:
        if not self._active:
            return
        # Errors propagate to the publisher; schema inconsistencies fail fast
        self._listener(selection, application)


class SelectionChangeNotifier:
    """
    Holds the current chart selection and notifies subscribers when the
    host publishes a new one. The latest publish always wins.

    Usage:
        notifier = SelectionChangeNotifier()
        sub = notifier.subscribe(on_change, SubscribeOptions(dispatch_now=True))
        notifier.publish(selection, application)
        sub.cancel()
    """

    def __init__(self, selection: Optional[ChartSelection] = None,
                 application: Optional[ChartApplication] = None):
        self._selection: ChartSelection = selection if selection is not None else ChartSelection()
        self._application: ChartApplication = application or ChartApplication()
        self._subscriptions: List[Subscription] = []

    @property
    def selection(self) -> ChartSelection:
        return self._selection

    @property
    def application(self) -> ChartApplication:
        return self._application

    def subscribe(self, listener: SelectionListener,
                  options: Optional[SubscribeOptions] = None) -> Subscription:
        """
        Register a listener for selection changes.

        Args:
            listener: Called with ``(selection, application)``.
            options:  ``SubscribeOptions``; ``dispatch_now`` delivers the
                      current state before returning.

        Returns:
            The cancellation handle.
        """
        subscription = Subscription(self, listener, options or SubscribeOptions())
        self._subscriptions.append(subscription)

        if subscription.options.dispatch_now:
            subscription._deliver(self._selection, self._application)
        return subscription

    def publish(self, selection: ChartSelection,
                application: Optional[ChartApplication] = None) -> None:
        """Replace the current selection and notify every active listener."""
        self._selection = selection
        if application is not None:
            self._application = application

        logger.debug("Selection changed: %r", selection)
        for subscription in list(self._subscriptions):
            subscription._deliver(self._selection, self._application)

    def _remove(self, subscription: Subscription) -> None:
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)

    def __len__(self) -> int:
        return len(self._subscriptions)
