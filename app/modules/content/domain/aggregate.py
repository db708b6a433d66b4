"""Aggregate root with recorded domain events."""

from typing import Any, List


class AggregateRoot:
    """Collects domain events raised by an entity until they are dispatched.

    Events are recorded while the aggregate changes and pulled by the use case
    once the change has been saved.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._domain_events: List[Any] = []

    def record_event(self, event: Any) -> None:
        self._domain_events.append(event)

    @property
    def domain_events(self) -> List[Any]:
        return list(self._domain_events)

    def pull_domain_events(self) -> List[Any]:
        """Return recorded events and forget them."""
        events = self._domain_events
        self._domain_events = []
        return events

    def clear_domain_events(self) -> None:
        self._domain_events = []
