"""
OOD Principles Events

Die Demos publizieren Events, Handler (Logger, Transcript, ...) abonnieren
sie. Keine Demo weiß, wer zuhört.
"""
from dataclasses import dataclass
from typing import Callable, Dict, List, Any, Optional


# === Event Dataclasses ===

@dataclass
class DemoStartedEvent:
    """Fired when a principle demo begins.

    Used by: Playground.start()
    Handled by: LoggerHandler, TranscriptHandler
    """
    principle: str     # "srp", "ocp", "lsp", "isp", "dip"
    title: str


@dataclass
class StepEvent:
    """Fired for every expression the playground shows."""
    principle: str
    expression: str    # Source line, e.g. "weapons.shoot()"
    result: Any        # Value shown next to it (None for statements)
    note: Optional[str] = None


@dataclass
class DemoFinishedEvent:
    """Fired when a principle demo has evaluated its last step."""
    principle: str
    step_count: int


# === EventBus ===

class EventBus:
    """Central event dispatcher.

    Demos call publish() to announce what they evaluate.
    Handlers call subscribe() to react to it.
    """

    def __init__(self):
        # Maps event type -> list of handler functions
        self._subscribers: Dict[type, List[Callable]] = {}

    def subscribe(self, event_type: type, handler: Callable) -> None:
        """Register a handler for an event type.

        Args:
            event_type: The class of events to listen for (e.g., StepEvent)
            handler: A callable that takes the event as its argument
        """
        if event_type not in self._subscribers:
            self._subscribers[event_type] = []
        self._subscribers[event_type].append(handler)

    def unsubscribe(self, event_type: type, handler: Callable) -> None:
        """Remove a handler from an event type."""
        if event_type in self._subscribers:
            try:
                self._subscribers[event_type].remove(handler)
            except ValueError:
                pass  # Handler wasn't subscribed

    def publish(self, event: Any) -> None:
        """Notify all handlers subscribed to this event's exact type."""
        for handler in list(self._subscribers.get(type(event), [])):
            handler(event)


# === Global EventBus Instance ===

event_bus = EventBus()
