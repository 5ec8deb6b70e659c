"""
Playground Recorder
Records each evaluated expression together with its result, like the
results sidebar of an interactive playground.
"""
from dataclasses import dataclass, field
from typing import Any, List, Optional

from ..config import get_principle
from .events import event_bus, EventBus, DemoStartedEvent, StepEvent, DemoFinishedEvent


@dataclass
class Step:
    """One evaluated line: the source text and the value it produced."""
    expression: str
    result: Any = None
    note: Optional[str] = None   # "⚠" remark shown above the line


@dataclass
class DemoResult:
    """Everything a single principle demo showed, in order."""
    principle: str
    steps: List[Step] = field(default_factory=list)

    @property
    def results(self) -> List[Any]:
        return [step.result for step in self.steps]


class Playground:
    """Collects steps for one principle and announces them on the bus.

    The EventBus is passed in (defaults to the global one), so tests can
    use a fresh bus without leftover subscribers.
    """

    def __init__(self, principle: str, bus: EventBus = event_bus):
        self.principle = get_principle(principle)
        self.bus = bus
        self.steps: List[Step] = []

    def start(self) -> None:
        self.bus.publish(DemoStartedEvent(
            principle=self.principle.key,
            title=self.principle.title,
        ))

    def show(self, expression: str, result: Any = None, note: Optional[str] = None) -> Any:
        """Record a step and return its result unchanged."""
        self.steps.append(Step(expression, result, note))
        self.bus.publish(StepEvent(
            principle=self.principle.key,
            expression=expression,
            result=result,
            note=note,
        ))
        return result

    def finish(self) -> DemoResult:
        self.bus.publish(DemoFinishedEvent(
            principle=self.principle.key,
            step_count=len(self.steps),
        ))
        return DemoResult(self.principle.key, list(self.steps))


def format_result(value: Any) -> str:
    """Format a value the way a playground sidebar shows it."""
    if value is None:
        return "nil"
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(format_result(v) for v in value) + "]"
    return repr(value)
