"""
OOD Principles Handlers
Event handlers that log what the demos evaluate.

Same IoC idea as everywhere else: the demos publish events and have no
idea these handlers exist.
"""
from typing import List, Optional

from .events import event_bus, EventBus, DemoStartedEvent, StepEvent, DemoFinishedEvent
from .playground import format_result


class LoggerHandler:
    """Simple handler that logs demo events to the console."""

    def __init__(self, bus: EventBus = event_bus, verbose: bool = False):
        self.verbose = verbose
        bus.subscribe(DemoStartedEvent, self.on_started)
        bus.subscribe(DemoFinishedEvent, self.on_finished)
        if verbose:
            bus.subscribe(StepEvent, self.on_step)

    def on_started(self, event: DemoStartedEvent) -> None:
        print(f"[DEMO] {event.principle}: {event.title}")

    def on_step(self, event: StepEvent) -> None:
        print(f"[STEP] {event.principle}: {event.expression} -> {format_result(event.result)}")

    def on_finished(self, event: DemoFinishedEvent) -> None:
        print(f"[DONE] {event.principle} ({event.step_count} steps)")


class TranscriptHandler:
    """Records every demo event as a line, optionally appending to a log file."""

    def __init__(self, bus: EventBus = event_bus, log_file: Optional[str] = None):
        self.log_file = log_file
        self.logs: List[str] = []
        bus.subscribe(DemoStartedEvent, self.on_started)
        bus.subscribe(StepEvent, self.on_step)
        bus.subscribe(DemoFinishedEvent, self.on_finished)

    def _log(self, line: str) -> None:
        self.logs.append(line)
        if self.log_file:
            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.write(line + '\n')

    def on_started(self, event: DemoStartedEvent) -> None:
        self._log(f"# {event.title}")

    def on_step(self, event: StepEvent) -> None:
        if event.note:
            self._log(f"> ⚠ {event.note}")
        self._log(f"{event.expression}  // {format_result(event.result)}")

    def on_finished(self, event: DemoFinishedEvent) -> None:
        self._log(f"# end of {event.principle} ({event.step_count} steps)")

    def get_recent_logs(self, count: int = 10) -> List[str]:
        """Get the most recent transcript lines."""
        return self.logs[-count:]

    def save_logs(self, filename: str) -> None:
        """Write the whole transcript to a file."""
        with open(filename, 'w', encoding='utf-8') as f:
            for line in self.logs:
                f.write(line + '\n')
