"""OOD Principles Core - the five demos and the playground around them"""
from .events import event_bus, EventBus, DemoStartedEvent, StepEvent, DemoFinishedEvent
from .playground import Playground, Step, DemoResult
from .demos import DEMOS, run_demo, run_all
from .effects import LoggerHandler, TranscriptHandler
