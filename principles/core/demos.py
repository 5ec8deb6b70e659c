"""
Demo Registry
Maps principle keys to their runnable demos, in catalog order.
"""
from typing import Callable, Dict, Iterable, List, Optional

from ..config import PRINCIPLE_KEYS
from .events import event_bus, EventBus
from .playground import DemoResult
from . import (
    single_responsibility,
    open_closed,
    liskov_substitution,
    interface_segregation,
    dependency_inversion,
)

DEMOS: Dict[str, Callable[..., DemoResult]] = {
    "srp": single_responsibility.run,
    "ocp": open_closed.run,
    "lsp": liskov_substitution.run,
    "isp": interface_segregation.run,
    "dip": dependency_inversion.run,
}


def run_demo(key: str, bus: EventBus = event_bus) -> DemoResult:
    """Run a single demo from scratch."""
    if key not in DEMOS:
        raise KeyError(f"Unknown principle '{key}' (known: {', '.join(PRINCIPLE_KEYS)})")
    return DEMOS[key](bus)


def run_all(keys: Optional[Iterable[str]] = None, bus: EventBus = event_bus) -> List[DemoResult]:
    """Run the selected demos (default: all) in catalog order."""
    selected = PRINCIPLE_KEYS if keys is None else list(keys)
    for key in selected:
        if key not in DEMOS:
            raise KeyError(f"Unknown principle '{key}' (known: {', '.join(PRINCIPLE_KEYS)})")
    ordered = [key for key in PRINCIPLE_KEYS if key in selected]
    return [run_demo(key, bus) for key in ordered]
