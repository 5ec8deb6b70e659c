"""
Liskov Substitution - Referenzimplementierung

Lernziel: Abgeleitete Klassen müssen ihre Basisklassen ersetzen können.

    DomainError (domain, code, user_info)
    └── RequestError (+ request)

Wer nur DomainError kennt, liest den Code. Wer RequestError kennt,
kommt zusätzlich an den Request - ohne dass sich die Basis ändert.
"""
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .events import event_bus, EventBus
from .playground import Playground, DemoResult

REQUEST_KEY = "NSURLRequestKey"


@dataclass(frozen=True)
class Request:
    """The request whose fetch fails."""
    url: str = ""
    method: str = "GET"


class DomainError(Exception):
    """Base error: an identifying domain/code pair plus free-form context."""

    def __init__(self, domain: str, code: int, user_info: Optional[Mapping[str, Any]] = None):
        super().__init__(f"{domain} error {code}")
        self.domain = domain
        self.code = code
        self._user_info: Dict[str, Any] = dict(user_info or {})

    @property
    def user_info(self) -> Dict[str, Any]:
        return dict(self._user_info)


class RequestError(DomainError):
    """Adds a request accessor; nothing of the base behavior is overridden."""

    @property
    def request(self) -> Optional[Request]:
        request = self._user_info.get(REQUEST_KEY)
        return request if isinstance(request, Request) else None


@dataclass
class FetchResult:
    """Either data or an error, never both."""
    data: Any = None
    error: Optional[DomainError] = None

    def __post_init__(self):
        if self.data is not None and self.error is not None:
            raise ValueError("FetchResult holds either data or an error, not both")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the data, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.data


def fetch_data(request: Request) -> FetchResult:
    """I fail to fetch data and return a RequestError."""
    user_info = {REQUEST_KEY: request}
    return FetchResult(data=None, error=RequestError(domain="DOMAIN", code=0, user_info=user_info))


def will_return_object_or_error() -> FetchResult:
    """I have no idea what RequestError is; I only hand on a DomainError."""
    request = Request()
    result = fetch_data(request)
    return FetchResult(data=result.data, error=result.error)


def run(bus: EventBus = event_bus) -> DemoResult:
    pg = Playground("lsp", bus)
    pg.start()

    result = will_return_object_or_error()

    # Ok. This is a perfect DomainError instance.
    error_code = result.error.code if result.error is not None else None
    pg.show("result.error.code", error_code)

    # But hey! What's that? It's also a RequestError! Nice!
    if isinstance(result.error, RequestError):
        pg.show("result.error.request", result.error.request)

    return pg.finish()
