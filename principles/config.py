"""
OOD Principles Configuration
Contains the principle catalog, display settings, and demo constants.
"""
from dataclasses import dataclass
from typing import List

# Display
SCREEN_WIDTH = 1024
SCREEN_HEIGHT = 768
FPS = 30
FONT_SIZE = 24
LINE_HEIGHT = 28
MARGIN = 32

# Colors
COLOR_BG = (30, 30, 36)
COLOR_TITLE = (255, 215, 0)
COLOR_TEXT = (230, 230, 230)
COLOR_RESULT = (100, 200, 255)
COLOR_HINT = (140, 140, 140)

# Demo constants (interface segregation)
PAYLOAD_DEPLOYED_AT = "April 10, 2016, 11:23 UTC"
LANDED_AT = "April 8, 2016 20:52 UTC"

# Demo constants (dependency inversion): one year back in time
ONE_YEAR_BACK = -3600 * 8760.0

SOURCE_CREDIT = (
    "The Principles of OOD by Uncle Bob "
    "(http://butunclebob.com/ArticleS.UncleBob.PrinciplesOfOod)"
)


@dataclass(frozen=True)
class Principle:
    """Catalog entry for one SOLID principle."""
    key: str           # "srp", "ocp", "lsp", "isp", "dip"
    emoji: str
    title: str
    statement: str
    read_more: str


PRINCIPLES: List[Principle] = [
    Principle(
        key="srp",
        emoji="🔐",
        title="The Single Responsibility Principle",
        statement="A class should have one, and only one, reason to change.",
        read_more="https://docs.google.com/open?id=0ByOwmqah_nuGNHEtcU5OekdDMkk",
    ),
    Principle(
        key="ocp",
        emoji="✋",
        title="The Open Closed Principle",
        statement="You should be able to extend a classes behavior, without modifying it.",
        read_more="http://docs.google.com/a/cleancoder.com/viewer?a=v&pid=explorer&chrome=true"
                  "&srcid=0BwhCYaYDn8EgN2M5MTkwM2EtNWFkZC00ZTI3LWFjZTUtNTFhZGZiYmUzODc1&hl=en",
    ),
    Principle(
        key="lsp",
        emoji="👥",
        title="The Liskov Substitution Principle",
        statement="Derived classes must be substitutable for their base classes.",
        read_more="http://docs.google.com/a/cleancoder.com/viewer?a=v&pid=explorer&chrome=true"
                  "&srcid=0BwhCYaYDn8EgNzAzZjA5ZmItNjU3NS00MzQ5LTkwYjMtMDJhNDU5ZTM0MTlh&hl=en",
    ),
    Principle(
        key="isp",
        emoji="🍴",
        title="The Interface Segregation Principle",
        statement="Make fine grained interfaces that are client specific.",
        read_more="http://docs.google.com/a/cleancoder.com/viewer?a=v&pid=explorer&chrome=true"
                  "&srcid=0BwhCYaYDn8EgOTViYjJhYzMtMzYxMC00MzFjLWJjMzYtOGJiMDc5N2JkYmJi&hl=en",
    ),
    Principle(
        key="dip",
        emoji="🔩",
        title="The Dependency Inversion Principle",
        statement="Depend on abstractions, not on concretions.",
        read_more="http://docs.google.com/a/cleancoder.com/viewer?a=v&pid=explorer&chrome=true"
                  "&srcid=0BwhCYaYDn8EgMjdlMWIzNGUtZTQ0NC00ZjQ5LTkwYzQtZjRhMDRlNTQ3ZGMz",
    ),
]

PRINCIPLE_KEYS = [p.key for p in PRINCIPLES]


def get_principle(key: str) -> Principle:
    """Look up a principle by its short key"""
    for principle in PRINCIPLES:
        if principle.key == key:
            return principle
    raise KeyError(f"Unknown principle '{key}' (known: {', '.join(PRINCIPLE_KEYS)})")
