#!/usr/bin/env python3
"""
OOD Principles - Main Entry Point
=================================

Run with: python -m principles.main [--principle srp ocp ...] [--verbose] [--pygame]

Every demo runs from scratch, top to bottom, and is then rendered as a
page. The console renderer prints all pages; the pygame renderer waits
for SPACE between pages.
"""
import argparse
import sys
from pathlib import Path
from typing import List, Optional

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from principles.config import PRINCIPLE_KEYS, SOURCE_CREDIT, get_principle
from principles.core.events import EventBus
from principles.core.demos import run_all
from principles.core.playground import DemoResult
from principles.core.effects import LoggerHandler, TranscriptHandler


class Session:
    """Runs the selected demos on its own EventBus."""

    def __init__(self, keys: Optional[List[str]] = None, verbose: bool = False,
                 log_file: Optional[str] = None):
        self.keys = keys
        self.bus = EventBus()
        self.running = True

        if verbose:
            self.logger = LoggerHandler(self.bus, verbose=True)
        else:
            self.logger = None
        self.transcript = TranscriptHandler(self.bus, log_file=log_file)

    def run(self) -> List[DemoResult]:
        return run_all(self.keys, self.bus)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="OOD Principles - the S.O.L.I.D. cheat-sheet")
    parser.add_argument('--principle', nargs='+', choices=PRINCIPLE_KEYS, metavar='KEY',
                        help=f"Run only these demos ({', '.join(PRINCIPLE_KEYS)})")
    parser.add_argument('--verbose', action='store_true',
                        help='Log every evaluated step to the console')
    parser.add_argument('--log-file', default=None,
                        help='Append the transcript to this file')
    parser.add_argument('--pygame', action='store_true',
                        help='Show the pages in a pygame window')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.pygame:
        try:
            from frontends.pygame_renderer import PygameRenderer
        except ImportError as e:
            print(f"Error: Could not import pygame renderer: {e}")
            print("\nIs pygame installed? Install the window extra (pip install .[window]) or run without --pygame.")
            sys.exit(1)
        renderer = PygameRenderer()
    else:
        from frontends.console_renderer import ConsoleRenderer
        renderer = ConsoleRenderer()

    session = Session(keys=args.principle, verbose=args.verbose, log_file=args.log_file)

    try:
        for result in session.run():
            renderer.render_demo(get_principle(result.principle), result)

            # Wait until the renderer says next (console: immediately)
            while True:
                input_state = renderer.handle_input()
                if input_state['quit']:
                    session.running = False
                    break
                if input_state['next']:
                    break

            if not session.running:
                break
    except KeyboardInterrupt:
        pass
    finally:
        renderer.cleanup()

    print(f"📖 Descriptions from: {SOURCE_CREDIT}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
