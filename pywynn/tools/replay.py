#!/usr/bin/env python3
"""
Chat Log Replay

Feeds a captured log of coded chat lines through a Client and prints the
friend events it produces. Useful for checking the patterns against real
server output.

Lines starting with ">>" are directives instead of chat:
    >> state WORLD WC12     switch world state (world name optional)
    >> auth                 emit AUTHENTICATED
    >> wait 0.5             advance the replay clock

Usage:
    pywynn-replay chat.log
    pywynn-replay chat.log --player Salted --world WC3 --debug
"""

import argparse
import logging
import sys

from ..client import Client
from ..config import ClientConfig
from ..events import EventType, FriendEvent, FriendListEvent
from ..utils.logging_config import ModuleLogger, configure_logging
from ..world_state import WorldState

logger = logging.getLogger(__name__)


class ReplayClock:
    """Clock that only moves when told to"""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


def attach_printer(client: Client, out=None):
    """Print every friend event the client emits (to stdout unless out is given)"""

    def printer(label):
        def handle(event):
            if isinstance(event, FriendEvent):
                detail = event.player
                if event.server:
                    detail += f" on {event.server} as {event.class_name}"
            elif isinstance(event, FriendListEvent):
                detail = ", ".join(sorted(event.friends)) or "(none)"
            else:
                detail = ""
            print(f"{label:<8} {detail}".rstrip(), file=out or sys.stdout)
        return handle

    client.on(EventType.FRIEND_ADDED, printer("added"))
    client.on(EventType.FRIEND_REMOVED, printer("removed"))
    client.on(EventType.FRIEND_LIST_UPDATED, printer("listed"))
    client.on(EventType.FRIEND_JOINED, printer("joined"))
    client.on(EventType.FRIEND_LEFT, printer("left"))


def run_directive(client: Client, clock: ReplayClock, line: str):
    parts = line[2:].split()
    if not parts:
        return

    name, args = parts[0].lower(), parts[1:]
    if name == "state" and args:
        try:
            state = WorldState[args[0].upper()]
        except KeyError:
            logger.warning(f"Unknown world state: {args[0]}")
            return
        client.set_world_state(state, args[1] if len(args) > 1 else "")
    elif name == "auth":
        client.authenticate()
    elif name == "wait" and args:
        try:
            seconds = float(args[0])
        except ValueError:
            logger.warning(f"Invalid wait time: {args[0]}")
            return
        clock.advance(seconds)
    else:
        logger.warning(f"Unknown directive: {line}")


def replay(lines, client: Client, clock: ReplayClock) -> int:
    """Replay lines through the client, returns the number of chat lines"""
    count = 0
    for raw in lines:
        line = raw.rstrip("\r\n")
        if not line:
            continue
        if line.startswith(">>"):
            run_directive(client, clock, line)
            continue
        client.receive_chat(line)
        count += 1
    return count


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Replay a coded chat log through the friends model")
    parser.add_argument("logfile", help="File with one coded chat line per line")
    parser.add_argument("--player", default="Player", help="Local player name")
    parser.add_argument("--world", default="WC1", help="World to start in")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    config = ClientConfig(log_level="DEBUG" if args.debug else "INFO", debug=args.debug)
    configure_logging(
        getattr(logging, config.log_level),
        ModuleLogger.DEBUG_SUBSYSTEMS if config.debug else None,
    )

    clock = ReplayClock()
    try:
        with Client(send_command=lambda command: print(f"> /{command}"),
                    config=config, clock=clock) as client:
            attach_printer(client)
            client.join(args.player)
            client.set_world_state(WorldState.WORLD, args.world)

            with open(args.logfile, "r", encoding="utf-8") as f:
                count = replay(f, client, clock)

            friends = sorted(client.friends.get_friends())
            print(f"Replayed {count} chat lines")
            print(f"Friends ({len(friends)}): {', '.join(friends) or '(none)'}")
    except KeyboardInterrupt:
        print("\nStopped by user", file=sys.stderr)
        return 130
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
