"""Command line interface for the Pomodoro timer."""
from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Iterable, Optional

from . import installer, messages, notifier, scheduler, session

FAST_TICK_SECONDS = 1 / 60


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def parse_args(argv: Iterable[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pomotimer",
        description="🍅 A friendly Pomodoro timer for your terminal. Without a command it loops 25/5 cycles.",
    )
    parser.add_argument("--fast", action="store_true", help="treat one real second as one Pomodoro minute (handy for demos)")
    parser.add_argument("-v", "--verbose", action="store_true", help="log diagnostics to stderr")
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    start = commands.add_parser("start", help="start a Pomodoro work interval")
    start.add_argument("-d", "--duration", type=positive_int, default=scheduler.DEFAULTS["work_minutes"], help="minutes of work")
    start.add_argument("-t", "--task", default=scheduler.DEFAULT_TASK, help="task description")

    brk = commands.add_parser("break", help="start a break")
    brk.add_argument("-d", "--duration", type=positive_int, default=scheduler.DEFAULTS["short_break_minutes"], help="minutes of break")
    brk.add_argument("-l", "--long", action="store_true", help="whether this is a long break")

    plan = commands.add_parser("schedule", help="run a sequence of pomodoros")
    plan.add_argument("-s", "--sessions", type=positive_int, default=scheduler.DEFAULTS["sessions"], help="number of work sessions")
    plan.add_argument("-w", "--work", type=positive_int, default=scheduler.DEFAULTS["work_minutes"], help="minutes per work session")
    plan.add_argument("-b", "--short-break", type=positive_int, default=scheduler.DEFAULTS["short_break_minutes"], help="minutes per short break")
    plan.add_argument("-l", "--long-break", type=positive_int, default=scheduler.DEFAULTS["long_break_minutes"], help="minutes for the final long break")
    plan.add_argument("-t", "--task", default=scheduler.DEFAULT_TASK, help="task description")
    plan.add_argument("--dry-run", action="store_true", help="show the schedule without running timers")

    commands.add_parser("install", help="install the command to your PATH")
    commands.add_parser("tip", help="get a random productivity tip")
    return parser.parse_args(list(argv))


def print_plan(plan: scheduler.Schedule) -> None:
    print("Sessions  :", plan.session_count)
    print("Work      :", plan.work_minutes, "minute(s)")
    print("Short br. :", plan.short_break_minutes, "minute(s)")
    print("Long br.  :", plan.long_break_minutes, "minute(s)")
    print("Task      :", plan.task_label)
    print()
    print("Planned intervals:")
    for item in plan:
        print(f"- {item.title}: {item.minutes} minute(s)")
    print(f"Total: {plan.total_seconds // 60} minute(s)")


def run(args: argparse.Namespace) -> None:
    tick = FAST_TICK_SECONDS if args.fast else 1.0

    if args.command == "start":
        session.run_work_session(args.duration, args.task, tick_seconds=tick)
    elif args.command == "break":
        session.run_break(args.duration, long=args.long, tick_seconds=tick)
    elif args.command == "schedule":
        plan = scheduler.build_schedule(
            sessions=args.sessions,
            work_minutes=args.work,
            short_break_minutes=args.short_break,
            long_break_minutes=args.long_break,
            task=args.task,
        )
        if args.dry_run:
            print_plan(plan)
            return
        session.run_schedule(plan, tick_seconds=tick)
    elif args.command == "install":
        installer.install_to_path()
    elif args.command == "tip":
        print(messages.tip_of_the_day())
    else:
        session.run_default_loop(tick_seconds=tick)


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        run(args)
    except KeyboardInterrupt:
        # Abrupt by intent: the interrupted interval is neither logged nor announced.
        print()
        return 0

    notifier.wait_for_alerts()
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
