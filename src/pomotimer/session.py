"""Drive work sessions, breaks and full schedules through the countdown."""
from __future__ import annotations

from . import messages, notifier, prompts, scheduler, tasklog, timer

DEFAULT_LOOP_TASK = "Focused work"


def break_emojis(kind: scheduler.IntervalKind):
    return messages.LONG_BREAK if kind is scheduler.IntervalKind.LONG_BREAK else messages.SHORT_BREAK


def run_interval(interval: scheduler.Interval, *, tick_seconds: float = 1.0) -> None:
    """Count ``interval`` down, then log and announce its completion.

    Nothing after the countdown runs when it is interrupted.
    """
    if interval.is_break:
        print(f"\n{messages.random_from(break_emojis(interval.kind))} Starting {interval.minutes} minute "
              f"{interval.title.lower()}. {interval.label}!")

    timer.countdown(interval.duration_seconds, interval.title, interval.label, tick_seconds=tick_seconds)

    if interval.kind is scheduler.IntervalKind.WORK:
        tasklog.log_completed_task(interval.label)
        notifier.notify(
            "Pomodoro completed!",
            f"{messages.random_from(messages.SUCCESS)} You completed a {interval.minutes} minute "
            f"pomodoro for: {interval.label}",
        )
    else:
        notifier.notify(
            "Break ended!",
            f"{messages.random_from(messages.SUCCESS)} Your {interval.minutes} minute break has ended",
        )


def run_work_session(minutes: int, task: str, *, tick_seconds: float = 1.0) -> None:
    run_interval(scheduler.work_interval(minutes, task), tick_seconds=tick_seconds)


def run_break(minutes: int, *, long: bool = False, tick_seconds: float = 1.0) -> None:
    run_interval(scheduler.break_interval(minutes, long=long), tick_seconds=tick_seconds)


def run_schedule(schedule: scheduler.Schedule, *, tick_seconds: float = 1.0) -> None:
    print(
        f"{messages.random_from(messages.WORK)} Scheduling {schedule.session_count} work sessions "
        f"({schedule.work_minutes} min) with short breaks ({schedule.short_break_minutes} min) "
        f"and a long break ({schedule.long_break_minutes} min)"
    )

    session = 0
    for interval in schedule:
        if interval.kind is scheduler.IntervalKind.WORK:
            session += 1
            print(f"\n{messages.random_from(messages.WORK)} 🔄 === Session {session}/{schedule.session_count} === 🔄")
        elif interval.kind is scheduler.IntervalKind.LONG_BREAK:
            print(f"\n{messages.random_from(messages.SUCCESS)} All sessions completed! Time for a well-deserved long break!")

        run_interval(interval, tick_seconds=tick_seconds)

    print(f"\n{messages.random_from(messages.SUCCESS)} Great job completing all {schedule.session_count} Pomodoros!")


def run_default_loop(
    *,
    work_minutes: int = scheduler.DEFAULTS["work_minutes"],
    break_minutes: int = scheduler.DEFAULTS["short_break_minutes"],
    tick_seconds: float = 1.0,
) -> int:
    """Repeat work + short break pairs until the operator stops; return the cycle count."""
    print(f"{messages.random_from(messages.WORK)} Starting default Pomodoro cycle "
          f"({work_minutes}min work, {break_minutes}min break)\n")
    print("Press Ctrl+C at any time to exit.")

    cycles = 0
    while True:
        task = prompts.ask_text("What are you working on? (optional)") or DEFAULT_LOOP_TASK
        run_work_session(work_minutes, task, tick_seconds=tick_seconds)
        run_break(break_minutes, tick_seconds=tick_seconds)
        cycles += 1

        if not prompts.confirm("Start another Pomodoro cycle?"):
            print(f"\n{messages.random_from(messages.TOMATO)} Thanks for using pomotimer! "
                  f"Have a productive day! {messages.random_from(messages.SUCCESS)}\n")
            return cycles
