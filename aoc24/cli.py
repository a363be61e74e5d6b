"""Command line entry point for managing and running solutions."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass

from aoc24 import commands
from aoc24.day import Day

_UNSIGNED = re.compile(r"\+?[0-9]+")


class _ArgumentError(ValueError):
    pass


@dataclass(frozen=True)
class _Arguments:
    command: str
    day: Day | None = None
    release: bool = False
    dhat: bool = False
    submit: int | None = None
    all: bool = False
    store: bool = False
    download: bool = False


class _ArgList:
    def __init__(self, args: list[str]) -> None:
        self.args = list(args)

    def subcommand(self) -> str | None:
        if not self.args or self.args[0].startswith("-"):
            return None
        return self.args.pop(0)

    def contains(self, flag: str) -> bool:
        if flag in self.args:
            self.args.remove(flag)
            return True
        return False

    def free_day(self) -> Day:
        if not self.args:
            raise _ArgumentError("the required free argument is missing")
        return Day.parse(self.args.pop(0))

    def opt_free_day(self) -> Day | None:
        return self.free_day() if self.args else None

    def opt_value(self, key: str) -> str | None:
        for i, arg in enumerate(self.args):
            if arg == key:
                if i + 1 >= len(self.args):
                    raise _ArgumentError(f"the '{key}' option doesn't have an associated value")
                value = self.args[i + 1]
                del self.args[i : i + 2]
                return value
            if arg.startswith(key + "="):
                del self.args[i]
                return arg[len(key) + 1 :]
        return None


def _parse_part(text: str | None, key: str) -> int | None:
    if text is None:
        return None
    if not _UNSIGNED.fullmatch(text) or int(text) > 255:
        raise _ArgumentError(f"failed to parse '{text}' for '{key}'")
    return int(text)


def parse_args(argv: list[str]) -> _Arguments:
    """Parse the subcommand and its options; exit on an unknown command."""
    args = _ArgList(argv)
    command = args.subcommand()

    if command == "all":
        parsed = _Arguments("all", release=args.contains("--release"))
    elif command == "time":
        run_all = args.contains("--all")
        store = args.contains("--store")
        parsed = _Arguments("time", day=args.opt_free_day(), all=run_all, store=store)
    elif command in ("download", "read"):
        parsed = _Arguments(command, day=args.free_day())
    elif command == "solve":
        day = args.free_day()
        release = args.contains("--release")
        submit = _parse_part(args.opt_value("--submit"), "--submit")
        dhat = args.contains("--dhat")
        parsed = _Arguments("solve", day=day, release=release, dhat=dhat, submit=submit)
    elif command is None:
        print("No command specified.", file=sys.stderr)
        raise SystemExit(1)
    else:
        print(f"Unknown command: {command}", file=sys.stderr)
        raise SystemExit(1)

    if args.args:
        print(f"Warning: unknown argument(s): {args.args}.", file=sys.stderr)
    return parsed


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else list(argv)
    try:
        args = parse_args(argv)
    except ValueError as err:
        print(f"Error: {err}", file=sys.stderr)
        raise SystemExit(1) from None

    if args.command == "all":
        commands.handle_all(args.release)
    elif args.command == "time":
        commands.handle_time(args.day, args.all, args.store)
    elif args.command == "download":
        commands.handle_download(args.day)
    elif args.command == "read":
        commands.handle_read(args.day)
    elif args.command == "solve":
        commands.handle_solve(args.day, args.release, args.dhat, args.submit)


if __name__ == "__main__":
    main()