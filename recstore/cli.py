#!/usr/bin/env python3
"""Command-line task list backed by an in-memory RecordStore.

Reads one command per line from stdin until ``quit`` or EOF::

    recstore --name Work --seed tasks.json
    > add Learn TS
    added 1
    > done 1
    > list all
"""
from __future__ import annotations

import argparse
import shlex
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional, TextIO

from recstore.common.logging import get_logger, setup_logging
from recstore.config import StoreConfig, get_store_config
from recstore.store import (
    InvalidLabelError,
    ListFilter,
    Record,
    RecordStore,
    SeedFormatError,
    load_seed,
)

logger = get_logger("recstore.cli")

HELP_TEXT = """\
list [all|incomplete]   show records
add <label>             add a record with a generated id
add-id <id> <label>     add (or overwrite) the record with this id
show <id>               show one record
done <id>               mark a record done
rm <id>                 remove a record
purge                   remove every done record
count                   show total and incomplete counts
toggle-view             switch the default list between incomplete and all
help                    show this text
quit                    leave"""


class CommandError(Exception):
    """A command line that could not be carried out."""


def format_record(record: Record) -> str:
    line = f"{record.id}\t{record.label}"
    return f"{line}\t(done)" if record.done else line


def _parse_id(token: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise CommandError(f"not an id: {token!r}") from None


class TaskListShell:
    """Line-oriented front end over a single store."""

    def __init__(self, store: RecordStore, out: TextIO, view: ListFilter = ListFilter.INCOMPLETE):
        self.store = store
        self.out = out
        self.view = view
        self._commands: Dict[str, Callable[[List[str]], Optional[bool]]] = {
            "list": self.do_list,
            "add": self.do_add,
            "add-id": self.do_add_id,
            "show": self.do_show,
            "done": self.do_done,
            "rm": self.do_rm,
            "purge": self.do_purge,
            "count": self.do_count,
            "toggle-view": self.do_toggle_view,
            "help": self.do_help,
            "quit": self.do_quit,
        }

    def emit(self, text: str) -> None:
        print(text, file=self.out)

    def execute(self, line: str) -> bool:
        """Run one command line. Returns False when the shell should stop."""
        try:
            tokens = shlex.split(line)
        except ValueError as e:
            self._error(str(e))
            return True
        if not tokens:
            return True
        name, args = tokens[0].lower(), tokens[1:]
        handler = self._commands.get(name)
        if handler is None:
            self._error(f"unknown command: {name} (try 'help')")
            return True
        try:
            return handler(args) is not False
        except (CommandError, InvalidLabelError) as e:
            self._error(str(e))
            return True

    def run(self, lines) -> None:
        for line in lines:
            if not self.execute(line):
                break

    def _error(self, message: str) -> None:
        logger.warning("command_failed", extra={"reason": message})
        self.emit(f"error: {message}")

    def do_list(self, args: List[str]) -> None:
        if len(args) > 1:
            raise CommandError("usage: list [all|incomplete]")
        try:
            view = ListFilter(args[0].lower()) if args else self.view
        except ValueError:
            raise CommandError(f"unknown filter: {args[0]!r}") from None
        self.emit(f"{self.store.name} ({self.store.count().incomplete} items to do)")
        for record in self.store.list(view):
            self.emit(format_record(record))

    def do_add(self, args: List[str]) -> None:
        record_id = self.store.add(" ".join(args))
        self.emit(f"added {record_id}")

    def do_add_id(self, args: List[str]) -> None:
        if not args:
            raise CommandError("usage: add-id <id> <label>")
        record_id = self.store.add(" ".join(args[1:]), _parse_id(args[0]))
        self.emit(f"added {record_id}")

    def do_show(self, args: List[str]) -> None:
        record_id = self._single_id(args, "show")
        record = self.store.get_by_id(record_id)
        self.emit(format_record(record) if record else f"no record {record_id}")

    def do_done(self, args: List[str]) -> None:
        self.store.complete(self._single_id(args, "done"))

    def do_rm(self, args: List[str]) -> None:
        self.store.remove_by_id(self._single_id(args, "rm"))

    def do_purge(self, args: List[str]) -> None:
        self.store.remove_completed()

    def do_count(self, args: List[str]) -> None:
        counts = self.store.count()
        self.emit(f"total={counts.total} incomplete={counts.incomplete}")

    def do_toggle_view(self, args: List[str]) -> None:
        self.view = ListFilter.ALL if self.view is ListFilter.INCOMPLETE else ListFilter.INCOMPLETE
        self.emit(f"showing {self.view.value}")

    def do_help(self, args: List[str]) -> None:
        self.emit(HELP_TEXT)

    def do_quit(self, args: List[str]) -> bool:
        return False

    def _single_id(self, args: List[str], command: str) -> int:
        if len(args) != 1:
            raise CommandError(f"usage: {command} <id>")
        return _parse_id(args[0])


def build_store(config: StoreConfig, name: Optional[str] = None, seed_path: Optional[Path] = None) -> RecordStore:
    """Create a store, pre-populated from the seed file when one is given."""
    seed_path = seed_path or (Path(config.seed_path) if config.seed_path else None)
    records = []
    if seed_path is not None:
        seed = load_seed(seed_path)
        records = seed.records
        name = name or seed.name
    return RecordStore.from_config(name=name, records=records, config=config)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="In-memory task list")
    parser.add_argument("--name", help="Name shown above the list")
    parser.add_argument("--seed", type=Path, help="JSON file with initial records")
    parser.add_argument(
        "--show-all",
        action="store_true",
        help="List done records too unless a filter is given",
    )
    parser.add_argument("--log-level", help="Logging level (default from RECSTORE_LOG_LEVEL)")
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> int:
    args = parse_args(argv)
    config = get_store_config()
    log_level = (args.log_level or config.log_level).upper()
    errors = StoreConfig(**{**config.to_dict(), "log_level": log_level}).validate()
    if errors:
        print(f"error: {'; '.join(errors)}", file=sys.stderr)
        return 2
    setup_logging(
        level=log_level,
        json_format=args.json_logs or config.json_logs,
    )
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    try:
        store = build_store(config, name=args.name, seed_path=args.seed)
    except SeedFormatError as e:
        logger.error("seed_unreadable", extra={"error": str(e)})
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.show_all:
        view = ListFilter.ALL
    else:
        view = ListFilter(config.default_filter)
    shell = TaskListShell(store, stdout, view=view)
    shell.run(stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())
