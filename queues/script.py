"""
Replay of textual operation scripts against a LinkedQueue.

A script holds one command per line (or several separated by ';'):

    push 1; push 2; push 3
    pop            # -> 1
    delete 0
    print
    clear

Commands are case-insensitive, '#' starts a comment, blank lines are skipped.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TextIO

import regex as re

from queues.linked_queue import DeleteStatus, LinkedQueue, create_queue

logger = logging.getLogger(__name__)

# Arity of every command the runner understands
COMMANDS = {"push": 1, "pop": 0, "delete": 1, "print": 0, "clear": 0}

WORD_PAT = re.compile(r"[+-]?\p{Nd}+|\p{L}+|\S+", re.UNICODE)
INT_PAT = re.compile(r"[+-]?\p{Nd}+", re.UNICODE)


class ScriptError(ValueError):
    """Raised for a script line that cannot be parsed."""

    def __init__(self, line: int, message: str):
        super().__init__(f"line {line}: {message}")
        self.line = line


@dataclass(frozen=True)
class Command:
    op: str
    arg: int | None
    line: int


@dataclass
class ScriptResult:
    """What a replay observed: popped ids (None for an empty pop) and delete statuses."""

    queue: LinkedQueue
    popped: list[int | None] = field(default_factory=list)
    deletes: list[DeleteStatus] = field(default_factory=list)


def _parse_statement(statement: str, line: int) -> Command:
    words = [m.group() for m in WORD_PAT.finditer(statement)]
    op = words[0].lower()
    if op not in COMMANDS:
        raise ScriptError(line, f"unknown command {words[0]!r}")

    args = words[1:]
    if len(args) != COMMANDS[op]:
        raise ScriptError(line, f"{op} takes {COMMANDS[op]} argument(s), got {len(args)}")
    if not args:
        return Command(op, None, line)

    if not INT_PAT.fullmatch(args[0]):
        raise ScriptError(line, f"{op} expects an integer, got {args[0]!r}")
    return Command(op, int(args[0]), line)


def parse_script(text: str) -> list[Command]:
    """Split a script into commands, keeping the line each one came from."""
    commands = []
    for lineno, raw_line in enumerate(text.splitlines(), start=1):
        code = raw_line.split("#", 1)[0]
        for statement in re.split(r"\s*;\s*", code.strip()):
            if statement:
                commands.append(_parse_statement(statement, lineno))
    return commands


def run_script(
    script: str | Iterable[Command], queue: LinkedQueue | None = None, out: TextIO | None = None
) -> ScriptResult:
    """
    Replay a script on `queue` (a fresh one if not given).

    Args:
        script: Script text or already parsed commands
        queue: Queue to run against
        out: Stream for `print` commands, stdout if None

    Returns:
        ScriptResult with the queue and everything the commands returned
    """
    commands = parse_script(script) if isinstance(script, str) else list(script)
    result = ScriptResult(queue if queue is not None else create_queue())
    q = result.queue

    for command in commands:
        logger.debug("line %d: %s %s", command.line, command.op, "" if command.arg is None else command.arg)
        if command.op == "push":
            q.push(command.arg)
        elif command.op == "pop":
            node = q.pop()
            result.popped.append(None if node is None else node.id)
        elif command.op == "delete":
            status = q.delete_node(command.arg)
            if status is DeleteStatus.NOT_FOUND:
                logger.info("line %d: no node at position %d", command.line, command.arg)
            result.deletes.append(status)
        elif command.op == "print":
            q.print_queue(out)
        elif command.op == "clear":
            q.clear()
        else:
            raise ScriptError(command.line, f"unknown command {command.op!r}")

    return result
