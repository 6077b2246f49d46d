import io
import logging

import pytest

from queues.linked_queue import DeleteStatus, QueueClearedError, create_queue
from queues.script import Command, ScriptError, parse_script, run_script


def test_parse_script():
    commands = parse_script("push 1; push -2\n\n# comment\nPOP  # trailing\ndelete 0\nprint\nclear\n")
    assert commands == [
        Command("push", 1, 1),
        Command("push", -2, 1),
        Command("pop", None, 4),
        Command("delete", 0, 5),
        Command("print", None, 6),
        Command("clear", None, 7),
    ]


@pytest.mark.parametrize(
    "text, line",
    [
        ("jump 1", 1),
        ("push", 1),
        ("pop\npush x", 2),
        ("push 1 2", 1),
        ("pop 3", 1),
        ("push 1.5", 1),
    ],
)
def test_parse_script_errors(text, line):
    with pytest.raises(ScriptError) as exc_info:
        parse_script(text)
    assert exc_info.value.line == line


def test_run_end_to_end_scenario():
    out = io.StringIO()
    result = run_script("push 1\npush 2\npush 3\npop\ndelete 0\nprint\n", out=out)
    assert result.popped == [1]
    assert result.deletes == [DeleteStatus.SUCCESS]
    assert out.getvalue() == "3\n"
    assert result.queue.to_list() == [3]


def test_run_records_empty_pop_and_not_found(caplog):
    with caplog.at_level(logging.INFO, logger="queues.script"):
        result = run_script("pop; delete 0; push 5; pop; pop", out=io.StringIO())
    assert result.popped == [None, 5, None]
    assert result.deletes == [DeleteStatus.NOT_FOUND]
    assert "no node at position 0" in caplog.text


def test_run_on_given_queue():
    queue = create_queue()
    queue.push(10)
    result = run_script([Command("push", 20, 1), Command("pop", None, 2)], queue=queue)
    assert result.queue is queue
    assert result.popped == [10]
    assert queue.to_list() == [20]


def test_run_command_after_clear_raises():
    with pytest.raises(QueueClearedError):
        run_script("push 1\nclear\npush 2")


def test_run_rejects_unknown_parsed_command():
    with pytest.raises(ScriptError) as exc_info:
        run_script([Command("push", 1, 1), Command("jump", None, 2)])
    assert exc_info.value.line == 2
