import errno

from pipeforge.errors import PipexError


def test_keeps_message_and_status():
    error = PipexError("Incorrect format", 1)
    assert error.message == "Incorrect format"
    assert error.status == 1
    assert str(error) == "Incorrect format"


def test_status_defaults_to_one():
    assert PipexError("pipe").status == 1


def test_str_appends_cause_text():
    error = PipexError("command not found", 127)
    error.__cause__ = FileNotFoundError(errno.ENOENT, "No such file or directory")
    assert str(error) == "command not found: No such file or directory"
    assert error.status == 127


def test_non_os_cause_is_ignored():
    error = PipexError("split failed", 1)
    error.__cause__ = ValueError("other")
    assert str(error) == "split failed"


def test_args_hold_message():
    error = PipexError("fork", 1)
    assert error.args == ("fork",)