from unittest import mock

import pytest

from dcafkit import debug
from dcafkit.debug import LogLevel


@pytest.fixture(autouse=True)
def _restore_logging():
    level = debug.get_log_level()
    yield
    debug.set_log_level(level)
    debug.set_log_handler(None)


class _RecordingProcess:
    """Stands in for a child process and keeps what was written to it."""

    instances = []

    def __init__(self, args, **kwargs):
        self.args = args
        self.received = None
        _RecordingProcess.instances.append(self)

    def communicate(self, data=None, *args, **kwargs):
        self.received = data
        return (None, None)

    def wait(self, *args, **kwargs):
        return 0

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


@pytest.fixture
def recording_popen():
    _RecordingProcess.instances = []
    with mock.patch("dcafkit.debug.subprocess.Popen", _RecordingProcess):
        yield _RecordingProcess.instances


def test_default_level_is_warning():
    assert debug.get_log_level() == LogLevel.WARNING


def test_set_and_get_level():
    debug.set_log_level(LogLevel.DEBUG)
    assert debug.get_log_level() is LogLevel.DEBUG
    debug.set_log_level(3)
    assert debug.get_log_level() is LogLevel.ERR


def test_invalid_level_rejected():
    with pytest.raises(ValueError):
        debug.set_log_level(42)


def test_level_ordering():
    levels = sorted(LogLevel(n) for n in (7, 0, 4, 2))
    assert levels == [
        LogLevel.EMERG, LogLevel.CRIT, LogLevel.WARNING, LogLevel.DEBUG,
    ]


def test_handler_receives_messages():
    received = []
    debug.set_log_handler(lambda lvl, msg: received.append((lvl, msg)))
    debug.log(LogLevel.ERR, "boom\n")
    assert received == [(LogLevel.ERR, "boom\n")]


def test_handler_filters_verbose_messages():
    received = []
    debug.set_log_handler(lambda lvl, msg: received.append(msg))
    debug.log(LogLevel.INFO, "hidden")
    debug.set_log_level(LogLevel.INFO)
    debug.log(LogLevel.INFO, "shown")
    assert received == ["shown"]


def test_handler_message_truncated():
    received = []
    debug.set_log_handler(lambda lvl, msg: received.append(msg))
    debug.log(LogLevel.ERR, "x" * 500)
    assert received[0] == "x" * 127


def test_console_crit_goes_to_stderr(capsys):
    debug.log(LogLevel.CRIT, "bad\n")
    captured = capsys.readouterr()
    assert captured.err == "CRIT bad\n"
    assert captured.out == ""


def test_console_warning_goes_to_stdout(capsys):
    debug.log(LogLevel.WARNING, "careful\n")
    captured = capsys.readouterr()
    assert captured.out == "WARN careful\n"
    assert captured.err == ""


def test_console_suppressed_above_level(capsys):
    debug.log(LogLevel.DEBUG, "noise\n")
    assert capsys.readouterr().out == ""


def test_labels():
    assert [LogLevel(n).label for n in range(8)] == [
        "EMRG", "ALRT", "CRIT", "ERR", "WARN", "NOTE", "INFO", "DEBG",
    ]


def test_hexdump_layout(capsys):
    debug.set_log_level(LogLevel.DEBUG)
    debug.hexdump(bytes(range(9)))
    assert capsys.readouterr().out == "00 01 02 03 04 05 06 07\n08 \n"


def test_hexdump_silent_below_debug(capsys):
    debug.hexdump(b"\x01\x02")
    assert capsys.readouterr().out == ""


def test_show_cbor_pipes_data(recording_popen, capsys):
    with mock.patch("dcafkit.debug.os.geteuid", return_value=1000, create=True):
        debug.show_cbor(b"\xa1\x01\x02")
    assert len(recording_popen) == 1
    assert recording_popen[0].args == [debug.CBOR2PRETTY]
    assert recording_popen[0].received == b"\xa1\x01\x02"
    assert capsys.readouterr().out == ""


def test_show_cbor_skipped_for_root(recording_popen, capsys):
    with mock.patch("dcafkit.debug.os.geteuid", return_value=0, create=True):
        debug.show_cbor(b"\x00")
    assert recording_popen == []
    assert capsys.readouterr().out == ""


def test_show_cbor_missing_program(capsys):
    with mock.patch("dcafkit.debug.os.geteuid", return_value=1000, create=True), \
            mock.patch("dcafkit.debug.subprocess.Popen",
                       side_effect=FileNotFoundError):
        debug.show_cbor(b"\x00")
    assert capsys.readouterr().out == ""


def test_show_cbor_write_error(capsys):
    with mock.patch("dcafkit.debug.os.geteuid", return_value=1000, create=True), \
            mock.patch("dcafkit.debug.subprocess.Popen") as popen:
        popen.return_value.communicate.side_effect = BrokenPipeError
        debug.show_cbor(b"\x00")
    assert "error when writing to" in capsys.readouterr().out