import dataclasses
import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from sbiproto.xfel import (
    Xfel,
    XfelError,
    XfelNotFoundError,
    detect_xfel,
    parse_version,
)


def test_write_arguments():
    cmd = Xfel.write(0x40000000, "boot.bin")
    assert cmd.args == ("write", "0x40000000", "boot.bin")


def test_exec_address_round_trips():
    cmd = Xfel.exec(0x40000000)
    assert cmd.args[0] == "exec"
    assert int(cmd.args[1], 16) == 0x40000000
    assert cmd.args[1].startswith("0x")


def test_ddr_and_reset():
    assert Xfel.ddr("d1").args == ("ddr", "d1")
    assert Xfel.reset().args == ("reset",)


def test_spinand_read_accepts_path():
    cmd = Xfel.spinand_read(0, 0x100, Path("out.bin"))
    assert cmd.args[:2] == ("spinand", "read")
    assert int(cmd.args[2], 16) == 0
    assert int(cmd.args[3], 16) == 0x100
    assert cmd.args[4] == "out.bin"


def test_spinand_write():
    cmd = Xfel.spinand_write(0x20, "img.bin")
    assert cmd.args[:2] == ("spinand", "write")
    assert int(cmd.args[2], 16) == 0x20
    assert cmd.args[3] == "img.bin"


def test_parse_version_between_parentheses():
    assert parse_version(b"xfel(v1.3.2) - usage") == "v1.3.2"


def test_parse_version_without_parenthesis():
    assert parse_version(b"no banner here") == ""


def test_parse_version_unclosed():
    assert parse_version(b"xfel(abc") == "abc"


def test_detect_xfel_success():
    done = subprocess.CompletedProcess(["xfel"], 0, stdout=b"xfel(v1.3.2)", stderr=b"")
    with patch("sbiproto.xfel.subprocess.run", return_value=done) as run:
        assert detect_xfel() == "xfel"
    assert run.call_args.args[0] == ["xfel"]


def test_detect_xfel_not_found():
    with patch("sbiproto.xfel.subprocess.run", side_effect=FileNotFoundError("xfel")):
        with pytest.raises(XfelNotFoundError):
            detect_xfel()


def test_detect_xfel_failure_status():
    done = subprocess.CompletedProcess(["xfel"], 2, stdout=b"", stderr=b"")
    with patch("sbiproto.xfel.subprocess.run", return_value=done):
        with pytest.raises(XfelError):
            detect_xfel()


def test_run_uses_program_and_checks():
    cmd = dataclasses.replace(Xfel.reset(), program="xfel-test")
    done = subprocess.CompletedProcess(["xfel-test", "reset"], 0)
    with patch("sbiproto.xfel.subprocess.run", return_value=done) as run:
        assert cmd.run() is done
    run.assert_called_once_with(["xfel-test", "reset"], check=True)


def test_run_propagates_failure():
    cmd = dataclasses.replace(Xfel.exec(0x10), program="xfel-test")
    error = subprocess.CalledProcessError(1, cmd.argv)
    with patch("sbiproto.xfel.subprocess.run", side_effect=error):
        with pytest.raises(subprocess.CalledProcessError):
            cmd.run()