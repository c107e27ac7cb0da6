"""Commands for the xfel tool that talks to Allwinner chips in FEL mode."""

from __future__ import annotations

import functools
import logging
import os
import subprocess
from dataclasses import dataclass

logger = logging.getLogger(__name__)

XFEL = "xfel"


class XfelError(RuntimeError):
    """xfel could not be used."""


class XfelNotFoundError(XfelError, FileNotFoundError):
    """xfel is not installed or not on the search path."""


def parse_version(output: bytes) -> str:
    """Return the text between the first '(' and the following ')' of xfel's banner."""
    _, found, rest = output.partition(b"(")
    if not found:
        return ""
    return rest.split(b")", 1)[0].decode("utf-8")


def detect_xfel() -> str:
    """Check that xfel can be started and return the program name to run."""
    try:
        result = subprocess.run([XFEL], capture_output=True, check=False)
    except FileNotFoundError as err:
        logger.error("xfel not found")
        raise XfelNotFoundError("xfel not found") from err
    if result.returncode != 0:
        raise XfelError(f"xfel exited with status {result.returncode}")
    logger.info("detected xfel of version %r", parse_version(result.stdout or b""))
    return XFEL


@functools.lru_cache(maxsize=None)
def _detected_program() -> str:
    return detect_xfel()


def _hex(value: int) -> str:
    return f"{value:#x}"


@dataclass(frozen=True)
class Xfel:
    """One xfel invocation; ``program`` defaults to the detected xfel."""

    args: tuple[str, ...]
    program: str | None = None

    @classmethod
    def _new(cls, *args: str | os.PathLike) -> Xfel:
        return cls(tuple(os.fspath(arg) for arg in args))

    @classmethod
    def write(cls, address: int, file: str | os.PathLike) -> Xfel:
        return cls._new("write", _hex(address), file)

    @classmethod
    def exec(cls, address: int) -> Xfel:
        return cls._new("exec", _hex(address))

    @classmethod
    def ddr(cls, ty: str) -> Xfel:
        return cls._new("ddr", ty)

    @classmethod
    def reset(cls) -> Xfel:
        return cls._new("reset")

    @classmethod
    def spinand_read(cls, address: int, length: int, file: str | os.PathLike) -> Xfel:
        return cls._new("spinand", "read", _hex(address), _hex(length), file)

    @classmethod
    def spinand_write(cls, address: int, file: str | os.PathLike) -> Xfel:
        return cls._new("spinand", "write", _hex(address), file)

    @property
    def argv(self) -> list[str]:
        return [self.program or _detected_program(), *self.args]

    def run(self) -> subprocess.CompletedProcess:
        """Run the command, raising CalledProcessError if it fails."""
        return subprocess.run(self.argv, check=True)