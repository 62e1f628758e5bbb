"""External command execution with live output and full capture."""

from __future__ import annotations

import asyncio
import codecs
import shlex
import subprocess
import sys
from typing import Literal, TextIO

from wpddev.core.log import logger
from wpddev.core.platform import OSType
from wpddev.core.result import CommandResult

ShellMode = Literal["auto", "always", "never"]

_CHUNK_SIZE = 4096


class CommandRunner:
    """Runs one program at a time and waits for it to finish.

    Output is pumped from both pipes concurrently. Each chunk is kept
    in a buffer and, unless the call is silent, echoed to this
    process's own stdout/stderr as it arrives so long steps show live
    progress. stdin is inherited, which lets interactive programs ask
    the user directly.

    Shell use is explicit: 'always', 'never', or 'auto' (only when the
    target OS is Windows, where executable resolution for .cmd/.bat
    shims needs cmd.exe).
    """

    def __init__(
        self,
        shell: ShellMode = "auto",
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ):
        self.shell = shell
        self._stdout = stdout
        self._stderr = stderr

    def uses_shell(self, os_type: OSType) -> bool:
        if self.shell == "always":
            return True
        if self.shell == "never":
            return False
        return os_type == OSType.WINDOWS

    @staticmethod
    def command_line(
        program: str, args: list[str] | tuple[str, ...], os_type: OSType
    ) -> str:
        """Quote program and args for the shell of the target OS."""
        argv = [program, *args]
        if os_type == OSType.WINDOWS:
            return subprocess.list2cmdline(argv)
        return shlex.join(argv)

    async def run(
        self,
        program: str,
        args: list[str] | tuple[str, ...],
        os_type: OSType,
        silent: bool = False,
    ) -> CommandResult:
        """Run program with args and wait for it to exit.

        Args:
            program: Executable name or path
            args: Arguments, passed through unchanged
            os_type: Target OS, decides shell use in 'auto' mode
            silent: Capture only; do not echo output

        Returns:
            CommandResult; spawn failures are reported in the result
            (exit_code None), never raised.
        """
        shell = self.uses_shell(os_type)
        logger.debug(
            "Running command",
            program=program,
            args=list(args),
            shell=shell,
            silent=silent,
        )

        try:
            if shell:
                process = await asyncio.create_subprocess_shell(
                    self.command_line(program, args, os_type),
                    stdout=asyncio.subprocess.PIPE,
                    stderr=asyncio.subprocess.PIPE,
                )
            else:
                process = await asyncio.create_subprocess_exec(
                    program,
                    *args,
                    stdout=asyncio.subprocess.PIPE,
                    stderr=asyncio.subprocess.PIPE,
                )
        except OSError as e:
            logger.debug(f"Could not start {program}: {e}")
            return CommandResult.spawn_failure(str(e))

        output: list[str] = []
        error: list[str] = []
        await asyncio.gather(
            self._pump(
                process.stdout, output,
                None if silent else (self._stdout or sys.stdout),
            ),
            self._pump(
                process.stderr, error,
                None if silent else (self._stderr or sys.stderr),
            ),
        )
        exit_code = await process.wait()

        logger.debug(
            f"{program} exited with {exit_code}", exit_code=exit_code
        )
        return CommandResult.from_exit(
            exit_code, "".join(output), "".join(error)
        )

    async def spawn_detached(self, command_line: str) -> None:
        """Start a shell command in the background and return at once.

        The child is not tracked by the event loop, so it keeps running
        after this call and after the loop closes.

        Raises:
            OSError: If the shell could not be started
        """
        logger.debug("Starting background command", command=command_line)
        subprocess.Popen(  # noqa: S602
            command_line,
            shell=True,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )

    @staticmethod
    async def _pump(
        stream: asyncio.StreamReader | None,
        buffer: list[str],
        echo: TextIO | None,
    ) -> None:
        if stream is None:
            return
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        while True:
            chunk = await stream.read(_CHUNK_SIZE)
            text = decoder.decode(chunk, final=not chunk)
            if text:
                buffer.append(text)
                if echo is not None:
                    echo.write(text)
                    echo.flush()
            if not chunk:
                return
