from __future__ import annotations

import asyncio
import logging

from probe.errors import ToolError

logger = logging.getLogger(__name__)

_OUTPUT_TAIL = 500  # characters of tool output kept in error messages


async def run_command(
    argv: list[str],
    step: str,
    timeout: float | None = None,
) -> str:
    """Run ``argv`` and return its combined stdout/stderr as text.

    Raises ``ToolError`` when the process cannot be spawned, exits with a
    non-zero status, or outlives ``timeout`` seconds.
    """
    logger.debug("Running %s", " ".join(argv))
    try:
        proc = await asyncio.create_subprocess_exec(
            *argv,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.STDOUT,
        )
    except OSError as exc:
        raise ToolError(step, f"failed to run {argv[0]}: {exc}") from exc

    try:
        raw, _ = await asyncio.wait_for(proc.communicate(), timeout=timeout)
    except asyncio.TimeoutError:
        proc.kill()
        await proc.wait()
        raise ToolError(step, f"{argv[0]} timed out after {timeout}s") from None

    output = raw.decode(errors="replace")
    if proc.returncode != 0:
        tail = output.strip()[-_OUTPUT_TAIL:]
        raise ToolError(
            step,
            f"{' '.join(argv)} exited with status {proc.returncode}: {tail}",
        )
    return output
