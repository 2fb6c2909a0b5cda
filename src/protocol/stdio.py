"""
Standard I/O transport for the tool server.

MCP clients spawn the server as a subprocess and exchange newline-delimited
JSON-RPC messages over stdin/stdout. Logging goes to stderr, so stdout carries
protocol messages only.

Reference: https://modelcontextprotocol.io/specification/2025-06-18/basic/transports
"""

import asyncio
import json
import sys
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Optional, Set, TextIO

from common.logging import get_logger

from .jsonrpc import PARSE_ERROR
from .server import ToolServer, error_reply

logger = get_logger(__name__)


class StdioTransport:
    """
    Line-oriented JSON-RPC over a pair of text streams.

    Each incoming line is handled in its own asyncio task, so a slow tool call
    does not block later requests or the cancellation notice aimed at it.
    """

    def __init__(
        self,
        server: ToolServer,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        self.server = server
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        # Separate workers: a blocked readline must not hold up replies
        self._reader = ThreadPoolExecutor(max_workers=1, thread_name_prefix="stdio-read")
        self._writer = ThreadPoolExecutor(max_workers=1, thread_name_prefix="stdio-write")
        self._tasks: Set[asyncio.Task] = set()

    async def run(self) -> None:
        """Serve until stdin reaches EOF, then wait for pending requests."""
        logger.info(event="stdio_transport_started")
        loop = asyncio.get_running_loop()

        try:
            while True:
                line = await loop.run_in_executor(self._reader, self.stdin.readline)
                if not line:
                    logger.info(event="stdio_eof")
                    break

                line = line.strip()
                if not line:
                    continue

                task = asyncio.create_task(self._handle_line(line))
                self._tasks.add(task)
                task.add_done_callback(self._tasks.discard)

            if self._tasks:
                await asyncio.gather(*self._tasks, return_exceptions=True)
        finally:
            for task in self._tasks:
                task.cancel()
            self._reader.shutdown(wait=False)
            self._writer.shutdown(wait=True)
            logger.info(event="stdio_transport_stopped")

    async def _handle_line(self, line: str) -> None:
        try:
            data = json.loads(line)
        except json.JSONDecodeError as e:
            logger.warning(event="stdio_parse_error", error=str(e))
            await self._write(error_reply(None, PARSE_ERROR, f"Parse error: {e}"))
            return

        reply = await self.server.handle_payload(data)
        if reply is not None:
            await self._write(reply)

    async def _write(self, data: Any) -> None:
        message = json.dumps(data, separators=(",", ":"), ensure_ascii=False)
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(self._writer, self._write_line, message)

    def _write_line(self, message: str) -> None:
        self.stdout.write(message + "\n")
        self.stdout.flush()
