import logging
import queue
from typing import Callable, Iterator, Optional

from linecalc.config import LINE_BUFFER_SIZE

logger = logging.getLogger(__name__)

_CLOSED = object()

LINE_TERMINATORS = frozenset("\r\n")


class LineQueue:
    """Bounded FIFO of complete lines. Never blocks the producer, new lines are dropped when full"""

    def __init__(self, maxsize: int = 10) -> None:
        self._queue: queue.Queue = queue.Queue(maxsize=maxsize)
        self.dropped = 0

    def put(self, line: str) -> bool:
        try:
            self._queue.put_nowait(line)
        except queue.Full:
            self.dropped += 1
            logger.warning("Line queue is full, dropping %r", line)
            return False
        return True

    def get(self, timeout: Optional[float] = None) -> Optional[str]:
        """Next line, or None once the queue is closed"""
        item = self._queue.get(timeout=timeout)
        if item is _CLOSED:
            # keep the marker for other consumers
            self._queue.put(_CLOSED)
            return None
        return item

    def close(self) -> None:
        # blocking put, the close marker must not be dropped
        self._queue.put(_CLOSED)

    def qsize(self) -> int:
        return self._queue.qsize()

    def __iter__(self) -> Iterator[str]:
        while (line := self.get()) is not None:
            yield line


class LineAssembler:
    def __init__(self, lines: LineQueue, buffer_size: int = LINE_BUFFER_SIZE) -> None:
        self.lines = lines
        self.max_chars = buffer_size - 1
        self._buffer: list[str] = []

    def feed(self, chars: str) -> None:
        for c in chars:
            if c in LINE_TERMINATORS:
                if self._buffer:
                    self.lines.put("".join(self._buffer))
                    self._buffer.clear()
            elif len(self._buffer) < self.max_chars:
                self._buffer.append(c)
            # else: characters beyond buffer size are dropped

    @property
    def pending(self) -> str:
        return "".join(self._buffer)


class CharacterSink:
    def __init__(self, write: Callable[[str], object]) -> None:
        self.write = write

    def __call__(self, text: str) -> None:
        for c in text:
            self.write(c)
