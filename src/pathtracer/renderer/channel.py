# renderer/channel.py
import threading
from collections import deque


class ChannelClosed(Exception):
    """Raised by recv() on a closed, drained channel and by send() on a closed channel."""


class Channel:
    """
    FIFO message channel shared between threads.

    Closing the channel is the only termination signal: receivers keep
    getting queued items after close() and see ChannelClosed once it is
    drained. Iterating over a channel yields items until that point.
    A maxsize of 0 means unbounded; otherwise send() blocks while full.
    """
    def __init__(self, maxsize: int = 0):
        self.maxsize = maxsize
        self._items = deque()
        self._closed = False
        self._lock = threading.Lock()
        self._not_empty = threading.Condition(self._lock)
        self._not_full = threading.Condition(self._lock)

    def send(self, item):
        with self._not_full:
            while not self._closed and self.maxsize > 0 and len(self._items) >= self.maxsize:
                self._not_full.wait()
            if self._closed:
                raise ChannelClosed("send on closed channel")
            self._items.append(item)
            self._not_empty.notify()

    def recv(self):
        """Next item, blocking while the channel is empty and open."""
        with self._not_empty:
            while not self._items:
                if self._closed:
                    raise ChannelClosed("channel closed")
                self._not_empty.wait()
            item = self._items.popleft()
            self._not_full.notify()
            return item

    def close(self):
        """Idempotent. Wakes every blocked sender and receiver."""
        with self._lock:
            self._closed = True
            self._not_empty.notify_all()
            self._not_full.notify_all()

    @property
    def closed(self) -> bool:
        return self._closed

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __iter__(self):
        while True:
            try:
                yield self.recv()
            except ChannelClosed:
                return
