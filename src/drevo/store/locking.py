# src/drevo/store/locking.py

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator, Optional


class ReadWriteLock:
    """
    Single-writer / multiple-reader lock guarding the person map.

    * Any number of threads may read at once; a writer waits for readers to drain.
    * Waiting writers block new readers so a steady read load cannot starve them.
    * Both sides are re-entrant for the owning thread, and a thread holding the
      write side may also read. Upgrading a held read to a write is refused.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer: Optional[int] = None
        self._writer_depth = 0
        self._waiting_writers = 0
        self._local = threading.local()

    def _read_depth(self) -> int:
        return getattr(self._local, "read_depth", 0)

    # ------------------------------------------------------------------ #
    # Shared side
    # ------------------------------------------------------------------ #

    def acquire_read(self) -> None:
        me = threading.get_ident()
        depth = self._read_depth()
        with self._cond:
            if self._writer != me and depth == 0:
                while self._writer is not None or self._waiting_writers:
                    self._cond.wait()
            self._readers += 1
        self._local.read_depth = depth + 1

    def release_read(self) -> None:
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()
        self._local.read_depth = self._read_depth() - 1

    # ------------------------------------------------------------------ #
    # Exclusive side
    # ------------------------------------------------------------------ #

    def acquire_write(self) -> None:
        me = threading.get_ident()
        with self._cond:
            if self._writer == me:
                self._writer_depth += 1
                return
            if self._read_depth():
                raise RuntimeError("cannot upgrade a read lock to a write lock")

            self._waiting_writers += 1
            try:
                while self._writer is not None or self._readers:
                    self._cond.wait()
            finally:
                self._waiting_writers -= 1
            self._writer = me
            self._writer_depth = 1

    def release_write(self) -> None:
        with self._cond:
            if self._writer != threading.get_ident():
                raise RuntimeError("write lock released by a thread that does not hold it")
            self._writer_depth -= 1
            if self._writer_depth == 0:
                self._writer = None
                self._cond.notify_all()

    # ------------------------------------------------------------------ #
    # Context managers
    # ------------------------------------------------------------------ #

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()
