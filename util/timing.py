# util/timing.py
import time
from contextlib import contextmanager
from typing import Any, Iterator
import logging


@contextmanager
def timed(
    logger: logging.Logger, name: str, level: int = logging.INFO, **kv: Any
) -> Iterator[None]:
    """
    Usage:
      with timed(logger, "storage.write", name="projects.json"):
          ...
    Emits one record on exit: "<name>.done ms=<int> key=val ..."
    (or "<name>.failed ..." at WARNING when the block raised).
    """
    t0 = time.perf_counter()
    ok = False
    try:
        yield
        ok = True
    finally:
        dt_ms = int((time.perf_counter() - t0) * 1000)
        suffix = "".join(f" {k}={v}" for k, v in kv.items())
        if ok:
            logger.log(level, "%s.done ms=%d%s", name, dt_ms, suffix)
        else:
            logger.warning("%s.failed ms=%d%s", name, dt_ms, suffix)
