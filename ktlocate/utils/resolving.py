import threading
from ..cli_logger import logger


def try_resolving(what, resolver):
    """Run ``resolver`` and return its result, or None if it fails.

    Any exception raised by the resolver is logged together with ``what`` and
    swallowed, so callers can simply move on to their next option.
    """
    try:
        resolved = resolver()
    except Exception as e:
        logger.warning(f"Could not resolve {what}: {type(e).__name__}: {e}")
        return None

    if resolved is not None:
        logger.info(f"Successfully resolved {what}")
    else:
        logger.info(f"Could not resolve {what} as it is null")
    return resolved


class OnceCell:
    """A value computed at most once and then shared by every caller.

    The first successful ``get`` stores the factory's result under a lock;
    later calls return it without running the factory again. A factory that
    raises leaves the cell empty, so the next ``get`` retries.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._initialized = False
        self._value = None

    def get(self, factory):
        if self._initialized:
            return self._value
        with self._lock:
            if not self._initialized:
                self._value = factory()
                self._initialized = True
        return self._value

    @property
    def initialized(self):
        return self._initialized
