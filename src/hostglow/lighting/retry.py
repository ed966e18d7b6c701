"""Start-up connection retry.

The policy is a fixed interval with no attempt limit: the monitor keeps
trying until the lighting service appears or the process is stopped.
It only applies before the main loop starts; a connection lost later is
not retried.
"""

import logging
import time
from collections.abc import Callable

from hostglow.exceptions import LightingConnectionError

from .protocols import Connector, LightingConnection

logger = logging.getLogger(__name__)


def connect_with_retry(
    connect: Connector,
    interval: float,
    sleep: Callable[[float], None] = time.sleep,
) -> LightingConnection:
    """
    Call ``connect`` until it succeeds.

    Args:
        connect: Opens a connection, raising LightingConnectionError on failure
        interval: Seconds to wait between attempts
        sleep: Blocking wait between attempts

    Returns:
        The first connection that opened successfully

    Other exceptions from ``connect`` propagate immediately.
    """
    attempt = 0
    while True:
        attempt += 1
        try:
            return connect()
        except LightingConnectionError as e:
            logger.warning(
                f"Connection attempt {attempt} failed: {e.technical_message}; "
                f"retrying in {interval:g}s"
            )
            sleep(interval)
