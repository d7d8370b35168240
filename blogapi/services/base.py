"""
Helpers shared by the services.

Services catch their own faults: anything raised by the store that is not
already an ApiError becomes an InternalError carrying the original message.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from blogapi.errors import ApiError, InternalError

logger = logging.getLogger(__name__)


@contextmanager
def store_faults(operation: str) -> Iterator[None]:
    """
    Convert unexpected exceptions inside the block into InternalError.

    Usage:
        with store_faults("Create post"):
            await self.storage.metadata.save(...)
    """
    try:
        yield
    except ApiError:
        raise
    except Exception as e:
        logger.error(f"{operation} failed: {type(e).__name__}: {e}", exc_info=True)
        raise InternalError(str(e)) from e
