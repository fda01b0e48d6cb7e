"""External step processor used by OuterService."""

import logging

logger = logging.getLogger(__name__)


class ExternalService:
    """Opaque integer transform supplied to OuterService.

    The default implementation returns its input unchanged; tests configure a
    substitute to return a fixed value instead.
    """

    def process_step(self, value: int) -> int:
        logger.debug(f"process_step({value})")
        return value
