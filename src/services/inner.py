"""Inner collaborator whose only effect is a diagnostic print."""

import logging

logger = logging.getLogger(__name__)


class InnerService:
    """Collaborator meant to be replaced in tests."""

    def inner_processing(self, a: str, b: str) -> None:
        """Print a diagnostic line for the received values.

        Tests substitute this method, so seeing the line means the real
        implementation ran.
        """
        logger.debug(f"inner_processing called with {a!r}, {b!r}")
        print(f"You should not see this line! innerProcessing {a} {b}")
