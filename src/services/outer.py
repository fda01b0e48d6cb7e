"""Outer service that delegates to injected collaborators."""

import logging
from typing import Optional

from .exceptions import CollaboratorNotSetError
from .external import ExternalService
from .interfaces import InnerProcessor, StepProcessor

logger = logging.getLogger(__name__)

PROCESS_VALUES_RESULT = "abc"
PROCESS_STEP_ARGUMENT = 0


class OuterService:
    """Delegates work to an inner and an external collaborator.

    Both collaborators are injected, either through the constructor or the
    setters. Any object providing the method named by InnerProcessor or
    StepProcessor can stand in for the real service.

    Attributes:
        inner_service: Collaborator called by process_values()
        external_service: Collaborator called by process_step()
    """

    def __init__(
        self,
        inner_service: Optional[InnerProcessor] = None,
        external_service: Optional[StepProcessor] = None,
    ):
        self.inner_service = inner_service
        self.external_service = external_service if external_service is not None else ExternalService()

    def set_inner_service(self, inner_service: InnerProcessor) -> None:
        self.inner_service = inner_service

    def set_external_service(self, external_service: StepProcessor) -> None:
        self.external_service = external_service

    def process_values(self, a: str, b: str) -> str:
        """Run the inner processing step and return the fixed result.

        The inner call happens exactly once and its return value is ignored.
        Exceptions raised by the inner service propagate unchanged.

        Args:
            a: First value passed to the inner service
            b: Second value passed to the inner service

        Returns:
            Always "abc"

        Raises:
            CollaboratorNotSetError: If no inner service has been set
        """
        if self.inner_service is None:
            raise CollaboratorNotSetError("inner service")

        logger.debug(f"Delegating process_values({a!r}, {b!r}) to inner service")
        self.inner_service.inner_processing(a, b)
        return PROCESS_VALUES_RESULT

    def process_step(self) -> int:
        """Return the external service's result for step 0, unchanged."""
        return self.external_service.process_step(PROCESS_STEP_ARGUMENT)
