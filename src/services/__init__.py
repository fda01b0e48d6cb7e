"""Service delegation examples with substitutable collaborators."""

from .exceptions import CollaboratorNotSetError, ServiceError
from .external import ExternalService
from .inner import InnerService
from .interfaces import InnerProcessor, StepProcessor
from .outer import OuterService

__all__ = [
    # Services
    "InnerService",
    "OuterService",
    "ExternalService",
    # Interfaces
    "InnerProcessor",
    "StepProcessor",
    # Exceptions
    "ServiceError",
    "CollaboratorNotSetError",
]
