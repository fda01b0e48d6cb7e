"""Exception classes for the service delegation examples."""


class ServiceError(Exception):
    """Base exception for all service delegation errors."""

    pass


class CollaboratorNotSetError(ServiceError):
    """A required collaborator was never injected.

    Attributes:
        collaborator: Name of the missing collaborator
    """

    def __init__(self, collaborator: str):
        """Initialize the error.

        Args:
            collaborator: Name of the collaborator that is missing
        """
        self.collaborator = collaborator
        super().__init__(f"No {collaborator} has been set")
