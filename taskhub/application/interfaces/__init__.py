"""Application interfaces (ports): repository and broadcaster protocols.

Define contracts for infrastructure implementations.
No runtime imports from taskhub.infrastructure or taskhub.api.
"""

from taskhub.application.interfaces.repositories import ITaskRepository
from taskhub.application.interfaces.services import IBroadcaster

__all__ = ["IBroadcaster", "ITaskRepository"]
