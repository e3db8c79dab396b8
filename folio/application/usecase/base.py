"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services.

    Use cases take a request model, call domain services, and return a
    response model for the interface layer.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
