"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=Optional[BaseModel])


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One application operation: a pydantic request in, a response out.

    Use cases translate transport-level IDs into domain values and let
    domain errors propagate to the interface layer.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
