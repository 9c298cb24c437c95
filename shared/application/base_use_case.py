"""
Base use case classes.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar, Optional

InputDTO = TypeVar('InputDTO')
OutputDTO = TypeVar('OutputDTO')


@dataclass(frozen=True)
class UseCaseResult(Generic[OutputDTO]):
    """
    Result wrapper for use cases.

    Failures are raised as domain exceptions, so a result always
    describes a completed call. data may be None, e.g. when the
    requested entity does not exist.
    """
    data: Optional[OutputDTO] = None
    success: bool = True

    @classmethod
    def ok(cls, data: Optional[OutputDTO] = None) -> 'UseCaseResult[OutputDTO]':
        """Create a successful result."""
        return cls(data=data)


class UseCase(ABC, Generic[InputDTO, OutputDTO]):
    """Base use case class."""

    @abstractmethod
    def execute(self, input_dto: InputDTO) -> UseCaseResult[OutputDTO]:
        """Execute the use case."""
        pass
