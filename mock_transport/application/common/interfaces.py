"""
Base interfaces for CQRS pattern.

Handlers are synchronous: a simulated request runs to completion before the
next one is processed.

Usage:
    @dataclass(frozen=True)
    class DeleteLinkCommand(Command[None]):
        conversation_id: ConversationId

    class DeleteLinkHandler(CommandHandler[None]):
        def __init__(self, repo: ConversationRepository):
            self.repo = repo

        def execute(self, cmd: DeleteLinkCommand) -> None:
            ...
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic

T = TypeVar("T")
class Command(ABC, Generic[T]):
    """Base class for write operations"""
    pass

class CommandHandler(ABC, Generic[T]):
    @abstractmethod
    def execute(self, command: Command[T]) -> T:
        """Execute the command and return a result of type T"""
        ...

class Query(ABC, Generic[T]):
    """Base class for read operations"""
    pass

class QueryHandler(ABC, Generic[T]):
    @abstractmethod
    def execute(self, query: Query[T]) -> T:
        """Execute the query and return a result of type T"""
        ...
