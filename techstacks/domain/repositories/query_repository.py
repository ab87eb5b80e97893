"""Query Repository Interface for query-by-convention endpoints."""

from abc import ABC, abstractmethod

from techstacks.domain.entities.query import QueryRequest, QueryResult


class IQueryRepository(ABC):
    @abstractmethod
    def query(self, request: QueryRequest, limit: int) -> QueryResult:
        """
        Run a query-by-convention request.

        Args:
            request: Validated request, filters limited to declared fields
            limit: Maximum number of rows to return

        Returns:
            The page of rows and the total number of matches
        """
        pass
