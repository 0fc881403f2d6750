from abc import ABC, abstractmethod

from redshift.sql.backend.models import (
    ExecuteStatementRequest,
    DescribeStatementRequest,
    GetStatementResultRequest,
    CancelStatementRequest,
    ExecuteStatementResponse,
    DescribeStatementResponse,
    GetStatementResultResponse,
)


class DataApiClient(ABC):
    """
    Abstract interface for the remote statement service.

    Implementations are responsible for:
    - Submitting SQL statements for asynchronous execution
    - Reporting the status of a submitted statement
    - Returning result pages of a finished statement

    Authentication, connection setup and transport retries belong to the
    implementation. Failures must be raised as RequestError.
    """

    @abstractmethod
    def execute_statement(
        self, request: ExecuteStatementRequest
    ) -> ExecuteStatementResponse:
        """
        Submits a statement and returns without waiting for it to run.

        Raises:
            RequestError: If the service rejects the statement or cannot be reached
        """
        pass

    @abstractmethod
    def describe_statement(
        self, request: DescribeStatementRequest
    ) -> DescribeStatementResponse:
        """
        Returns the current status of a statement.

        Raises:
            RequestError: If the status cannot be retrieved
        """
        pass

    @abstractmethod
    def get_statement_result(
        self, request: GetStatementResultRequest
    ) -> GetStatementResultResponse:
        """
        Returns one page of the result set of a finished statement.

        Raises:
            RequestError: If the result cannot be retrieved
        """
        pass

    @abstractmethod
    def cancel_statement(self, request: CancelStatementRequest) -> bool:
        """
        Asks the service to stop a running statement.

        Returns:
            bool: Whether the service accepted the cancellation

        Raises:
            RequestError: If the request fails
        """
        pass
