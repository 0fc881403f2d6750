from __future__ import annotations

import logging
import threading
import time
from typing import List, Optional

from redshift.sql.backend.data_api_client import DataApiClient
from redshift.sql.backend.models import (
    ColumnMetadata,
    ExecuteStatementRequest,
    DescribeStatementRequest,
    GetStatementResultRequest,
    CancelStatementRequest,
    DescribeStatementResponse,
)
from redshift.sql.conversion import FieldDecoder
from redshift.sql.exc import (
    RequestError,
    SubmissionError,
    PollTransportError,
    FetchError,
    ServerOperationError,
    OperationCancelledError,
    MaxWaitDurationError,
    ValidationError,
)
from redshift.sql.results import QueryResult
from redshift.sql.types import ClientConfig, StatementState
from redshift.sql.unload import UnloadOption, build_unload_query

logger = logging.getLogger(__name__)


class Client:
    """
    Runs statements through the Redshift Data API and waits for them to finish.

    A Client only holds immutable configuration and the service client, so one
    instance can be shared between threads.
    """

    def __init__(self, service: DataApiClient, config: ClientConfig):
        """
        Args:
            service: Implementation of the Data API operations
            config: Workgroup, default database and polling settings
        """
        logger.debug(
            "Client.__init__(workgroup_name=%s, default_database=%s, poll_interval=%s)",
            config.workgroup_name,
            config.default_database,
            config.poll_interval,
        )
        self._service = service
        self.config = config

    @staticmethod
    def _raise_if_cancelled(
        cancel_event: Optional[threading.Event], statement_id: Optional[str] = None
    ) -> None:
        if cancel_event is not None and cancel_event.is_set():
            raise OperationCancelledError(
                "Operation was cancelled", {"statement-id": statement_id}
            )

    def execute_statement(
        self,
        sql: str,
        database: Optional[str] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> str:
        """
        Submit a statement for asynchronous execution.

        Args:
            sql: Statement text
            database: Target database, defaults to the configured one
            cancel_event: If already set, nothing is submitted

        Returns:
            str: The statement id issued by the service

        Raises:
            SubmissionError: If the service rejected the statement
            OperationCancelledError: If cancel_event is set
        """
        self._raise_if_cancelled(cancel_event)
        request = ExecuteStatementRequest(
            database=database or self.config.default_database,
            sql=sql,
            workgroup_name=self.config.workgroup_name,
        )
        try:
            response = self._service.execute_statement(request)
        except RequestError as e:
            raise SubmissionError(
                "execute statement: {}".format(e.message),
                {"database": request.database, "original-exception": e},
            ) from e

        logger.debug("Submitted statement %s", response.statement_id)
        return response.statement_id

    def describe_statement(self, statement_id: str) -> DescribeStatementResponse:
        """
        Get the current status of a statement.

        Raises:
            PollTransportError: If the status could not be retrieved
        """
        try:
            return self._service.describe_statement(
                DescribeStatementRequest(statement_id=statement_id)
            )
        except RequestError as e:
            raise PollTransportError(
                "watch statement {}: {}".format(statement_id, e.message),
                {"statement-id": statement_id, "original-exception": e},
            ) from e

    def cancel_statement(self, statement_id: str) -> bool:
        """Ask the service to stop a running statement."""
        return self._service.cancel_statement(
            CancelStatementRequest(statement_id=statement_id)
        )

    def _cancel_after_interruption(self, statement_id: str) -> None:
        try:
            self.cancel_statement(statement_id)
        except RequestError as e:
            logger.warning(
                "Could not cancel statement %s after interruption: %s",
                statement_id,
                e.message,
            )

    def _abort_watch(self, statement_id: str) -> None:
        self._cancel_after_interruption(statement_id)
        raise OperationCancelledError(
            "Operation was cancelled", {"statement-id": statement_id}
        )

    def watch_statement(
        self, statement_id: str, cancel_event: Optional[threading.Event] = None
    ) -> DescribeStatementResponse:
        """
        Poll a statement every ``poll_interval`` seconds until it is terminal.

        Args:
            statement_id: Id returned by execute_statement
            cancel_event: Checked before every poll and interrupts the wait
                between polls. The statement is cancelled server side when set.

        Returns:
            DescribeStatementResponse: The final, FINISHED, status

        Raises:
            ServerOperationError: If the statement was ABORTED or FAILED
            PollTransportError: If a status request failed
            OperationCancelledError: If cancel_event was set
            MaxWaitDurationError: If max_wait_seconds elapsed first. The
                statement is cancelled server side before raising.
        """
        started = time.monotonic()
        poll_count = 0

        while True:
            if cancel_event is not None and cancel_event.is_set():
                self._abort_watch(statement_id)

            response = self.describe_statement(statement_id)
            poll_count += 1
            logger.debug(
                "Statement %s is %s after %d poll(s)",
                statement_id,
                response.status.value,
                poll_count,
            )

            if response.status == StatementState.FINISHED:
                return response

            if response.status.is_failure:
                diagnostic = response.error or "Statement {} was {}".format(
                    statement_id, response.status.value.lower()
                )
                raise ServerOperationError(
                    "watch statement {}: {}".format(statement_id, diagnostic),
                    {
                        "statement-id": statement_id,
                        "state": response.status.value,
                        "diagnostic-info": diagnostic,
                    },
                )

            max_wait = self.config.max_wait_seconds
            if max_wait is not None and time.monotonic() - started >= max_wait:
                self._cancel_after_interruption(statement_id)
                raise MaxWaitDurationError(
                    "Statement {} did not finish within {}s".format(
                        statement_id, max_wait
                    ),
                    {"statement-id": statement_id, "polls": poll_count},
                )

            if cancel_event is None:
                time.sleep(self.config.poll_interval)
            elif cancel_event.wait(self.config.poll_interval):
                self._abort_watch(statement_id)

    def fetch_result(self, statement_id: str) -> QueryResult:
        """
        Download every page of a finished statement's result.

        Raises:
            FetchError: If a result page could not be retrieved
            EncodingError: If a record does not match the column list
            DecodingError: If strict decoding is enabled and a field is unknown
        """
        column_metadata: List[ColumnMetadata] = []
        records: List = []
        next_token: Optional[str] = None

        while True:
            try:
                page = self._service.get_statement_result(
                    GetStatementResultRequest(
                        statement_id=statement_id, next_token=next_token
                    )
                )
            except RequestError as e:
                raise FetchError(
                    "fetch result {}: {}".format(statement_id, e.message),
                    {"statement-id": statement_id, "original-exception": e},
                ) from e

            if not column_metadata:
                column_metadata = page.column_metadata
            records.extend(page.records)
            next_token = page.next_token
            if not next_token:
                break

        logger.debug("Fetched %d record(s) for statement %s", len(records), statement_id)
        return QueryResult(
            statement_id,
            column_metadata,
            records,
            FieldDecoder(strict=self.config.strict_decoding),
        )

    def execute_with_result(
        self, query: str, cancel_event: Optional[threading.Event] = None
    ) -> QueryResult:
        """
        Run a query against the default database and return its rows.

        Raises:
            SubmissionError, PollTransportError, ServerOperationError,
            FetchError, EncodingError: From the failing stage
        """
        statement_id = self.execute_statement(query, cancel_event=cancel_event)
        self.watch_statement(statement_id, cancel_event=cancel_event)
        return self.fetch_result(statement_id)

    def execute_with_result_json(
        self, query: str, cancel_event: Optional[threading.Event] = None
    ) -> bytes:
        """Run a query and return its rows as a JSON array of objects."""
        return self.execute_with_result(query, cancel_event=cancel_event).to_json()

    def execute_unload_and_wait(
        self,
        query: str,
        option: UnloadOption,
        cancel_event: Optional[threading.Event] = None,
    ) -> str:
        """
        Export the rows of ``query`` to S3 and wait until the export is done.

        Returns:
            str: The statement id of the UNLOAD statement

        Raises:
            ValidationError: If the unload option has no S3 path
            SubmissionError, PollTransportError, ServerOperationError: From the
                failing stage
        """
        try:
            unload_query = build_unload_query(query, option)
        except ValidationError as e:
            raise ValidationError(
                "generate unload query: {}".format(e.message), e.context
            ) from e
        statement_id = self.execute_statement(unload_query, cancel_event=cancel_event)
        self.watch_statement(statement_id, cancel_event=cancel_event)
        return statement_id
