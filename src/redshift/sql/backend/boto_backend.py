from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from redshift.sql.backend.data_api_client import DataApiClient
from redshift.sql.backend.models import (
    ExecuteStatementRequest,
    DescribeStatementRequest,
    GetStatementResultRequest,
    CancelStatementRequest,
    ExecuteStatementResponse,
    DescribeStatementResponse,
    GetStatementResultResponse,
)
from redshift.sql.exc import RequestError

logger = logging.getLogger(__name__)

SERVICE_NAME = "redshift-data"
USER_AGENT_EXTRA = "PyRedshiftDataConnector"


def new_service_client(profile_name: Optional[str] = None, **kwargs):
    """
    Create a boto3 ``redshift-data`` client.

    Credentials and region are resolved by boto3 (environment variables,
    shared config files, instance roles). Extra keyword arguments such as
    ``region_name`` or ``endpoint_url`` are passed to ``Session.client``.
    """
    kwargs.setdefault("config", Config(user_agent_extra=USER_AGENT_EXTRA))
    session = boto3.Session(profile_name=profile_name)
    return session.client(SERVICE_NAME, **kwargs)


class BotoDataApiClient(DataApiClient):
    """
    Redshift Data API implementation of the DataApiClient interface, backed
    by a boto3 client.
    """

    def __init__(self, service_client=None, **kwargs):
        """
        Args:
            service_client: A boto3 ``redshift-data`` client. One is created
                from ``kwargs`` when omitted.
            **kwargs: Passed to new_service_client
        """
        self._service = service_client or new_service_client(**kwargs)

    def _call(
        self, method: str, statement_id: Optional[str], params: Dict[str, Any]
    ) -> Dict[str, Any]:
        operation: Callable[..., Dict[str, Any]] = getattr(self._service, method)
        logger.debug("BotoDataApiClient.%s(statement_id=%s)", method, statement_id)
        try:
            return operation(**params)
        except ClientError as e:
            error = e.response.get("Error", {})
            raise RequestError(
                "{} failed: {}".format(method, error.get("Message") or str(e)),
                {
                    "method": method,
                    "statement-id": statement_id,
                    "error-code": error.get("Code"),
                    "original-exception": e,
                },
            ) from e
        except BotoCoreError as e:
            raise RequestError(
                "{} failed: {}".format(method, e),
                {
                    "method": method,
                    "statement-id": statement_id,
                    "original-exception": e,
                },
            ) from e

    def execute_statement(
        self, request: ExecuteStatementRequest
    ) -> ExecuteStatementResponse:
        response = self._call("execute_statement", None, request.to_dict())
        return ExecuteStatementResponse.from_dict(response)

    def describe_statement(
        self, request: DescribeStatementRequest
    ) -> DescribeStatementResponse:
        response = self._call(
            "describe_statement", request.statement_id, request.to_dict()
        )
        return DescribeStatementResponse.from_dict(response)

    def get_statement_result(
        self, request: GetStatementResultRequest
    ) -> GetStatementResultResponse:
        response = self._call(
            "get_statement_result", request.statement_id, request.to_dict()
        )
        return GetStatementResultResponse.from_dict(response)

    def cancel_statement(self, request: CancelStatementRequest) -> bool:
        response = self._call(
            "cancel_statement", request.statement_id, request.to_dict()
        )
        return bool(response.get("Status", False))
