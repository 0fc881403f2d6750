"""
Models for the Redshift Data API backend.

This package contains data models for Data API requests and responses.
"""

from redshift.sql.backend.models.requests import (
    ExecuteStatementRequest,
    DescribeStatementRequest,
    GetStatementResultRequest,
    CancelStatementRequest,
)

from redshift.sql.backend.models.responses import (
    ColumnMetadata,
    ExecuteStatementResponse,
    DescribeStatementResponse,
    GetStatementResultResponse,
)

__all__ = [
    # Request models
    "ExecuteStatementRequest",
    "DescribeStatementRequest",
    "GetStatementResultRequest",
    "CancelStatementRequest",
    # Response models
    "ColumnMetadata",
    "ExecuteStatementResponse",
    "DescribeStatementResponse",
    "GetStatementResultResponse",
]
