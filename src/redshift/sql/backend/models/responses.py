"""
Response models for the Redshift Data API backend.

These models define the structures parsed from Data API responses.
"""

from typing import Dict, Any, List, Optional
from dataclasses import dataclass, field

from redshift.sql.types import StatementState


@dataclass
class ColumnMetadata:
    """Description of one result column."""

    name: str
    type_name: Optional[str] = None
    nullable: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ColumnMetadata":
        return cls(
            name=data.get("name", ""),
            type_name=data.get("typeName"),
            nullable=data.get("nullable"),
        )


@dataclass
class ExecuteStatementResponse:
    """Representation of the response from submitting a statement."""

    statement_id: str
    database: Optional[str] = None
    workgroup_name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExecuteStatementResponse":
        """Create an ExecuteStatementResponse from a dictionary."""
        return cls(
            statement_id=data.get("Id", ""),
            database=data.get("Database"),
            workgroup_name=data.get("WorkgroupName"),
        )


@dataclass
class DescribeStatementResponse:
    """Representation of the status of a submitted statement."""

    statement_id: str
    status: StatementState
    error: Optional[str] = None
    query_string: Optional[str] = None
    duration: Optional[int] = None
    result_rows: Optional[int] = None
    has_result_set: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DescribeStatementResponse":
        """Create a DescribeStatementResponse from a dictionary."""
        return cls(
            statement_id=data.get("Id", ""),
            status=StatementState.from_service_state(data.get("Status")),
            error=data.get("Error"),
            query_string=data.get("QueryString"),
            duration=data.get("Duration"),
            result_rows=data.get("ResultRows"),
            has_result_set=data.get("HasResultSet", False),
        )


@dataclass
class GetStatementResultResponse:
    """Representation of one page of a statement's result set."""

    column_metadata: List[ColumnMetadata] = field(default_factory=list)
    records: List[List[Dict[str, Any]]] = field(default_factory=list)
    total_num_rows: Optional[int] = None
    next_token: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GetStatementResultResponse":
        """Create a GetStatementResultResponse from a dictionary."""
        return cls(
            column_metadata=[
                ColumnMetadata.from_dict(column)
                for column in data.get("ColumnMetadata", [])
            ],
            records=data.get("Records", []),
            total_num_rows=data.get("TotalNumRows"),
            next_token=data.get("NextToken") or None,
        )
