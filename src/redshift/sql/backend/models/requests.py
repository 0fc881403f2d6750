"""
Request models for the Redshift Data API backend.

These models define the parameters sent with each Data API operation. Keys
follow the service's PascalCase naming so ``to_dict`` can be passed straight
to a boto3 client as keyword arguments.
"""

from typing import Dict, Any, Optional
from dataclasses import dataclass


@dataclass
class ExecuteStatementRequest:
    """Representation of a request to execute a SQL statement."""

    database: str
    sql: str
    workgroup_name: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert the request to a dictionary of boto3 parameters."""
        return {
            "Database": self.database,
            "Sql": self.sql,
            "WorkgroupName": self.workgroup_name,
        }


@dataclass
class DescribeStatementRequest:
    """Representation of a request to get the status of a statement."""

    statement_id: str

    def to_dict(self) -> Dict[str, Any]:
        return {"Id": self.statement_id}


@dataclass
class GetStatementResultRequest:
    """Representation of a request to fetch one page of a statement's result."""

    statement_id: str
    next_token: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"Id": self.statement_id}
        if self.next_token:
            result["NextToken"] = self.next_token
        return result


@dataclass
class CancelStatementRequest:
    """Representation of a request to cancel a running statement."""

    statement_id: str

    def to_dict(self) -> Dict[str, Any]:
        return {"Id": self.statement_id}
