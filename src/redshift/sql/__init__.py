from typing import Optional

from redshift.sql.exc import *
from redshift.sql.client import Client
from redshift.sql.results import QueryResult
from redshift.sql.types import ClientConfig, StatementState, DEFAULT_POLL_INTERVAL_SECONDS
from redshift.sql.unload import UnloadOption, build_unload_query

__version__ = "0.1.0"


def connect(
    workgroup_name: str,
    database: str,
    poll_interval: float = DEFAULT_POLL_INTERVAL_SECONDS,
    max_wait_seconds: Optional[float] = None,
    strict_decoding: bool = False,
    service_client=None,
    **kwargs,
) -> Client:
    """
    Create a Client for one Redshift Serverless workgroup.

    Args:
        workgroup_name: Workgroup that runs the statements
        database: Database used by execute_with_result and unloads
        poll_interval: Seconds between status checks
        max_wait_seconds: Give up waiting after this long (no limit by default)
        strict_decoding: Raise on result fields with unknown tags
        service_client: Existing boto3 ``redshift-data`` client to use
        **kwargs: Passed to boto3 when creating a client, e.g. region_name,
            profile_name or endpoint_url
    """
    from redshift.sql.backend.boto_backend import BotoDataApiClient

    config = ClientConfig(
        workgroup_name=workgroup_name,
        default_database=database,
        poll_interval=poll_interval,
        max_wait_seconds=max_wait_seconds,
        strict_decoding=strict_decoding,
    )
    return Client(BotoDataApiClient(service_client, **kwargs), config)
