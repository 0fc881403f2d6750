from redshift.sql.backend.data_api_client import DataApiClient
from redshift.sql.backend.boto_backend import BotoDataApiClient, new_service_client

__all__ = ["DataApiClient", "BotoDataApiClient", "new_service_client"]
