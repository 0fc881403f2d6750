import os
import pytest


@pytest.fixture(scope="session")
def workgroup_name():
    return os.getenv("REDSHIFT_WORKGROUP_NAME")


@pytest.fixture(scope="session")
def database():
    return os.getenv("REDSHIFT_DATABASE", "dev")


@pytest.fixture(scope="session")
def region_name():
    return os.getenv("AWS_REGION")


@pytest.fixture(scope="session")
def unload_s3_path():
    return os.getenv("REDSHIFT_UNLOAD_S3_PATH")


@pytest.fixture(scope="session")
def unload_iam_role():
    return os.getenv("REDSHIFT_UNLOAD_IAM_ROLE", "default")


@pytest.fixture(scope="session")
def connection_details(workgroup_name, database, region_name):
    return {
        "workgroup_name": workgroup_name,
        "database": database,
        "region_name": region_name,
    }
