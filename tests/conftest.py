"""Shared fixtures: fake AWS credentials and an in-process S3 from moto."""
import boto3
import pytest
from moto import mock_aws

from cloudcube.cube import init
from tests.consts import (
    TEST_ACCESS_KEY,
    TEST_BUCKET_NAME,
    TEST_CUBE_URL,
    TEST_SECRET_KEY,
)


@pytest.fixture(autouse=True)
def aws_credentials(monkeypatch):
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")


@pytest.fixture
def mocked_aws():
    with mock_aws():
        s3_client = boto3.client("s3", region_name="us-east-1")
        s3_client.create_bucket(Bucket=TEST_BUCKET_NAME, ObjectOwnership="ObjectWriter")
        yield s3_client


@pytest.fixture
def make_storage(mocked_aws):
    def _make(**overrides):
        config = {
            "public": TEST_ACCESS_KEY,
            "private": TEST_SECRET_KEY,
            "cubeUrl": TEST_CUBE_URL,
        }
        config.update(overrides)
        return init(config)

    return _make


@pytest.fixture
def storage(make_storage):
    return make_storage()
