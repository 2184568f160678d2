"""
Pytest fixtures for thumbspec tests.
"""

import pytest


@pytest.fixture
def s3_config():
    """Fixture providing S3 configuration."""
    from thumbspec.s3_config import S3Config
    
    return S3Config(
        endpoint='https://test-endpoint.example.com:9000',
        access_key='test-access-key',
        secret_key='test-secret-key',
        region='us-east-1',
    )


@pytest.fixture
def mock_boto3_client(mocker):
    """Fixture providing a mocked boto3 client."""
    mock_client = mocker.MagicMock()
    mocker.patch('boto3.client', return_value=mock_client)
    return mock_client


@pytest.fixture
def mock_s3_client(s3_config):
    """Fixture providing an S3Client with mocked boto3."""
    from unittest.mock import MagicMock, patch
    from thumbspec.s3_client import S3Client
    
    mock_boto = MagicMock()
    mock_boto.generate_presigned_url.return_value = (
        'https://test-endpoint.example.com:9000/test-bucket/videos/clip.mp4?X-Amz-Signature=abc'
    )
    
    with patch('boto3.client', return_value=mock_boto):
        client = S3Client(s3_config)
        # Store reference to the mock for test setup
        client._mock_boto = mock_boto
        yield client

