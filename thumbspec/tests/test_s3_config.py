"""Tests for S3Config class."""

import pytest

from thumbspec.s3_config import S3Config


@pytest.fixture
def clean_env(monkeypatch):
    """Remove S3_* variables from the environment."""
    for name in ('S3_ENDPOINT', 'S3_ACCESS_KEY',
                 'S3_SECRET_KEY', 'S3_REGION', 'S3_VERIFY_SSL', 'S3_URL_EXPIRY'):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestS3Config:
    """Tests for S3Config class."""
    
    def test_defaults(self):
        config = S3Config()
        
        assert config.url_expiry == 1100
        assert config.verify_ssl is True
        assert config.validate() == []
    
    def test_from_env(self, clean_env):
        """Test reading settings from the environment."""
        clean_env.setenv('S3_ENDPOINT', 'https://minio.local:9000')
        clean_env.setenv('S3_ACCESS_KEY', 'key')
        clean_env.setenv('S3_SECRET_KEY', 'secret')
        clean_env.setenv('S3_VERIFY_SSL', 'false')
        clean_env.setenv('S3_URL_EXPIRY', '60')
        
        config = S3Config.from_env()
        
        assert config.endpoint == 'https://minio.local:9000'
        assert config.verify_ssl is False
        assert config.url_expiry == 60
    
    def test_from_env_empty(self, clean_env):
        """Test an empty environment gives defaults."""
        config = S3Config.from_env()
        
        assert config.endpoint is None
        assert config.url_expiry == 1100
        assert config.verify_ssl is True
    
    def test_validate_half_credentials(self):
        """Test an access key without a secret is rejected."""
        errors = S3Config(access_key='key').validate()
        
        assert len(errors) == 1
        assert 'S3_SECRET_KEY' in errors[0]
    
    def test_validate_expiry(self):
        errors = S3Config(url_expiry=0).validate()
        
        assert any('S3_URL_EXPIRY' in e for e in errors)
    
    def test_fields(self):
        """Test only the settings used for signing are carried."""
        from dataclasses import fields
        
        names = {f.name for f in fields(S3Config)}
        
        assert names == {
            'endpoint', 'access_key', 'secret_key', 'region', 'verify_ssl', 'url_expiry'
        }
