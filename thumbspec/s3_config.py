"""
S3Config - Connection settings for S3/MinIO, read from the environment.
"""

import os
from dataclasses import dataclass
from typing import List, Optional


DEFAULT_URL_EXPIRY = 1100


@dataclass
class S3Config:
    """
    S3 connection settings.
    
    Attributes:
        endpoint: S3 endpoint URL, None for AWS
        access_key: Access key id
        secret_key: Secret access key
        region: Region name
        verify_ssl: Verify TLS certificates
        url_expiry: Lifetime of signed URLs in seconds
    """
    endpoint: Optional[str] = None
    access_key: Optional[str] = None
    secret_key: Optional[str] = None
    region: Optional[str] = None
    verify_ssl: bool = True
    url_expiry: int = DEFAULT_URL_EXPIRY
    
    @classmethod
    def from_env(cls) -> 'S3Config':
        """Build configuration from S3_* environment variables."""
        return cls(
            endpoint=os.getenv('S3_ENDPOINT') or None,
            access_key=os.getenv('S3_ACCESS_KEY') or None,
            secret_key=os.getenv('S3_SECRET_KEY') or None,
            region=os.getenv('S3_REGION') or None,
            verify_ssl=os.getenv('S3_VERIFY_SSL', 'true').lower() not in ('0', 'false', 'no'),
            url_expiry=int(os.getenv('S3_URL_EXPIRY', str(DEFAULT_URL_EXPIRY))),
        )
    
    def validate(self) -> List[str]:
        """
        Check the configuration.
        
        Returns:
            List of error messages, empty if valid
        """
        errors = []
        if bool(self.access_key) != bool(self.secret_key):
            errors.append("S3_ACCESS_KEY and S3_SECRET_KEY must be set together")
        if self.url_expiry <= 0:
            errors.append("S3_URL_EXPIRY must be a positive number of seconds")
        return errors
