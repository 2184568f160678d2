"""
S3Client - S3/MinIO operations needed to resolve thumbnail inputs.
"""

import logging
from typing import Optional

import boto3
from botocore.config import Config
from botocore.exceptions import ClientError

from .s3_config import S3Config


class S3Client:
    """
    Wrapper for S3/MinIO operations.
    
    Signs temporary download URLs and checks object existence.
    """
    
    def __init__(self, config: S3Config, logger: Optional[logging.Logger] = None):
        """
        Initialize S3 client.
        
        Args:
            config: S3 configuration
            logger: Optional logger instance
        """
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        
        self._client = boto3.client(
            's3',
            endpoint_url=config.endpoint,
            aws_access_key_id=config.access_key,
            aws_secret_access_key=config.secret_key,
            region_name=config.region,
            config=Config(
                signature_version='s3v4',
                s3={'addressing_style': 'path'}
            ),
            verify=config.verify_ssl
        )
    
    def generate_signed_url(
        self,
        bucket: str,
        key: str,
        expires_in: Optional[int] = None
    ) -> str:
        """
        Sign a temporary GET URL for an object.
        
        Errors from botocore are not caught.
        
        Args:
            bucket: Bucket holding the object
            key: Object key
            expires_in: Lifetime in seconds, defaults to config.url_expiry
            
        Returns:
            The signed URL
        """
        expires_in = expires_in or self.config.url_expiry
        self.logger.debug(f"Signing s3://{bucket}/{key} for {expires_in}s")
        return self._client.generate_presigned_url(
            'get_object',
            Params={'Bucket': bucket, 'Key': key},
            ExpiresIn=expires_in
        )
    
    def object_exists(self, bucket: str, key: str) -> bool:
        """Check if an object exists in S3."""
        try:
            self._client.head_object(Bucket=bucket, Key=key)
            return True
        except ClientError as e:
            if e.response['Error']['Code'] == '404':
                return False
            raise
