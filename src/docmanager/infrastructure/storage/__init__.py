from .s3_file_storage import S3FileStorage, create_s3_client

__all__ = ["S3FileStorage", "create_s3_client"]
