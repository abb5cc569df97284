"""
Infrastructure adapters: SQLAlchemy / in-memory repositories and S3 file storage.
"""
