# docmanager/__init__.py
"""
docmanager - document, employee and role management service.

Application services depend only on the repository and file-storage ports in
``docmanager.application.ports``; concrete SQLAlchemy / S3 adapters live in
``docmanager.infrastructure`` and are wired together by
``docmanager.core.di.bootstrap_dependencies``.
"""

__version__ = "0.1.0"
