# app/__init__.py
"""
Hello Proxy API: answers GET /hello after pinging the external service.

Serve it with:
    uvicorn app:app --reload
"""

from .main import app

__all__ = ["app"]
