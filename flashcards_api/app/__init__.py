"""
Application package.

``core`` holds configuration, persistence, security and HTTP plumbing,
``schemas`` the request/response models, ``services`` the data access
layer and ``api`` the versioned routers.
"""

from .main import app, create_app  # noqa: F401
