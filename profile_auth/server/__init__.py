"""
Server - Reference HTTP backend for the session controller.

Endpoints:
- POST /register
- POST /login
- GET  /user/me
"""

from profile_auth.server.app import create_app

__all__ = ["create_app"]
