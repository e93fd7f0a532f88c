"""
API route modules.

This package contains subrouters for:
- Galleries: the public featured galleries listing
- Fragments: server-rendered HTML placeholders for the web client

Routers are included from src.api.main (under the /api/v1 prefix).
"""
