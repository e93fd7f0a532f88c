"""
Core application utilities.

This package provides:
- Application-level settings (separate from DB settings)
- Logging setup with per-request context
- FastAPI dependency helpers
- Small shared helpers (date normalization)
"""
