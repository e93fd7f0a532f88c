"""
Public Pydantic schemas used by FastAPI routes, services, and tests.

`gallery` holds the featured galleries DTOs (serialized in camelCase);
`common` holds the message and error envelopes.
"""

from .common import ErrorResponse, MessageResponse  # noqa: F401
from .gallery import FeaturedGalleriesResponse, FeaturedGallery  # noqa: F401
