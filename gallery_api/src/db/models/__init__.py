"""
ORM models for the gallery read path: tenants, their settings, owners,
custom domains and photo assets.

Importing this package ensures model classes are registered with the Base
metadata for Alembic and runtime usage.
"""

from .tenant import (  # noqa: F401
    Tenant,
    TenantDomain,
)
from .settings import (  # noqa: F401
    SiteSetting,
)
from .security import (  # noqa: F401
    AuthUser,
)
from .photo import (  # noqa: F401
    PhotoAsset,
    PUBLISHED_SYNC_STATES,
)
