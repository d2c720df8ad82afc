"""
Persistence Models Package.

All Django ORM models for the FabDash system.
"""

# Base mixins
from .base import (
    TimeStampedMixin,
    VersionedMixin,
    AuditMixin,
    BaseModel,
    BaseModelWithHistory,
)

# Project models
from .project import (
    Project,
    ProjectSequence,
    ProjectStatusChoices,
)

# Logistics models
from .logistics import (
    Delivery,
    DeliveryTypeChoices,
)

# Materials models
from .materials import (
    MissingMaterial,
    MaterialStatusChoices,
    MaterialUnitChoices,
)

# Small jobs
from .small_jobs import (
    SmallJob,
    SmallJobStatusChoices,
)

# BOQ models
from .boq import BOQItem

# Upload models
from .uploads import (
    Upload,
    UploadTypeChoices,
    UploadStatusChoices,
)


__all__ = [
    # Base
    'TimeStampedMixin',
    'VersionedMixin',
    'AuditMixin',
    'BaseModel',
    'BaseModelWithHistory',

    # Project
    'Project',
    'ProjectSequence',
    'ProjectStatusChoices',

    # Logistics
    'Delivery',
    'DeliveryTypeChoices',

    # Materials
    'MissingMaterial',
    'MaterialStatusChoices',
    'MaterialUnitChoices',

    # Small jobs
    'SmallJob',
    'SmallJobStatusChoices',

    # BOQ
    'BOQItem',

    # Uploads
    'Upload',
    'UploadTypeChoices',
    'UploadStatusChoices',
]
