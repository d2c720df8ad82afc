"""
Serializers Package.

All API serializers for the FabDash system.
"""

from .base import BaseModelSerializer

from .users import (
    LoginSerializer,
    UserProfileSerializer,
)

from .project import (
    ProjectListSerializer,
    ProjectDetailSerializer,
    ProjectCriteriaSerializer,
    SetCriterionSerializer,
)

from .logistics import (
    DeliverySerializer,
    DayBucketSerializer,
    schedule_message,
)

from .materials import (
    MissingMaterialSerializer,
    MaterialReplaceSerializer,
    MaterialStatusSerializer,
    ProjectMaterialsSerializer,
)

from .small_jobs import (
    SmallJobSerializer,
    SmallJobStatusSerializer,
)

from .boq import (
    BOQItemSerializer,
    BOQSummarySerializer,
)

from .uploads import (
    UploadSerializer,
    UploadUpdateSerializer,
)

__all__ = [
    'BaseModelSerializer',
    'LoginSerializer',
    'UserProfileSerializer',
    'ProjectListSerializer',
    'ProjectDetailSerializer',
    'ProjectCriteriaSerializer',
    'SetCriterionSerializer',
    'DeliverySerializer',
    'DayBucketSerializer',
    'schedule_message',
    'MissingMaterialSerializer',
    'MaterialReplaceSerializer',
    'MaterialStatusSerializer',
    'ProjectMaterialsSerializer',
    'SmallJobSerializer',
    'SmallJobStatusSerializer',
    'BOQItemSerializer',
    'BOQSummarySerializer',
    'UploadSerializer',
    'UploadUpdateSerializer',
]
