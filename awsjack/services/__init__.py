"""Generated AWS service clients.

Each module declares one :class:`~awsjack.base.client.ServiceClient`
subclass plus the request classes of its operations.
"""

from .application_autoscaling import ApplicationAutoScalingClient
from .datasync import DataSyncClient
from .eks import EKSClient
from .kendra import KendraClient
from .license_manager import LicenseManagerClient
from .organizations import OrganizationsClient
from .robomaker import RoboMakerClient
from .sso_admin import SSOAdminClient

__all__ = [
    "ApplicationAutoScalingClient",
    "DataSyncClient",
    "EKSClient",
    "KendraClient",
    "LicenseManagerClient",
    "OrganizationsClient",
    "RoboMakerClient",
    "SSOAdminClient",
]
