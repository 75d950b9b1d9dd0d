"""Service registry.

Maps service keys to their client classes.
``SERVICE_REGISTRY`` is consumed by :func:`awsjack.factory.client_factory`.
"""

from awsjack.base.client import ServiceClient
from awsjack.services.application_autoscaling import ApplicationAutoScalingClient
from awsjack.services.datasync import DataSyncClient
from awsjack.services.eks import EKSClient
from awsjack.services.kendra import KendraClient
from awsjack.services.license_manager import LicenseManagerClient
from awsjack.services.organizations import OrganizationsClient
from awsjack.services.robomaker import RoboMakerClient
from awsjack.services.sso_admin import SSOAdminClient


SERVICE_REGISTRY: dict[str, type[ServiceClient]] = {
    "application_autoscaling": ApplicationAutoScalingClient,
    "datasync": DataSyncClient,
    "eks": EKSClient,
    "kendra": KendraClient,
    "license_manager": LicenseManagerClient,
    "organizations": OrganizationsClient,
    "robomaker": RoboMakerClient,
    "sso_admin": SSOAdminClient,
}
