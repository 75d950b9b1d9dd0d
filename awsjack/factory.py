"""Client factory.

Provides :func:`client_factory`, the single entry-point for creating
service clients by key. ``@overload`` signatures return the concrete
client class so IDEs can autocomplete the generated operation methods.
"""

from typing import overload, Literal, Any

from awsjack.base import existing_services
from awsjack.base.client_cache import ClientCache
from awsjack.base.config import ClientConfiguration, validate_config
from awsjack.services import (
    ApplicationAutoScalingClient,
    DataSyncClient,
    EKSClient,
    KendraClient,
    LicenseManagerClient,
    OrganizationsClient,
    RoboMakerClient,
    SSOAdminClient,
)
from awsjack.services.factory import SERVICE_REGISTRY

_Config = dict | ClientConfiguration | None


@overload
def client_factory(
    service_name: Literal["application_autoscaling"], config: _Config = None, *, cached: bool = False
) -> ApplicationAutoScalingClient: ...


@overload
def client_factory(
    service_name: Literal["datasync"], config: _Config = None, *, cached: bool = False
) -> DataSyncClient: ...


@overload
def client_factory(
    service_name: Literal["eks"], config: _Config = None, *, cached: bool = False
) -> EKSClient: ...


@overload
def client_factory(
    service_name: Literal["kendra"], config: _Config = None, *, cached: bool = False
) -> KendraClient: ...


@overload
def client_factory(
    service_name: Literal["license_manager"], config: _Config = None, *, cached: bool = False
) -> LicenseManagerClient: ...


@overload
def client_factory(
    service_name: Literal["organizations"], config: _Config = None, *, cached: bool = False
) -> OrganizationsClient: ...


@overload
def client_factory(
    service_name: Literal["robomaker"], config: _Config = None, *, cached: bool = False
) -> RoboMakerClient: ...


@overload
def client_factory(
    service_name: Literal["sso_admin"], config: _Config = None, *, cached: bool = False
) -> SSOAdminClient: ...


def client_factory(
    service_name: existing_services,
    config: _Config = None,
    *,
    cached: bool = False,
) -> Any:
    """
    Create a service client by key.
    Args:
        service_name: The service key (e.g., 'eks', 'sso_admin').
        config: Configuration dict or ``ClientConfiguration``; ``None`` uses
            environment variables and defaults.
        cached: Reuse one client per service + config combination.
    Returns:
        An instance of the requested client class.
    Raises:
        ValueError: If the service is not supported.
    """
    if service_name not in SERVICE_REGISTRY:
        raise ValueError(f"Unsupported service '{service_name}'")

    client_class = SERVICE_REGISTRY[service_name]
    config_obj = validate_config(config)
    if not cached:
        return client_class(config_obj)
    return ClientCache().get_or_create(
        service_name,
        config_obj.model_dump(),
        client_class,
    )
