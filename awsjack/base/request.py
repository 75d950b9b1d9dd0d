"""
Request models.

Every operation gets its own pydantic request class, generated from the
service's operation table by :func:`build_request_model`. Members that the
client itself needs (path and query members) are declared as snake_case
attributes aliased to their AWS member name, and also accept their wire
name (``ListClustersRequest(maxResults=10)``); every other member is
accepted as an extra and sent verbatim, so ``DescribeClusterRequest(name="prod")``
and ``DescribeClusterRequest(Name="prod")`` are equivalent.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, create_model

from awsjack.base.endpoint import EndpointParameter


class ServiceRequest(BaseModel):
    """Base class for all operation requests."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    # AWS operation name, e.g. "DescribeCluster"
    service_request_name: ClassVar[str] = ""
    # member name -> wire name, for declared members
    wire_names: ClassVar[dict[str, str]] = {}

    def __setattr__(self, name: str, value: Any) -> None:
        # ``request.ClusterName = ...`` must land on the declared field
        super().__setattr__(self._field_for(name) or name, value)

    def get_service_request_name(self) -> str:
        return self.service_request_name

    def has_been_set(self, member: str) -> bool:
        """Return True if *member* (AWS member name) was explicitly set."""
        field = self._field_for(member)
        if field is not None:
            return field in self.model_fields_set
        return member in (self.model_extra or {})

    def get_member(self, member: str) -> Any:
        field = self._field_for(member)
        if field is not None:
            return getattr(self, field)
        return (self.model_extra or {}).get(member)

    def get_endpoint_context_params(self) -> list[EndpointParameter]:
        """Request-derived endpoint parameters.

        None of the bundled services define operation context parameters,
        so this is empty unless a subclass overrides it.
        """
        return []

    def clone(self) -> ServiceRequest:
        """Deep copy, used to hand a request to another thread."""
        return self.model_copy(deep=True)

    def to_wire(self, exclude: set[str] | frozenset[str] = frozenset()) -> dict[str, Any]:
        """Explicitly set members keyed by wire name.

        Args:
            exclude: AWS member names to leave out (path and query members).
        """
        wire: dict[str, Any] = {}
        for name, field in type(self).model_fields.items():
            member = field.alias or name
            if member in exclude or name not in self.model_fields_set:
                continue
            wire[self.wire_names.get(member, member)] = getattr(self, name)
        for member, value in (self.model_extra or {}).items():
            if member not in exclude:
                wire[member] = value
        return wire

    @classmethod
    def _field_for(cls, member: str) -> str | None:
        for name, field in cls.model_fields.items():
            if field.alias == member or cls.wire_names.get(field.alias) == member:
                return name
        if member in cls.model_fields:
            return member
        return None


def member_name(wire_name: str) -> str:
    """AWS member name for a wire name (``clusterName`` -> ``ClusterName``)."""
    return wire_name[:1].upper() + wire_name[1:]


def build_request_model(
    operation_name: str,
    members: dict[str, str],
) -> type[ServiceRequest]:
    """Create the request class for one operation.

    Args:
        operation_name: AWS operation name, e.g. ``DeleteAddon``.
        members: Python attribute name -> wire name for each declared member.

    Returns:
        A :class:`ServiceRequest` subclass named ``<operation_name>Request``.
    """
    fields: dict[str, Any] = {
        attr: (
            Any,
            Field(
                default=None,
                alias=member_name(wire),
                validation_alias=AliasChoices(*dict.fromkeys((member_name(wire), attr, wire))),
            ),
        )
        for attr, wire in members.items()
    }
    model = create_model(  # type: ignore[call-overload]
        f"{operation_name}Request",
        __base__=ServiceRequest,
        **fields,
    )
    model.service_request_name = operation_name
    model.wire_names = {member_name(wire): wire for wire in members.values()}
    return model
