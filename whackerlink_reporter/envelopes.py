"""
Report envelopes posted to the collector.

Each envelope is a frozen pydantic model that serializes with PascalCase field
names. Identifiers, sites and statuses come from the radio-network layer and
are passed through as-is.
"""
from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, TypeAdapter
from pydantic.alias_generators import to_pascal

from .models import ResponseType, SiteBroadcastLike, StatusBroadcastLike


class _Envelope(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        frozen=True,
    )

    type: Any
    timestamp: str


class EventReport(_Envelope):
    src_id: Any
    dst_id: Any
    site: Any
    response_type: Any = ResponseType.UNKNOWN
    extra: Any
    lat: Optional[Any] = None
    long: Optional[Any] = None


class SiteBroadcastReport(_Envelope):
    sites: Any


class StatusBroadcastReport(_Envelope):
    site: Any
    status: Any


ReportEnvelope = Union[EventReport, SiteBroadcastReport, StatusBroadcastReport]

_payload_adapter: TypeAdapter[Any] = TypeAdapter(Any)


def build_event_report(
    packet_type: Any,
    src_id: Any,
    dst_id: Any,
    site: Any,
    extra: Any,
    timestamp: str,
    response_type: Any = ResponseType.UNKNOWN,
    lat: Optional[Any] = None,
    long: Optional[Any] = None,
) -> EventReport:
    return EventReport(
        type=packet_type,
        src_id=src_id,
        dst_id=dst_id,
        site=site,
        response_type=response_type,
        extra=extra,
        lat=lat,
        long=long,
        timestamp=timestamp,
    )


def build_site_broadcast_report(
    packet_type: Any, site_broadcast: SiteBroadcastLike, timestamp: str
) -> SiteBroadcastReport:
    return SiteBroadcastReport(
        type=packet_type,
        sites=site_broadcast.sites,
        timestamp=timestamp,
    )


def build_status_broadcast_report(
    packet_type: Any, status_broadcast: StatusBroadcastLike, timestamp: str
) -> StatusBroadcastReport:
    return StatusBroadcastReport(
        type=packet_type,
        site=status_broadcast.site,
        status=status_broadcast.status,
        timestamp=timestamp,
    )


def serialize_report(payload: Any) -> bytes:
    """
    Encode any report payload as UTF-8 JSON.

    Pydantic models dump by alias and enums by value. Dataclasses, mappings
    and sequences are handled as well.

    Raises:
        pydantic_core.PydanticSerializationError: if the payload holds a value
            with no JSON representation
    """
    return _payload_adapter.dump_json(payload, by_alias=True)
