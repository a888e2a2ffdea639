"""
Radio-network domain types consumed by the reporter.

The reporter passes these through to the collector unexamined, apart from
reading ``sites``, ``site`` and ``status`` off the broadcast records.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional, Protocol, Sequence

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal


class PacketType(str, Enum):
    """
    Packet types exchanged on the radio network.
    """

    UNKNOWN = "UNKNOWN"
    AUDIO_DATA = "AUDIO_DATA"
    GRP_AFF_REQ = "GRP_AFF_REQ"
    GRP_AFF_RSP = "GRP_AFF_RSP"
    AFF_UPDATE = "AFF_UPDATE"
    GRP_VCH_REQ = "GRP_VCH_REQ"
    GRP_VCH_RLS = "GRP_VCH_RLS"
    GRP_VCH_RSP = "GRP_VCH_RSP"
    U_REG_REQ = "U_REG_REQ"
    U_REG_RSP = "U_REG_RSP"
    U_DE_REG_REQ = "U_DE_REG_REQ"
    U_DE_REG_RSP = "U_DE_REG_RSP"
    EMRG_ALRM_REQ = "EMRG_ALRM_REQ"
    EMRG_ALRM_RSP = "EMRG_ALRM_RSP"
    CALL_ALRT = "CALL_ALRT"
    CALL_ALRT_REQ = "CALL_ALRT_REQ"
    REL_DEMAND = "REL_DEMAND"
    UNIT_CHECK_REQ = "UNIT_CHECK_REQ"
    UNIT_CHECK_RSP = "UNIT_CHECK_RSP"
    STS_BCAST = "STS_BCAST"
    SITE_BCAST = "SITE_BCAST"
    LOC_BCAST = "LOC_BCAST"
    SPEC_FUNC = "SPEC_FUNC"
    ACK_RSP = "ACK_RSP"

    def __str__(self) -> str:
        return self.value


class ResponseType(str, Enum):
    """
    Outcome of a request as answered by the network.
    """

    UNKNOWN = "UNKNOWN"
    GRANT = "GRANT"
    DENY = "DENY"
    REFUSE = "REFUSE"
    FAIL = "FAIL"
    QUEUE = "QUEUE"

    def __str__(self) -> str:
        return self.value


class _DomainModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        frozen=True,
    )


class Location(_DomainModel):
    latitude: str
    longitude: str


class Site(_DomainModel):
    """
    A radio site as advertised by the network.
    """

    name: str
    control_channel: Optional[str] = None
    voice_channels: List[str] = Field(default_factory=list)
    location: Optional[Location] = None
    system_id: str = Field(default="", alias="SystemID")
    site_id: str = Field(default="", alias="SiteID")
    range: float = 0.0


class SiteBroadcast(_DomainModel):
    sites: List[Site] = Field(default_factory=list)


class StatusBroadcast(_DomainModel):
    site: Site
    status: Any = None


class SiteBroadcastLike(Protocol):
    @property
    def sites(self) -> Sequence[Any]: ...


class StatusBroadcastLike(Protocol):
    @property
    def site(self) -> Any: ...

    @property
    def status(self) -> Any: ...
