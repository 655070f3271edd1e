"""
Core type definitions for certmap.

Catalog records (Cert, CertLink) mirror the camelCase wire format of the
bundled data file through field aliases; everything else is derived data
handed to a rendering surface. All models are frozen: records are loaded
once and never mutated afterwards.
"""

from enum import StrEnum
from typing import Any, Dict, List, Set

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Synthetic option meaning "no constraint" for the level and domain filters.
ALL = "All"


class Vendor(StrEnum):
    """Organizations issuing certifications."""
    AWS = "AWS"
    AZURE = "Azure"
    GCP = "GCP"
    MICROSOFT = "Microsoft"
    GITHUB = "GitHub"
    REDHAT = "RedHat"
    HASHICORP = "HashiCorp"
    KUBERNETES = "Kubernetes"


class Level(StrEnum):
    """Coarse, cross-vendor seniority tiers. Drives the layout x axis."""
    FUNDAMENTALS = "Fundamentals"
    ASSOCIATE = "Associate"
    PROFESSIONAL_EXPERT = "Professional-Expert"
    SPECIALTY = "Specialty"


class RoleTrack(StrEnum):
    """Role tracks a certification targets."""
    GENERAL = "General"
    ARCHITECT = "Architect"
    DEVOPS = "DevOps"
    DATA_AI = "Data&AI"
    SECURITY = "Security"
    SYSADMIN = "SysAdmin"


class LinkType(StrEnum):
    """Kinds of relationships between two certifications."""
    REQUIRED = "required"
    RECOMMENDED = "recommended"


_RECORD_CONFIG = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class OfficialResource(BaseModel):
    """Link to vendor documentation or training material."""
    title: str
    url: str

    model_config = _RECORD_CONFIG


class Cert(BaseModel):
    """
    One certification, exam or course offered by a vendor.

    Only id, vendor, level, title and roles are used by the layout and
    filter algorithms. The remaining fields are presentation payload.
    """
    id: str
    vendor: Vendor
    level: Level
    level_display: str | None = Field(default=None, alias="levelDisplay")
    title: str
    exam: str | None = None
    code: str | None = None
    roles: List[RoleTrack] = Field(min_length=1)
    roles_display: List[str] | None = Field(default=None, alias="rolesDisplay")
    domain: str | None = None
    url: str | None = None
    description: str | None = None
    price: str | None = None
    last_update: str | None = Field(default=None, alias="lastUpdate")
    score_to_pass: int | None = Field(default=None, alias="scoreToPass")
    prerequisites: str | None = None
    validity_period: str | None = Field(default=None, alias="validityPeriod")
    exam_length: str | None = Field(default=None, alias="examLength")
    exam_format: str | None = Field(default=None, alias="examFormat")
    exam_languages: List[str] | None = Field(default=None, alias="examLanguages")
    renewal_available: bool | None = Field(default=None, alias="renewalAvailable")
    renewal_price: str | None = Field(default=None, alias="renewalPrice")
    official_resources: List[OfficialResource] | None = Field(
        default=None, alias="officialResources"
    )

    model_config = _RECORD_CONFIG

    @field_validator("domain", mode="before")
    @classmethod
    def _strip_domain(cls, value: Any) -> Any:
        # Blank or padded domains would otherwise show up as separate filter options
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    @property
    def display_level(self) -> str:
        """Vendor-specific level name, falling back to the coarse level."""
        if self.level_display is not None:
            return self.level_display
        return self.level.value

    def to_wire(self) -> Dict[str, Any]:
        """Serialize back to the camelCase import format."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class CertLink(BaseModel):
    """Directed relationship between two certifications."""
    id: str
    source_id: str = Field(alias="sourceId")
    target_id: str = Field(alias="targetId")
    type: LinkType
    training_title: str | None = Field(default=None, alias="trainingTitle")
    training_url: str | None = Field(default=None, alias="trainingUrl")

    model_config = _RECORD_CONFIG

    @property
    def is_required(self) -> bool:
        return self.type == LinkType.REQUIRED

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Catalog(BaseModel):
    """Validated, order-preserving catalog of certifications and links."""
    certs: List[Cert] = Field(default_factory=list)
    links: List[CertLink] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def get_cert(self, cert_id: str) -> Cert | None:
        for cert in self.certs:
            if cert.id == cert_id:
                return cert
        return None

    def vendors(self) -> List[Vendor]:
        """Vendors present in the catalog, in enumeration order."""
        present = {cert.vendor for cert in self.certs}
        return [vendor for vendor in Vendor if vendor in present]

    def to_wire(self) -> Dict[str, Any]:
        return {
            "certs": [cert.to_wire() for cert in self.certs],
            "links": [link.to_wire() for link in self.links],
        }


# =============================================================================
# Derived graph structures
# =============================================================================

class Position(BaseModel):
    """2D coordinates of a node on the canvas."""
    x: float
    y: float

    model_config = ConfigDict(frozen=True)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


class EdgeStyle(BaseModel):
    """Visual treatment of an edge, derived from its link type."""
    stroke: str
    stroke_width: float
    dash: str | None = None
    marker: str = "arrowclosed"
    marker_color: str

    model_config = ConfigDict(frozen=True)


class FlowNode(BaseModel):
    """Positioned certification ready for rendering."""
    id: str
    position: Position
    cert: Cert

    model_config = ConfigDict(frozen=True)


class FlowEdge(BaseModel):
    """Styled directed edge ready for rendering."""
    id: str
    source: str
    target: str
    type: LinkType
    style: EdgeStyle
    label: str | None = None
    url: str | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_required(self) -> bool:
        return self.type == LinkType.REQUIRED


class FlowGraph(BaseModel):
    """Node and edge lists for one vendor, in input order."""
    nodes: List[FlowNode] = Field(default_factory=list)
    edges: List[FlowEdge] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def node_ids(self) -> Set[str]:
        return {node.id for node in self.nodes}

    @property
    def edge_ids(self) -> Set[str]:
        return {edge.id for edge in self.edges}


class VisibleGraph(FlowGraph):
    """Subgraph that survives the current filter state."""


class FilterState(BaseModel):
    """
    Complete control surface of the view.

    Immutable: state transitions produce new values, which makes the
    state usable as a memoization key.
    """
    vendor: Vendor = Vendor.AWS
    level: str = ALL
    domain: str = ALL
    query: str = ""
    show_recommended: bool = True

    model_config = ConfigDict(frozen=True)

    @property
    def normalized_query(self) -> str:
        return self.query.strip()

    def reset(self) -> "FilterState":
        """Clear level, domain and query filters, keeping the vendor."""
        return FilterState(vendor=self.vendor)

    def with_vendor(self, vendor: Vendor | str) -> "FilterState":
        """Switch vendor. Level, domain and query do not carry over."""
        return FilterState(vendor=Vendor(vendor), show_recommended=self.show_recommended)

    def with_changes(self, **changes: Any) -> "FilterState":
        return self.model_validate({**self.model_dump(), **changes})
