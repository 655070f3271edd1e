"""
Track View.

Alternative to the graph: a vendor's certifications grouped by domain
(the vendor's track or certification path), each group split into
level buckets ordered from Fundamentals to Specialty.
"""

from typing import Dict, List, Sequence

from pydantic import BaseModel, ConfigDict, Field

from ..core.types import ALL, Cert, Level
from ..graph.layout import LEVEL_ORDER
from .filters import matches_text, vendor_domains


class TrackGroup(BaseModel):
    domain: str
    levels: Dict[Level, List[Cert]] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @property
    def count(self) -> int:
        return sum(len(certs) for certs in self.levels.values())


def group_by_track(certs: Sequence[Cert], domain: str = ALL, query: str = "") -> List[TrackGroup]:
    """
    Group certs by domain.

    Args:
        certs: One vendor's certifications.
        domain: Restrict to a single domain, or "All".
        query: Free-text filter applied to each cert.

    Returns:
        Non-empty groups in sorted domain order. Certs without a domain
        belong to no track.
    """
    domains = vendor_domains(certs)[1:] if domain == ALL else [domain]

    groups = []
    for name in domains:
        buckets: Dict[Level, List[Cert]] = {}
        for level in LEVEL_ORDER:
            members = [
                cert for cert in certs
                if cert.domain == name and cert.level == level and matches_text(cert, query)
            ]
            if members:
                buckets[level] = members
        if buckets:
            groups.append(TrackGroup(domain=name, levels=buckets))
    return groups
