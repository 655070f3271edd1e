"""
Layout Engine.

Places certifications on a grid:

- x is the column of the certification's level (Fundamentals left,
  Specialty right).
- y is the slot of the certification within its (vendor, level) group,
  counted in input order starting at 0.

The result depends only on the input order and the options, so repeated
layouts of the same catalog are identical.
"""

import logging
from collections import defaultdict
from typing import TYPE_CHECKING, Dict, List, Sequence, Tuple

from pydantic import BaseModel, ConfigDict

from .. import config
from ..core.errors import IntegrityFault
from ..core.types import Cert, Level, Position, Vendor

if TYPE_CHECKING:
    from ..config import CertmapConfig

logger = logging.getLogger(__name__)

LEVEL_ORDER: List[Level] = [
    Level.FUNDAMENTALS,
    Level.ASSOCIATE,
    Level.PROFESSIONAL_EXPERT,
    Level.SPECIALTY,
]


class LayoutOptions(BaseModel):
    """Spacing of the layout grid, in canvas units."""
    x_gap: float = config.DEFAULT_X_GAP
    y_gap: float = config.DEFAULT_Y_GAP
    x_offset: float = config.DEFAULT_X_OFFSET
    y_offset: float = config.DEFAULT_Y_OFFSET

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_config(cls, cfg: "CertmapConfig") -> "LayoutOptions":
        return cls(**cfg.layout.model_dump())


def level_index(level: Level | str) -> int:
    """
    Ordinal column of a level.

    Raises:
        IntegrityFault: For a level outside LEVEL_ORDER. Validated records
            can never carry one.
    """
    try:
        return LEVEL_ORDER.index(Level(level))
    except ValueError:
        raise IntegrityFault(f"Unranked level: {level!r}") from None


def assign_slots(certs: Sequence[Cert]) -> Dict[str, int]:
    """Zero-based slot of each cert within its (vendor, level) group."""
    counters: Dict[Tuple[Vendor, Level], int] = defaultdict(int)
    slots: Dict[str, int] = {}
    for cert in certs:
        key = (cert.vendor, cert.level)
        slots[cert.id] = counters[key]
        counters[key] += 1
    return slots


def compute_positions(
    certs: Sequence[Cert],
    options: LayoutOptions | None = None,
) -> Dict[str, Position]:
    """
    Compute the canvas position of every certification.

    Args:
        certs: Certifications in display order, normally one vendor's.
        options: Grid spacing. Defaults to 400/160 gaps and 40/40 offsets.

    Returns:
        Mapping of cert id to Position, in input order.
    """
    opts = options or LayoutOptions()
    slots = assign_slots(certs)

    positions: Dict[str, Position] = {}
    for cert in certs:
        x = opts.x_offset + level_index(cert.level) * opts.x_gap
        y = opts.y_offset + slots[cert.id] * opts.y_gap
        positions[cert.id] = Position(x=x, y=y)

    logger.debug(f"Placed {len(positions)} certs")
    return positions
