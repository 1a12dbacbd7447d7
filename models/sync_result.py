"""
Result types for tier role synchronization.

TierCreationOutcome is the per-tier result of the catalog pass.
SyncResult is what the /role command receives back from role_sync.sync().
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional

from models.tier import Tier


class SyncStatus(Enum):
    APPLIED = "applied"
    NO_RANKED_DATA = "no_ranked_data"
    ROLE_NOT_FOUND = "role_not_found"
    PARTIAL_CATALOG_FAILURE = "partial_catalog_failure"


@dataclass
class TierCreationOutcome:
    """
    What happened to one tier during ensure_all_tiers_exist().

    Exactly one of these holds:
    - existed: the role was already in the directory
    - created: the role was created in this pass (role is the new handle)
    - error is set: creation was attempted and failed
    """

    tier: Tier
    role: Optional[Any] = None
    existed: bool = False
    created: bool = False
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class SyncResult:
    """
    Outcome of a role sync for one member.

    tier is the tier that ended up applied (None when nothing was applied).
    failed_tiers lists tiers whose role could not be created in this run.
    """

    status: SyncStatus
    tier: Optional[Tier] = None
    failed_tiers: List[Tier] = field(default_factory=list)
    roles_changed: bool = False

    @property
    def applied(self) -> bool:
        """True when the member now holds the classified tier role."""
        return self.status in (SyncStatus.APPLIED, SyncStatus.PARTIAL_CATALOG_FAILURE)
