"""Role entity.

A role carries the weight applied to every vote cast by its holders.
"""

from typing import Optional

from pydantic import Field

from civic.domain.model.common import DomainModel
from civic.domain.value import RoleId


class Role(DomainModel):
    """Role entity."""

    id: RoleId
    title: str = Field(min_length=1, max_length=100)
    description: Optional[str] = None
    upvote_weight: int = Field(default=1, ge=1)
