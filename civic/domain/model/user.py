"""User entity.

Credentials and profile data belong to the identity provider; the core
only needs the role assignment and whether the user may review role
change requests.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from civic.domain.model.common import DomainModel
from civic.domain.value import RoleId, UserId


class User(DomainModel):
    """User entity.

    The vote weight is not stored here: it is resolved through ``role_id``
    each time a vote is cast.
    """

    id: UserId
    username: str = Field(min_length=1, max_length=100)
    full_name: str = Field(default="", max_length=200)
    email: Optional[str] = None
    role_id: RoleId
    is_admin: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
