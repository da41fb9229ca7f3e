"""Actor identification.

Authentication happens upstream; the identity provider forwards the
authenticated user's ID in the ``X-User-Id`` header.
"""

from typing import Annotated
from uuid import UUID

from fastapi import Header

ActorId = Annotated[UUID, Header(alias="X-User-Id")]
