"""Role change request domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from civic.domain.error import ConflictError, ForbiddenError, NotFoundError
from civic.domain.model.role_change_request import RoleChangeRequest
from civic.domain.repository import (
    RoleChangeRequestRepository,
    RoleRepository,
    TransactionManager,
    UserRepository,
    constraint,
)
from civic.domain.value import (
    RoleChangeDecision,
    RoleChangeRequestId,
    RoleId,
    UserId,
)

from . import policy
from .base import Service


class RoleChangeService(Service):
    """Domain service for role change requests.

    Approval changes the weight of the user's future votes only: existing
    vote rows keep the weight they were cast with.
    """

    def __init__(
        self,
        role_change_request_repository: RoleChangeRequestRepository,
        user_repository: UserRepository,
        role_repository: RoleRepository,
        transaction_manager: TransactionManager,
    ) -> None:
        self.role_change_request_repository = role_change_request_repository
        self.user_repository = user_repository
        self.role_repository = role_repository
        self.transaction_manager = transaction_manager

    async def submit(self, user_id: UserId, requested_role_id: RoleId) -> RoleChangeRequest:
        """Ask to be moved to another role.

        Raises:
            NotFoundError: If the user or the requested role does not exist
            ConflictError: If the user already has a pending request, or
                already holds the requested role
        """
        with logfire.span(
            "role_change_service.submit",
            user_id=str(user_id),
            requested_role_id=str(requested_role_id),
        ):
            try:
                async with self.transaction_manager.atomic():
                    user = await self.user_repository.find_by_id(user_id, for_update=True)
                    if user is None:
                        raise NotFoundError("User", str(user_id))

                    if await self.role_change_request_repository.find_pending_by_user(
                        user_id
                    ):
                        raise ConflictError("User already has a pending role change request")

                    if user.role_id == requested_role_id:
                        raise ConflictError("User already holds the requested role")

                    if await self.role_repository.find_by_id(requested_role_id) is None:
                        raise NotFoundError("Role", str(requested_role_id))

                    request = RoleChangeRequest(
                        id=RoleChangeRequestId(uuid4()),
                        user_id=user_id,
                        requested_role_id=requested_role_id,
                        submitted_at=datetime.now(),
                    )
                    saved = await self.role_change_request_repository.save(request)
            except IntegrityError as e:
                if not constraint.violates(e, constraint.PENDING_ROLE_CHANGE_REQUEST):
                    raise
                raise ConflictError("User already has a pending role change request")

            logfire.info("Role change requested", request_id=str(saved.id))
            return saved

    async def decide(
        self,
        request_id: RoleChangeRequestId,
        reviewer_id: UserId,
        decision: RoleChangeDecision,
    ) -> RoleChangeRequest:
        """Approve or reject a pending request.

        On approval the user's role assignment and the request's review
        fields are written in one atomic block.

        Raises:
            NotFoundError: If the request (or, on approval, the role) does not exist
            ConflictError: If the request was already reviewed
            ForbiddenError: If the reviewer is not an administrator
        """
        with logfire.span(
            "role_change_service.decide",
            request_id=str(request_id),
            reviewer_id=str(reviewer_id),
            decision=decision.value,
        ):
            async with self.transaction_manager.atomic():
                request = await self.role_change_request_repository.find_by_id(
                    request_id, for_update=True
                )
                if request is None:
                    raise NotFoundError("Role change request", str(request_id))
                if not request.is_pending:
                    raise ConflictError(
                        f"Role change request is already {request.status.value}"
                    )

                reviewer = await self.user_repository.find_by_id(reviewer_id)
                if not policy.can_review_role_change(reviewer):
                    raise ForbiddenError(
                        str(reviewer_id), "review role change request", str(request_id)
                    )

                if decision == RoleChangeDecision.APPROVED:
                    role = await self.role_repository.find_by_id(request.requested_role_id)
                    if role is None:
                        raise NotFoundError("Role", str(request.requested_role_id))
                    await self.user_repository.update_role(
                        request.user_id, request.requested_role_id
                    )

                updated = await self.role_change_request_repository.update_review(
                    request_id, decision.status, datetime.now(), reviewer_id
                )

            logfire.info(
                "Role change request reviewed",
                request_id=str(request_id),
                status=updated.status.value,
            )
            return updated

    async def list_pending(self, reviewer_id: UserId) -> list[RoleChangeRequest]:
        """List the review queue, oldest first.

        Raises:
            ForbiddenError: If the reviewer is not an administrator
        """
        reviewer = await self.user_repository.find_by_id(reviewer_id)
        if not policy.can_review_role_change(reviewer):
            raise ForbiddenError(str(reviewer_id), "list", "role change requests")
        return await self.role_change_request_repository.find_pending()
