"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from civic.domain.model import (
    Comment,
    Group,
    GroupJoinRequest,
    Issue,
    Role,
    RoleChangeRequest,
    User,
    Vote,
)
from civic.domain.value import (
    CommentId,
    GroupId,
    IssueId,
    JoinRequestId,
    JoinRequestStatus,
    RoleChangeRequestId,
    RoleChangeStatus,
    RoleId,
    SubjectType,
    UserId,
    VoteId,
)


def _as_uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _as_optional_uuid(value: Any) -> Optional[UUID]:
    return None if value is None else _as_uuid(value)


def row_to_role(row: Dict[str, Any]) -> Role:
    """Convert database row to Role domain model."""
    return Role(
        id=RoleId(_as_uuid(row["id"])),
        title=row["title"],
        description=row.get("description"),
        upvote_weight=row["upvote_weight"],
    )


def role_to_dict(role: Role) -> Dict[str, Any]:
    return role.model_dump()


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_as_uuid(row["id"])),
        username=row["username"],
        full_name=row.get("full_name") or "",
        email=row.get("email"),
        role_id=RoleId(_as_uuid(row["role_id"])),
        is_admin=row["is_admin"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    return user.model_dump()


def row_to_issue(row: Dict[str, Any]) -> Issue:
    """Convert database row to Issue domain model.

    Args:
        row: Database row as dict

    Returns:
        Issue domain model
    """
    group_id = _as_optional_uuid(row.get("group_id"))
    return Issue(
        id=IssueId(_as_uuid(row["id"])),
        title=row["title"],
        description=row["description"],
        owner_id=UserId(_as_uuid(row["owner_id"])),
        group_id=GroupId(group_id) if group_id else None,
        upvote_count=row["upvote_count"],
        comment_count=row["comment_count"],
        posted_at=row["posted_at"],
    )


def issue_to_dict(issue: Issue) -> Dict[str, Any]:
    return issue.model_dump()


def row_to_group(row: Dict[str, Any]) -> Group:
    """Convert database row to Group domain model."""
    return Group(
        id=GroupId(_as_uuid(row["id"])),
        name=row["name"],
        description=row.get("description"),
        owner_id=UserId(_as_uuid(row["owner_id"])),
        upvote_count=row["upvote_count"],
        comment_count=row["comment_count"],
        issue_count=row["issue_count"],
        created_at=row["created_at"],
    )


def group_to_dict(group: Group) -> Dict[str, Any]:
    return group.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_as_uuid(row["id"])),
        subject_type=SubjectType(row["subject_type"]),
        subject_id=_as_uuid(row["subject_id"]),
        author_id=UserId(_as_uuid(row["author_id"])),
        content=row["content"],
        posted_at=row["posted_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Enum columns take the plain string value.
    """
    data = comment.model_dump()
    data["subject_type"] = comment.subject_type.value
    return data


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(_as_uuid(row["id"])),
        subject_type=SubjectType(row["subject_type"]),
        subject_id=_as_uuid(row["subject_id"]),
        voter_id=UserId(_as_uuid(row["voter_id"])),
        weight=row["weight"],
        cast_at=row["cast_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    data = vote.model_dump()
    data["subject_type"] = vote.subject_type.value
    return data


def row_to_join_request(row: Dict[str, Any]) -> GroupJoinRequest:
    """Convert database row to GroupJoinRequest domain model."""
    return GroupJoinRequest(
        id=JoinRequestId(_as_uuid(row["id"])),
        issue_id=IssueId(_as_uuid(row["issue_id"])),
        group_id=GroupId(_as_uuid(row["group_id"])),
        initiated_by_group=row["initiated_by_group"],
        status=JoinRequestStatus(row["status"]),
        requested_at=row["requested_at"],
        handled_at=row.get("handled_at"),
    )


def join_request_to_dict(request: GroupJoinRequest) -> Dict[str, Any]:
    data = request.model_dump()
    data["status"] = request.status.value
    return data


def row_to_role_change_request(row: Dict[str, Any]) -> RoleChangeRequest:
    """Convert database row to RoleChangeRequest domain model."""
    reviewer_id = _as_optional_uuid(row.get("reviewer_id"))
    return RoleChangeRequest(
        id=RoleChangeRequestId(_as_uuid(row["id"])),
        user_id=UserId(_as_uuid(row["user_id"])),
        requested_role_id=RoleId(_as_uuid(row["requested_role_id"])),
        status=RoleChangeStatus(row["status"]),
        submitted_at=row["submitted_at"],
        reviewed_at=row.get("reviewed_at"),
        reviewer_id=UserId(reviewer_id) if reviewer_id else None,
    )


def role_change_request_to_dict(request: RoleChangeRequest) -> Dict[str, Any]:
    data = request.model_dump()
    data["status"] = request.status.value
    return data
