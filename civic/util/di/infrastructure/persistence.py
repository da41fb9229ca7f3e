"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from civic.config import DatabaseSettings
from civic.domain.repository import (
    CommentRepository,
    GroupRepository,
    IssueRepository,
    JoinRequestRepository,
    RoleChangeRequestRepository,
    RoleRepository,
    TransactionManager,
    UserRepository,
    VoteRepository,
)
from civic.persistence.database import create_engine, create_session_factory
from civic.persistence.repository import (
    PostgresCommentRepository,
    PostgresGroupRepository,
    PostgresIssueRepository,
    PostgresJoinRequestRepository,
    PostgresRoleChangeRequestRepository,
    PostgresRoleRepository,
    PostgresTransactionManager,
    PostgresUserRepository,
    PostgresVoteRepository,
)
from civic.util.di.base import ProviderBase
from civic.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, database: DatabaseSettings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(database)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is committed at the end of the request if no exception
        occurred, or rolled back if an exception was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_transaction_manager(self, session: AsyncSession) -> TransactionManager:
        return PostgresTransactionManager(session)

    @provide(scope=Scope.REQUEST)
    def get_role_repository(self, session: AsyncSession) -> RoleRepository:
        return PostgresRoleRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_issue_repository(self, session: AsyncSession) -> IssueRepository:
        return PostgresIssueRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_group_repository(self, session: AsyncSession) -> GroupRepository:
        return PostgresGroupRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        return PostgresVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_join_request_repository(
        self, session: AsyncSession
    ) -> JoinRequestRepository:
        return PostgresJoinRequestRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_role_change_request_repository(
        self, session: AsyncSession
    ) -> RoleChangeRequestRepository:
        return PostgresRoleChangeRequestRepository(session)
