"""Repository for per-identity usage records."""

from collections.abc import Callable

import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from threefold.domain.quota.value_objects.usage import UsageRecord
from threefold.exceptions import ConcurrentUpdateConflictError, PersistenceUnavailableError
from threefold.infrastructure.quota.mappers.usage_record_mapper import UsageRecordMapper
from threefold.models import UsageRecord as UsageRecordORM

logger = structlog.get_logger(__name__)


class UsageRecordRepository:
    """
    Usage records with optimistic concurrency.

    Updates are guarded by the row's version column; a concurrent first
    insert is caught by the unique identity key. Either case surfaces as
    ConcurrentUpdateConflictError and leaves the stored record untouched.
    """

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = UsageRecordMapper()

    def _find(self, identity_key: str) -> UsageRecordORM | None:
        stmt = select(UsageRecordORM).where(UsageRecordORM.identity_key == identity_key)
        return self.db.execute(stmt).scalar_one_or_none()

    def get(self, identity_key: str) -> UsageRecord | None:
        try:
            orm_model = self._find(identity_key)
        except OperationalError as e:
            self.db.rollback()
            raise PersistenceUnavailableError("usage record read") from e
        return self.mapper.to_domain(orm_model) if orm_model else None

    def transactional_update(
        self,
        identity_key: str,
        update: Callable[[UsageRecord], UsageRecord],
    ) -> UsageRecord:
        try:
            orm_model = self._find(identity_key)
            current = (
                self.mapper.to_domain(orm_model) if orm_model else UsageRecord.empty(identity_key)
            )
            updated = update(current)
            if updated == current:
                return current

            if orm_model is None:
                self.db.add(self.mapper.to_orm(updated))
            else:
                self.mapper.to_orm(updated, orm_model)
            self.db.commit()
        except (StaleDataError, IntegrityError) as e:
            self.db.rollback()
            logger.warning("usage_record_conflict", identity=identity_key)
            raise ConcurrentUpdateConflictError(identity_key) from e
        except OperationalError as e:
            self.db.rollback()
            logger.error("usage_record_store_unavailable", identity=identity_key, error=str(e))
            raise PersistenceUnavailableError("usage record update") from e

        return updated
