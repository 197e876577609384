"""Mapper for UsageRecord ORM ↔ Domain conversion."""

from datetime import UTC, datetime, timedelta

from threefold.domain.quota.value_objects.usage import UsageRecord
from threefold.infrastructure.common.clock import ensure_utc
from threefold.models import UsageRecord as UsageRecordORM

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
ONE_MILLISECOND = timedelta(milliseconds=1)


def to_epoch_ms(value: datetime) -> int:
    # Floors to whole milliseconds; a later retry-after may come out up to 1 ms short.
    return (ensure_utc(value) - EPOCH) // ONE_MILLISECOND


def from_epoch_ms(value: int) -> datetime:
    return EPOCH + value * ONE_MILLISECOND


class UsageRecordMapper:
    def to_domain(self, orm_model: UsageRecordORM) -> UsageRecord:
        return UsageRecord(
            identity=orm_model.identity_key,
            timestamps=tuple(from_epoch_ms(ms) for ms in orm_model.timestamps),
        )

    def to_orm(
        self, domain_entity: UsageRecord, orm_model: UsageRecordORM | None = None
    ) -> UsageRecordORM:
        timestamps = [to_epoch_ms(t) for t in domain_entity.timestamps]
        if orm_model:
            orm_model.timestamps = timestamps
            return orm_model

        return UsageRecordORM(identity_key=domain_entity.identity, timestamps=timestamps)
