from .usage_record_repository import UsageRecordRepositoryProtocol

__all__ = ["UsageRecordRepositoryProtocol"]
