from .usage_quota_tracker import UsageQuotaTracker

__all__ = ["UsageQuotaTracker"]
