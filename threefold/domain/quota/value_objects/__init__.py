from .usage import QuotaDecision, QuotaPolicy, UsageRecord

__all__ = ["QuotaDecision", "QuotaPolicy", "UsageRecord"]
