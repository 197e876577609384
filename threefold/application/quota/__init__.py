"""Quota application layer: per-identity usage limits on AI features."""
