from .aggregator import AGE_BUCKETS, age_bucket, get_stats

__all__ = ["AGE_BUCKETS", "age_bucket", "get_stats"]
