# Redis factory
import redis
from srp_auth.config.settings import settings

# singleton client for the pending authentication store

_pending_redis = None

def get_pending_redis() -> redis.Redis:
    global _pending_redis
    if _pending_redis is None:
        _pending_redis = redis.Redis.from_url(settings.redis_url, decode_responses=True)
    return _pending_redis
