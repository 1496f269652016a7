from redis import Redis

from .config import settings

# None when REDIS_URL is not configured: schedule reads go straight to the DB
redis_client: Redis | None = (
    Redis.from_url(settings.redis_url, decode_responses=True)
    if settings.redis_url
    else None
)
