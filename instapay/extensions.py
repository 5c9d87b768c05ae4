import redis


class RedisClient:
    def __init__(self):
        self.client = None

    def init_app(self, app):
        self.client = redis.from_url(app.config['REDIS_URL'], decode_responses=True)

    def set(self, key, value, ex=None, nx=False):
        return self.client.set(key, value, ex=ex, nx=nx)

    def delete(self, key):
        return self.client.delete(key)


redis_client = RedisClient()
