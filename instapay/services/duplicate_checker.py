from instapay.utils.logger import get_logger

logger = get_logger(__name__)


class RedisDuplicateChecker:
    """
    Duplicate checker backed by Redis

    The first call for an instruction id claims it with SET NX, so
    concurrent deliveries of the same instruction see exactly one winner.
    """

    DEFAULT_TTL = 86400  # 24 hours

    def __init__(self, client, ttl: int = DEFAULT_TTL):
        self.client = client
        self.ttl = ttl

    @staticmethod
    def get_key(instruction_id: str) -> str:
        return f'instapay:instruction:{instruction_id}'

    def __call__(self, instruction_id: str) -> bool:
        claimed = self.client.set(self.get_key(instruction_id), '1', nx=True, ex=self.ttl)
        if not claimed:
            logger.warning(f'Duplicate instruction_id received: {instruction_id}')
            return True
        return False

    def release(self, instruction_id: str):
        """Forget an instruction id, e.g. after the processor rejected it"""
        self.client.delete(self.get_key(instruction_id))
