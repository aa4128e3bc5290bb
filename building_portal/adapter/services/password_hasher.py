import bcrypt

from building_portal.app.services.password_hasher import IPasswordHasher


class BcryptPasswordHasher(IPasswordHasher):
    """bcrypt-backed hasher; the cost factor is stored inside each hash"""

    def __init__(self, rounds: int = 12):
        self.rounds = rounds
        self._dummy_hash = None

    def hash(self, password: str) -> str:
        return bcrypt.hashpw(password.encode(), bcrypt.gensalt(self.rounds)).decode()

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode(), password_hash.encode())
        except ValueError:
            # Malformed stored hash
            return False

    def verify_dummy(self, password: str) -> None:
        if self._dummy_hash is None:
            self._dummy_hash = self.hash("dummy_password")
        self.verify(password, self._dummy_hash)
