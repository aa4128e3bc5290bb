from abc import ABC, abstractmethod


class IPasswordHasher(ABC):
    """One-way password hashing and verification"""

    @abstractmethod
    def hash(self, password: str) -> str:
        pass

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        pass

    @abstractmethod
    def verify_dummy(self, password: str) -> None:
        """Spend the same time as a real verification (unknown user)"""
        pass
