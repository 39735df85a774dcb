from abc import ABC, abstractmethod


class IdentityVerifier(ABC):
    """Credential check used by login; swap in a real identity provider here"""

    @abstractmethod
    def verify(self, username: str, password: str) -> bool:
        """True when the username/password pair is valid"""
        pass
