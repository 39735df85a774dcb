from .memory_session_store import MemorySessionStore
from .static_identity_verifier import StaticIdentityVerifier

__all__ = ["MemorySessionStore", "StaticIdentityVerifier"]
