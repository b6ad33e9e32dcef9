"""Profile storage backends"""

from .profile_store import ProfileStore, InMemoryProfileStore

__all__ = [
    "ProfileStore",
    "InMemoryProfileStore",
]
