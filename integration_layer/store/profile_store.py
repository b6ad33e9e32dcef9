"""
Profile store interface.

Abstracts where users and platform profiles come from so the aggregation
service works with any backing source (in-memory fixtures, a database,
platform APIs) and tests can inject a fake.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional, Set

from integration_layer.models import (
    CommerceProfile,
    FinanceProfile,
    GamingProfile,
    User,
)


class ProfileStore(ABC):
    """
    Abstract source of users and their platform profiles.

    Profile getters never fail: a user with no record on a platform gets
    that platform's empty profile.
    """

    @abstractmethod
    def get_user(self, user_id: str) -> Optional[User]:
        """
        Look up the core identity.

        Returns:
            The user, or None if no such user exists
        """
        pass

    @abstractmethod
    def get_commerce_profile(self, user_id: str) -> CommerceProfile:
        pass

    @abstractmethod
    def get_gaming_profile(self, user_id: str) -> GamingProfile:
        pass

    @abstractmethod
    def get_finance_profile(self, user_id: str) -> FinanceProfile:
        pass

    @abstractmethod
    def list_user_ids(self) -> Set[str]:
        pass


class InMemoryProfileStore(ProfileStore):
    """
    Dictionary-backed store.

    Tables are copied on construction and never mutated afterwards, so one
    instance can be shared across concurrent requests.
    """

    def __init__(
        self,
        users: Iterable[User] = (),
        commerce_profiles: Iterable[CommerceProfile] = (),
        gaming_profiles: Iterable[GamingProfile] = (),
        finance_profiles: Iterable[FinanceProfile] = ()
    ):
        self._users: Dict[str, User] = {user.id: user for user in users}
        self._commerce: Dict[str, CommerceProfile] = {p.user_id: p for p in commerce_profiles}
        self._gaming: Dict[str, GamingProfile] = {p.user_id: p for p in gaming_profiles}
        self._finance: Dict[str, FinanceProfile] = {p.user_id: p for p in finance_profiles}

    @classmethod
    def with_fixture_data(cls) -> "InMemoryProfileStore":
        """Store seeded with the demo users."""
        from integration_layer.store import fixtures

        return cls(
            users=fixtures.USERS,
            commerce_profiles=fixtures.COMMERCE_PROFILES,
            gaming_profiles=fixtures.GAMING_PROFILES,
            finance_profiles=fixtures.FINANCE_PROFILES,
        )

    def get_user(self, user_id: str) -> Optional[User]:
        return self._users.get(user_id)

    def get_commerce_profile(self, user_id: str) -> CommerceProfile:
        return self._commerce.get(user_id) or CommerceProfile.empty(user_id)

    def get_gaming_profile(self, user_id: str) -> GamingProfile:
        return self._gaming.get(user_id) or GamingProfile.empty(user_id)

    def get_finance_profile(self, user_id: str) -> FinanceProfile:
        return self._finance.get(user_id) or FinanceProfile.empty(user_id)

    def list_user_ids(self) -> Set[str]:
        return set(self._users)
