from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from hr_records.apps.auth.models import User


class UserRepository(ABC):
    """
    Abstract repository for user accounts.
    """
    @abstractmethod
    def get_by_id(self, user_id: int) -> User:
        pass

    @abstractmethod
    def create(self, user: User) -> User:
        pass

    @abstractmethod
    def update(self, user: User) -> User:
        pass

    @abstractmethod
    def delete(self, user: User) -> None:
        pass

    @abstractmethod
    def list_paginated(
        self,
        offset: int,
        limit: int,
        search: str = "",
        role: Optional[str] = None,
    ) -> Tuple[List[User], int]:
        pass

    @abstractmethod
    def email_in_use(self, email: str, exclude_id: Optional[int] = None) -> bool:
        pass
