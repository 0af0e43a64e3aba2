from dataclasses import dataclass

from django.db import models

from .exceptions import InvalidActorError


class ActionType(models.TextChoices):
    CREATE = 'CREATE', 'Create'
    UPDATE = 'UPDATE', 'Update'
    DELETE = 'DELETE', 'Delete'


class SubjectType(models.TextChoices):
    EMPLOYEE = 'employee', 'Employee'
    USER = 'user', 'User'


@dataclass(frozen=True)
class Actor:
    """Identity of the caller making a change."""
    id: str
    name: str

    def __str__(self):
        return self.name or self.id

    @classmethod
    def from_user(cls, user) -> "Actor":
        if user is None or not getattr(user, 'is_authenticated', False):
            raise InvalidActorError("An authenticated user is required to change records.")
        return cls(id=str(user.pk), name=user.get_username())
