from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """User account of the HR system"""

    class RoleLevel(models.TextChoices):
        ADMIN = 'ADMIN', 'Administrator'
        HR = 'HR', 'HR'
        USER = 'USER', 'User'

    user_id = models.CharField(max_length=20, unique=True, null=True, blank=True)
    full_name = models.CharField(max_length=200, blank=True)
    role_level = models.CharField(
        max_length=10,
        choices=RoleLevel.choices,
        default=RoleLevel.USER
    )

    created_by = models.CharField(max_length=150, blank=True)
    updated_at = models.DateTimeField(auto_now=True)
    updated_by = models.CharField(max_length=150, blank=True)

    class Meta:
        db_table = 'users'
        ordering = ['-date_joined']

    def __str__(self):
        return self.full_name or self.username

    @property
    def effective_role(self) -> str:
        """Superusers act as administrators."""
        return self.RoleLevel.ADMIN if self.is_superuser else self.role_level

    @property
    def is_admin(self) -> bool:
        return self.effective_role == self.RoleLevel.ADMIN

    @property
    def is_hr(self) -> bool:
        return self.effective_role == self.RoleLevel.HR
