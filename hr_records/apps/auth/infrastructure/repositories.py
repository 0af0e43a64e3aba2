from typing import List, Optional, Tuple

from django.db.models import Q

from hr_records.apps.auth.domain.repositories import UserRepository
from hr_records.apps.auth.models import User


class UserRepositoryImpl(UserRepository):
    """
    User repository backed by the Django ORM.
    """
    def get_by_id(self, user_id: int) -> User:
        return User.objects.get(pk=user_id)

    def create(self, user: User) -> User:
        if not user.user_id:
            user.user_id = self._next_user_id()
        user.save()
        return user

    def update(self, user: User) -> User:
        user.save()
        return user

    def delete(self, user: User) -> None:
        user.delete()

    def list_paginated(
        self,
        offset: int,
        limit: int,
        search: str = "",
        role: Optional[str] = None,
    ) -> Tuple[List[User], int]:
        qs = User.objects.all()
        if search:
            qs = qs.filter(
                Q(username__icontains=search)
                | Q(full_name__icontains=search)
                | Q(email__icontains=search)
                | Q(user_id__icontains=search)
            )
        if role and role != "all":
            qs = qs.filter(role_level=role)
        total = qs.count()
        return list(qs.order_by('-date_joined', '-id')[offset:offset + limit]), total

    def email_in_use(self, email: str, exclude_id: Optional[int] = None) -> bool:
        qs = User.objects.filter(email__iexact=email)
        if exclude_id is not None:
            qs = qs.exclude(pk=exclude_id)
        return qs.exists()

    def _next_user_id(self) -> str:
        last = (
            User.objects.filter(user_id__startswith='USR')
            .order_by('-id')
            .values_list('user_id', flat=True)
            .first()
        )
        digits = last[3:] if last else ''
        num = int(digits) + 1 if digits.isdigit() else User.objects.count() + 1
        return f"USR{str(num).zfill(4)}"
