from typing import List, Optional, Tuple

from django.db.models import Q

from hr_records.apps.employees.domain.repositories import EmployeeRepository
from hr_records.apps.employees.models import Employee


class EmployeeRepositoryImpl(EmployeeRepository):
    """
    Employee repository backed by the Django ORM.
    """
    def get_by_id(self, employee_id: int) -> Employee:
        return Employee.objects.get(pk=employee_id)

    def create(self, employee: Employee) -> Employee:
        if not employee.employee_id:
            employee.employee_id = self._next_employee_id()
        employee.save()
        return employee

    def update(self, employee: Employee) -> Employee:
        employee.save()
        return employee

    def list_paginated(
        self,
        offset: int,
        limit: int,
        search: str = "",
        department: Optional[str] = None,
        status: Optional[str] = None,
    ) -> Tuple[List[Employee], int]:
        qs = Employee.objects.all()
        if search:
            qs = qs.filter(
                Q(first_name__icontains=search)
                | Q(last_name__icontains=search)
                | Q(employee_id__icontains=search)
                | Q(email__icontains=search)
            )
        if department and department != "all":
            qs = qs.filter(department=department)
        if status and status != "all":
            qs = qs.filter(employment_status=status)
        total = qs.count()
        return list(qs.order_by('-created_at', '-id')[offset:offset + limit]), total

    def _next_employee_id(self) -> str:
        last = (
            Employee.objects.filter(employee_id__startswith='EMP')
            .order_by('-id')
            .values_list('employee_id', flat=True)
            .first()
        )
        digits = last[3:] if last else ''
        num = int(digits) + 1 if digits.isdigit() else Employee.objects.count() + 1
        return f"EMP{str(num).zfill(4)}"
