from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from hr_records.apps.employees.models import Employee


class EmployeeRepository(ABC):
    """
    Abstract repository for employee records.
    Concrete implementations must follow this contract.
    """
    @abstractmethod
    def get_by_id(self, employee_id: int) -> Employee:
        pass

    @abstractmethod
    def create(self, employee: Employee) -> Employee:
        pass

    @abstractmethod
    def update(self, employee: Employee) -> Employee:
        pass

    @abstractmethod
    def list_paginated(
        self,
        offset: int,
        limit: int,
        search: str = "",
        department: Optional[str] = None,
        status: Optional[str] = None,
    ) -> Tuple[List[Employee], int]:
        pass
