from django.db import models


class Employee(models.Model):
    """Employee record"""

    class EmploymentType(models.TextChoices):
        FULL_TIME = 'Full-time', 'Full-time'
        PART_TIME = 'Part-time', 'Part-time'
        CONTRACT = 'Contract', 'Contract'
        INTERN = 'Intern', 'Intern'

    class EmploymentStatus(models.TextChoices):
        ACTIVE = 'Active', 'Active'
        ON_LEAVE = 'On Leave', 'On Leave'
        TERMINATED = 'Terminated', 'Terminated'

    # Basic information
    employee_id = models.CharField(max_length=20, unique=True)
    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    email = models.EmailField()
    phone_number = models.CharField(max_length=30, blank=True)
    date_of_birth = models.DateField()

    # Address
    street = models.CharField(max_length=200, blank=True)
    city = models.CharField(max_length=100, blank=True)
    state = models.CharField(max_length=100, blank=True)
    postal_code = models.CharField(max_length=20, blank=True)
    country = models.CharField(max_length=100, blank=True)

    # Emergency contact
    emergency_name = models.CharField(max_length=200, blank=True)
    emergency_relationship = models.CharField(max_length=100, blank=True)
    emergency_phone_number = models.CharField(max_length=30, blank=True)

    # Employment info
    department = models.CharField(max_length=100)
    job_title = models.CharField(max_length=100)
    employment_type = models.CharField(
        max_length=20,
        choices=EmploymentType.choices,
        default=EmploymentType.FULL_TIME
    )
    hire_date = models.DateField()
    current_salary = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    reporting_manager_id = models.CharField(max_length=20, blank=True)
    work_location = models.CharField(max_length=100, blank=True)
    work_email = models.EmailField(blank=True)
    work_phone = models.CharField(max_length=30, blank=True)
    employment_status = models.CharField(
        max_length=20,
        choices=EmploymentStatus.choices,
        default=EmploymentStatus.ACTIVE
    )

    # Metadata
    created_at = models.DateTimeField(auto_now_add=True)
    created_by = models.CharField(max_length=150, blank=True)
    updated_at = models.DateTimeField(auto_now=True)
    updated_by = models.CharField(max_length=150, blank=True)

    class Meta:
        db_table = 'employees'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['department'], name='employees_departm_6b1f2e_idx'),
            models.Index(fields=['employment_status'], name='employees_employm_3c9a4d_idx'),
        ]

    def __str__(self):
        return f"{self.first_name} {self.last_name} ({self.employee_id})"

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
