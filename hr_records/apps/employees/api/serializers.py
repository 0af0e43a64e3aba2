from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers

from hr_records.apps.employees.models import Employee
from hr_records.apps.employees.validators import validate_date_of_birth, validate_hire_date


class EmployeeSerializer(serializers.ModelSerializer):
    """
    Serializer for the Employee model.
    """
    class Meta:
        model = Employee
        fields = '__all__'
        read_only_fields = ['employee_id', 'created_at', 'created_by', 'updated_at', 'updated_by']

    def validate_date_of_birth(self, value):
        try:
            validate_date_of_birth(value)
        except DjangoValidationError as exc:
            raise serializers.ValidationError(exc.messages)
        return value

    def validate_hire_date(self, value):
        try:
            validate_hire_date(value)
        except DjangoValidationError as exc:
            raise serializers.ValidationError(exc.messages)
        return value


class EmployeeUpdateSerializer(EmployeeSerializer):
    """
    Partial update of an employee; date of birth and hire date are fixed
    once the record exists.
    """
    class Meta(EmployeeSerializer.Meta):
        read_only_fields = EmployeeSerializer.Meta.read_only_fields + ['date_of_birth', 'hire_date']
