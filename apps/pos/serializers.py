from rest_framework import serializers
from .models import PosType, Campus


class PosSerializer(serializers.Serializer):
    """Point of sale, read from and mapped to the POS value."""

    id = serializers.UUIDField(read_only=True)
    name = serializers.CharField(max_length=200)
    description = serializers.CharField(required=False, allow_blank=True, default='')
    type = serializers.ChoiceField(choices=PosType.choices)
    campus = serializers.ChoiceField(choices=Campus.choices)
    street = serializers.CharField(max_length=200)
    house_number = serializers.CharField(max_length=10)
    postal_code = serializers.CharField(max_length=10)
    city = serializers.CharField(max_length=100)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Name cannot be empty.')
        return value
