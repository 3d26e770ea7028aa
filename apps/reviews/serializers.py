from rest_framework import serializers


class UserMinimalSerializer(serializers.Serializer):
    """Minimal user info for nested serialization."""

    id = serializers.UUIDField(read_only=True)
    email = serializers.EmailField(read_only=True)
    display_name = serializers.SerializerMethodField()

    def get_display_name(self, obj):
        return obj.get_display_name()


class PosMinimalSerializer(serializers.Serializer):
    """Minimal POS info for nested serialization."""

    id = serializers.UUIDField(read_only=True)
    name = serializers.CharField(read_only=True)
    campus = serializers.CharField(read_only=True)


class ReviewSerializer(serializers.Serializer):
    """Main review serializer, reads review values."""

    id = serializers.UUIDField(read_only=True)
    pos_id = serializers.UUIDField(source='pos.id', read_only=True)
    pos_detail = PosMinimalSerializer(source='pos', read_only=True)
    author = UserMinimalSerializer(read_only=True)
    content = serializers.CharField(read_only=True)
    approval_count = serializers.IntegerField(read_only=True)
    approved = serializers.BooleanField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)


class ReviewCreateSerializer(serializers.Serializer):
    """Input for review submission. The author is the requesting user."""

    pos_id = serializers.UUIDField()
    content = serializers.CharField(
        error_messages={'blank': 'Review content cannot be empty.'}
    )


class ReviewFilterSerializer(serializers.Serializer):
    """Query parameters for filtering the reviews of a POS."""

    pos_id = serializers.UUIDField()
    approved = serializers.BooleanField()
