from django.contrib import admin
from .models import Pos


@admin.register(Pos)
class PosAdmin(admin.ModelAdmin):
    """Admin interface for points of sale."""

    list_display = ['name', 'type', 'campus', 'city', 'review_count', 'created_at']
    list_filter = ['type', 'campus']
    search_fields = ['name', 'street', 'city']
    readonly_fields = ['created_at', 'updated_at']
    ordering = ['name']

    fieldsets = (
        ('Basic Information', {
            'fields': ('name', 'description', 'type', 'campus')
        }),
        ('Address', {
            'fields': ('street', 'house_number', 'postal_code', 'city')
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def review_count(self, obj):
        """Show how many reviews the POS has."""
        return obj.reviews.count()
    review_count.short_description = 'Reviews'
