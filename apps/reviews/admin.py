from django.contrib import admin
from .models import Review, ReviewApproval


class ReviewApprovalInline(admin.TabularInline):
    model = ReviewApproval
    extra = 0
    readonly_fields = ['user', 'created_at']
    can_delete = False


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    """Admin interface for Reviews."""

    list_display = [
        'get_pos_name',
        'author',
        'approval_count',
        'approved',
        'created_at'
    ]
    list_filter = [
        'approved',
        'pos__campus',
        'created_at',
    ]
    search_fields = [
        'pos__name',
        'author__email',
        'content'
    ]
    readonly_fields = ['approval_count', 'approved', 'created_at', 'updated_at']
    inlines = [ReviewApprovalInline]
    date_hierarchy = 'created_at'
    ordering = ['-created_at']

    fieldsets = (
        ('Basic Information', {
            'fields': ('pos', 'author', 'content')
        }),
        ('Approval', {
            'fields': ('approval_count', 'approved')
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def get_pos_name(self, obj):
        """Display POS name in list."""
        return obj.pos.name
    get_pos_name.short_description = 'POS'
