from django.contrib import admin

from .models import Message


@admin.register(Message)
class MessageAdmin(admin.ModelAdmin):
    list_display = ('title', 'message_type', 'visibility', 'created_by', 'created_at')
    list_filter = ('message_type', 'visibility', 'created_at')
    search_fields = ('title', 'content', 'created_by__email')
    readonly_fields = ('created_at', 'updated_at')
    date_hierarchy = 'created_at'
    raw_id_fields = ('created_by',)
