from django.contrib import admin

from .models import CalendarEvent


@admin.register(CalendarEvent)
class CalendarEventAdmin(admin.ModelAdmin):
    list_display = ('title', 'start_date', 'end_date', 'location', 'visibility', 'created_by')
    list_filter = ('visibility', 'start_date')
    search_fields = ('title', 'description', 'location', 'created_by__email')
    readonly_fields = ('created_at', 'updated_at')
    date_hierarchy = 'start_date'
    raw_id_fields = ('created_by',)
