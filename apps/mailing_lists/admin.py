from django.contrib import admin

from .models import MailingList, MailingListMembership


class MembershipInline(admin.TabularInline):
    model = MailingListMembership
    extra = 0
    raw_id_fields = ('user',)
    readonly_fields = ('joined_at',)


@admin.register(MailingList)
class MailingListAdmin(admin.ModelAdmin):
    inlines = (MembershipInline,)
    list_display = ('name', 'privacy_level', 'created_by', 'member_count', 'created_at')
    list_filter = ('privacy_level',)
    search_fields = ('name', 'description', 'created_by__email')
    readonly_fields = ('created_at', 'updated_at')
    raw_id_fields = ('created_by',)

    def member_count(self, obj):
        return obj.memberships.count()
    member_count.short_description = 'Members'
