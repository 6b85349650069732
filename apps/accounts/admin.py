from django.contrib import admin
from django.contrib.auth.models import User
from django.utils.html import format_html

from .choices import Role
from .models import Profile, Friendship


ROLE_COLORS = {
    Role.ADMIN: '#b91c1c',
    Role.LEADER: '#f59e0b',
    Role.MEMBER: '#6b7280',
}


def role_badge_html(role):
    return format_html(
        '<span style="background-color: {}; color: white; padding: 3px 8px; '
        'border-radius: 3px;">{}</span>',
        ROLE_COLORS.get(role, '#6b7280'),
        Role(role).label.upper(),
    )


# Inline Profile in User Admin
class ProfileInline(admin.StackedInline):
    model = Profile
    can_delete = False
    verbose_name_plural = 'Profile'
    fields = ('role', 'phone', 'bio', 'profile_visibility', 'phone_visibility', 'email_visibility')


# Customize User Admin
class CustomUserAdmin(admin.ModelAdmin):
    inlines = (ProfileInline,)
    list_display = ('email', 'first_name', 'last_name', 'role_badge', 'date_joined',
                    'last_login', 'is_staff', 'is_active')
    list_filter = ('profile__role', 'is_staff', 'is_active', 'date_joined')
    search_fields = ('email', 'first_name', 'last_name')
    ordering = ('-date_joined',)
    actions = ['promote_to_leader', 'promote_to_admin', 'demote_to_member']

    def role_badge(self, obj):
        if hasattr(obj, 'profile'):
            return role_badge_html(obj.profile.role)
        return '-'
    role_badge.short_description = 'Role'

    def _set_role(self, request, queryset, role):
        count = Profile.objects.filter(user__in=queryset).update(role=role)
        self.message_user(request, f'{count} member(s) set to {Role(role).label}.')

    def promote_to_leader(self, request, queryset):
        self._set_role(request, queryset, Role.LEADER)
    promote_to_leader.short_description = 'Set role: Leader'

    def promote_to_admin(self, request, queryset):
        self._set_role(request, queryset, Role.ADMIN)
    promote_to_admin.short_description = 'Set role: Admin'

    def demote_to_member(self, request, queryset):
        self._set_role(request, queryset, Role.MEMBER)
    demote_to_member.short_description = 'Set role: Member'


# Unregister the default User admin and register our custom one
admin.site.unregister(User)
admin.site.register(User, CustomUserAdmin)


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = ('user_email', 'role_badge', 'profile_visibility', 'phone_visibility',
                    'email_visibility', 'created_at')
    search_fields = ('user__email', 'user__first_name', 'user__last_name')
    readonly_fields = ('created_at', 'updated_at')
    list_filter = ('role', 'profile_visibility')

    fieldsets = (
        ('User Information', {
            'fields': ('user', 'role')
        }),
        ('Contact', {
            'fields': ('phone', 'bio')
        }),
        ('Privacy', {
            'fields': ('profile_visibility', 'phone_visibility', 'email_visibility')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def user_email(self, obj):
        return obj.user.email
    user_email.short_description = 'Email'
    user_email.admin_order_field = 'user__email'

    def role_badge(self, obj):
        return role_badge_html(obj.role)
    role_badge.short_description = 'Role'


@admin.register(Friendship)
class FriendshipAdmin(admin.ModelAdmin):
    list_display = ('requester', 'addressee', 'status', 'created_at', 'updated_at')
    list_filter = ('status', 'created_at')
    search_fields = ('requester__email', 'addressee__email')
    readonly_fields = ('pair_key', 'created_at', 'updated_at')
    date_hierarchy = 'created_at'
    raw_id_fields = ('requester', 'addressee')
