from django.contrib import admin
from user.models import UserActivity, UserProfile


@admin.register(UserProfile)
class UserProfileAdmin(admin.ModelAdmin):
    list_display = ('user', 'name', 'company', 'role')
    list_filter = ('role', 'company')
    search_fields = ('user__username', 'name')


@admin.register(UserActivity)
class UserActivityAdmin(admin.ModelAdmin):
    list_display = ('user', 'company', 'action', 'content_type', 'object_id',
                    'timestamp', 'ip_address')
    list_filter = ('action', 'content_type', 'timestamp')
    search_fields = ('user__username', 'ip_address', 'user_agent')
    readonly_fields = ('user', 'company', 'content_type', 'object_id', 'action',
                       'timestamp', 'changes', 'ip_address', 'user_agent')
    date_hierarchy = 'timestamp'
