from django.db import models
from django.contrib.auth.models import User
from company.models import Company


class UserProfile(models.Model):
    ROLE_DEVELOPER = 'developer'
    ROLE_ADMIN = 'admin'
    ROLE_MANAGER = 'manager'
    ROLE_SALES = 'sales'
    ROLE_WAREHOUSE = 'warehouse'
    ROLE_CHOICES = [
        (ROLE_DEVELOPER, 'Developer'),
        (ROLE_ADMIN, 'Admin'),
        (ROLE_MANAGER, 'Manager'),
        (ROLE_SALES, 'Sales'),
        (ROLE_WAREHOUSE, 'Warehouse'),
    ]

    user = models.OneToOneField(User, on_delete=models.CASCADE,
                                related_name='profile')
    company = models.ForeignKey(Company, on_delete=models.SET_NULL, null=True,
                                blank=True, related_name='profiles')
    name = models.CharField(max_length=150, blank=True)
    role = models.CharField(max_length=20, choices=ROLE_CHOICES,
                            default=ROLE_SALES)
    # {"products": {"create": true, ...}, "sales": {...}, "expenses": {...}}
    permissions = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True, null=True, blank=True)
    modified_at = models.DateTimeField(auto_now=True, null=True, blank=True)

    @property
    def is_admin(self):
        return self.role in (self.ROLE_ADMIN, self.ROLE_DEVELOPER)

    def __str__(self):
        return f"{self.name or self.user.username} ({self.role})"


class UserActivity(models.Model):
    user = models.ForeignKey(User, on_delete=models.CASCADE)
    company = models.ForeignKey(Company, on_delete=models.SET_NULL, null=True,
                                blank=True, related_name='+')
    content_type = models.ForeignKey('contenttypes.ContentType',
                                     on_delete=models.CASCADE)
    object_id = models.PositiveIntegerField()
    action = models.CharField(max_length=20, choices=[('create', 'Created'),
        ('update', 'Updated'), ('delete', 'Deleted')])
    timestamp = models.DateTimeField(auto_now_add=True)
    changes = models.JSONField(null=True, blank=True)
    ip_address = models.GenericIPAddressField(null=True, blank=True)
    user_agent = models.CharField(max_length=200, null=True, blank=True)

    class Meta:
        verbose_name_plural = "User Activities"
        ordering = ['-timestamp']

    def __str__(self):
        return f"{self.user.username} {self.action} {self.content_type} at {self.timestamp}"
