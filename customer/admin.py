from django.contrib import admin

from .models import Client, Supplier


@admin.register(Client)
class ClientAdmin(admin.ModelAdmin):
    list_display = ('name', 'company', 'phone', 'email', 'created_at', 'modified_at')
    search_fields = ('name', 'email', 'phone')
    list_filter = ('company', 'created_at')
    ordering = ('name',)


@admin.register(Supplier)
class SupplierAdmin(admin.ModelAdmin):
    list_display = ('name', 'company', 'phone', 'email', 'created_at')
    search_fields = ('name', 'email', 'phone')
    list_filter = ('company',)
    ordering = ('name',)
