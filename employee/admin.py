from django.contrib import admin
from .models import Employee, Seller


@admin.register(Employee)
class EmployeeAdmin(admin.ModelAdmin):
    list_display = ('employee_name', 'company', 'position', 'salary',
                    'salary_currency', 'hire_date', 'status')
    search_fields = ('employee_name', 'position', 'email')
    list_filter = ('status', 'company')


@admin.register(Seller)
class SellerAdmin(admin.ModelAdmin):
    list_display = ('name', 'company', 'contact', 'status')
    search_fields = ('name', 'contact')
    list_filter = ('status', 'company')
