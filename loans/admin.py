from django.contrib import admin
from loans.models import ClientLoan, ClientPayment, ClientTransaction


@admin.register(ClientLoan)
class ClientLoanAdmin(admin.ModelAdmin):
    list_display = ('client_name', 'company', 'loan_amount', 'currency',
                    'amount_base', 'due_date', 'date')
    list_filter = ('currency', 'company')
    search_fields = ('client_name', 'description')


@admin.register(ClientPayment)
class ClientPaymentAdmin(admin.ModelAdmin):
    list_display = ('client', 'company', 'amount', 'method', 'reference',
                    'payment_date')
    list_filter = ('method', 'company')


@admin.register(ClientTransaction)
class ClientTransactionAdmin(admin.ModelAdmin):
    list_display = ('client', 'company', 'type', 'amount', 'related_type',
                    'related_id', 'date')
    list_filter = ('type', 'related_type', 'company')
