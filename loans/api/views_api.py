from django.conf import settings
from django.db import transaction
from django.forms.models import model_to_dict
from django.shortcuts import get_object_or_404
from rest_framework import viewsets, permissions, status, mixins
from rest_framework.decorators import action
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from base.utils import log_activity, diff_instance, export_to_csv
from company.mixins import CompanyScopedMixin
from customer.models import Client
from loans.models import ClientLoan, ClientPayment, ClientTransaction
from loans.utils import (create_loan, update_loan, delete_loan, record_payment,
                         delete_payment, client_balances)
from .filters import (ClientLoanFilter, ClientPaymentFilter,
                      ClientTransactionFilter)
from .serializers import (ClientLoanSerializer, ClientPaymentSerializer,
                          ClientTransactionSerializer, ClientBalanceSerializer,
                          ClientBalanceQuerySerializer)


class ClientLoanViewSet(CompanyScopedMixin, viewsets.ModelViewSet):
    queryset = ClientLoan.objects.all().order_by('-date')
    serializer_class = ClientLoanSerializer
    permission_classes = [permissions.IsAuthenticated]
    filterset_class = ClientLoanFilter

    def perform_create(self, serializer):
        data = serializer.validated_data
        with transaction.atomic():
            serializer.instance = create_loan(
                self.get_company(), self.request.user, data['client'],
                data['loan_amount'], data.get('currency') or settings.BASE_CURRENCY,
                data.get('description', ''), data.get('due_date'))
            log_activity(self.request, 'create', serializer.instance)

    def perform_update(self, serializer):
        loan = serializer.instance
        data = serializer.validated_data
        if 'client' in data and data['client'] != loan.client:
            raise ValidationError({'client': "The client of a loan cannot be changed."})
        with transaction.atomic():
            old_data = model_to_dict(loan)
            update_loan(loan, self.request.user,
                        data.get('loan_amount', loan.loan_amount),
                        data.get('currency', loan.currency),
                        data.get('description'), data.get('due_date'))
            log_activity(self.request, 'update', loan, diff_instance(old_data, loan))

    def perform_destroy(self, instance):
        with transaction.atomic():
            log_activity(self.request, 'delete', instance)
            delete_loan(instance)


class ClientPaymentViewSet(CompanyScopedMixin, mixins.CreateModelMixin,
                           mixins.ListModelMixin, mixins.RetrieveModelMixin,
                           mixins.DestroyModelMixin, viewsets.GenericViewSet):
    queryset = ClientPayment.objects.all().select_related('client').order_by('-payment_date')
    serializer_class = ClientPaymentSerializer
    permission_classes = [permissions.IsAuthenticated]
    filterset_class = ClientPaymentFilter

    def perform_create(self, serializer):
        data = serializer.validated_data
        with transaction.atomic():
            serializer.instance = record_payment(
                self.get_company(), self.request.user, data['client'],
                data['amount'], data.get('method', 'Cash'),
                data.get('reference', ''), data.get('payment_date'))
            log_activity(self.request, 'create', serializer.instance)

    def perform_destroy(self, instance):
        with transaction.atomic():
            log_activity(self.request, 'delete', instance)
            delete_payment(instance)


class ClientTransactionViewSet(CompanyScopedMixin, viewsets.ReadOnlyModelViewSet):
    queryset = ClientTransaction.objects.all().select_related('client').order_by('-date')
    serializer_class = ClientTransactionSerializer
    permission_classes = [permissions.IsAuthenticated]
    filterset_class = ClientTransactionFilter


class ClientBalanceViewSet(CompanyScopedMixin, viewsets.GenericViewSet):
    """
    Per-client balances derived from the transaction ledger.

    ?status=all|pending|settled|overpaid
    ?last_activity__gte=YYYY-MM-DD&last_activity__lte=YYYY-MM-DD
    """
    queryset = Client.objects.all()
    serializer_class = ClientBalanceSerializer
    permission_classes = [permissions.IsAuthenticated]
    filter_backends = []

    def _rows(self, request):
        params = ClientBalanceQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        data = params.validated_data
        return client_balances(self.get_company(),
                               status=data.get('status') or 'all',
                               date_from=data.get('last_activity__gte'),
                               date_to=data.get('last_activity__lte'))

    def list(self, request):
        rows = self._rows(request)
        page = self.paginate_queryset(rows)
        if page is not None:
            return self.get_paginated_response(ClientBalanceSerializer(page, many=True).data)
        return Response(ClientBalanceSerializer(rows, many=True).data)

    def retrieve(self, request, pk=None):
        client = get_object_or_404(self.get_queryset(), pk=pk)
        summary = client_balances(self.get_company(), client=client)[0]
        company = self.get_company()
        loans = ClientLoan.objects.for_company(company).filter(client=client).order_by('-date')
        payments = ClientPayment.objects.for_company(company).filter(client=client).order_by('-payment_date')
        entries = ClientTransaction.objects.for_company(company).filter(client=client).order_by('-date')
        context = self.get_serializer_context()
        return Response({
            'balance': ClientBalanceSerializer(summary).data,
            'loans': ClientLoanSerializer(loans, many=True, context=context).data,
            'payments': ClientPaymentSerializer(payments, many=True, context=context).data,
            'transactions': ClientTransactionSerializer(entries, many=True).data,
        })

    @action(detail=False, methods=['get'], url_path='export')
    def export(self, request):
        rows = self._rows(request)
        if not rows:
            return Response({'error': 'No data to export.'},
                            status=status.HTTP_400_BAD_REQUEST)
        return export_to_csv([{
            'clientName': r['client_name'],
            'totalLoan': r['total_loan'],
            'totalPaid': r['total_paid'],
            'outstandingBalance': r['outstanding_balance'],
            'overpaidAmount': r['overpaid_amount'],
            'status': r['status'],
            'lastActivityDate': r['last_activity_date'].isoformat() if r['last_activity_date'] else '',
        } for r in rows], 'client_balances.csv')
