from rest_framework import viewsets, permissions
from company.mixins import CompanyScopedMixin
from customer.models import Client, Supplier
from .filters import ClientFilter, SupplierFilter
from .serializers import ClientSerializer, SupplierSerializer


class ClientViewSet(CompanyScopedMixin, viewsets.ModelViewSet):
    queryset = Client.objects.all().order_by('name')
    serializer_class = ClientSerializer
    permission_classes = [permissions.IsAuthenticated]
    filterset_class = ClientFilter


class SupplierViewSet(CompanyScopedMixin, viewsets.ModelViewSet):
    queryset = Supplier.objects.all().order_by('name')
    serializer_class = SupplierSerializer
    permission_classes = [permissions.IsAuthenticated]
    filterset_class = SupplierFilter
