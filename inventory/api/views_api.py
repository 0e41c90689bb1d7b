from rest_framework import viewsets, permissions
from company.mixins import CompanyScopedMixin
from inventory.models import InventoryLog
from .filters import InventoryLogFilter
from .serializers import InventoryLogSerializer


class InventoryLogViewSet(CompanyScopedMixin, viewsets.ReadOnlyModelViewSet):
    queryset = InventoryLog.objects.all().order_by('-change_date')
    serializer_class = InventoryLogSerializer
    permission_classes = [permissions.IsAuthenticated]
    filterset_class = InventoryLogFilter
