from django.db import transaction
from rest_framework import viewsets, permissions, status
from rest_framework.decorators import action
from rest_framework.parsers import MultiPartParser, FormParser, JSONParser
from rest_framework.response import Response
from base.utils import log_activity, read_csv_upload
from company.mixins import CompanyScopedMixin
from purchase.models import IncomingProductLog
from purchase.utils import (receive_incoming, update_incoming, delete_incoming,
                            import_incoming_rows)
from .filters import IncomingProductLogFilter
from .serializers import (IncomingProductLogSerializer, IncomingReceiveSerializer,
                          IncomingUpdateSerializer, IncomingImportSerializer)


class IncomingProductLogViewSet(CompanyScopedMixin, viewsets.ModelViewSet):
    queryset = IncomingProductLog.objects.all().order_by('-date')
    serializer_class = IncomingProductLogSerializer
    permission_classes = [permissions.IsAuthenticated]
    filterset_class = IncomingProductLogFilter
    parser_classes = [JSONParser, MultiPartParser, FormParser]

    def create(self, request, *args, **kwargs):
        serializer = IncomingReceiveSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        with transaction.atomic():
            log, product = receive_incoming(self.get_company(), request.user,
                                            serializer.validated_data)
            log_activity(request, 'create', log)
        data = IncomingProductLogSerializer(log).data
        data['product_quantity'] = product.quantity
        data['product_cost'] = product.cost
        return Response(data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        log = self.get_object()
        serializer = IncomingUpdateSerializer(data=request.data,
                                              partial=kwargs.get('partial', False))
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        with transaction.atomic():
            old_values = {'quantity': log.quantity, 'unit_cost': log.unit_cost,
                          'supplier': log.supplier}
            log, product = update_incoming(
                log, request.user,
                data.get('quantity', log.quantity),
                data.get('unit_cost', log.unit_cost),
                data.get('supplier'))
            changes = {k: {'old': v, 'new': getattr(log, k)}
                       for k, v in old_values.items() if getattr(log, k) != v}
            log_activity(request, 'update', log, changes)
        response = IncomingProductLogSerializer(log).data
        response['product_quantity'] = product.quantity
        response['product_cost'] = product.cost
        return Response(response)

    def destroy(self, request, *args, **kwargs):
        log = self.get_object()
        with transaction.atomic():
            log_activity(request, 'delete', log)
            delete_incoming(log, request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=False, methods=['post'], url_path='import')
    def import_csv(self, request):
        serializer = IncomingImportSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        rows = read_csv_upload(serializer.validated_data['file'])
        logs = import_incoming_rows(self.get_company(), request.user, rows)
        return Response({
            'imported': len(logs),
            'data': IncomingProductLogSerializer(logs, many=True).data,
        }, status=status.HTTP_201_CREATED)
