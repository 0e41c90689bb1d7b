from django.db import transaction
from django.db.models import Sum, Count
from django.forms.models import model_to_dict
from rest_framework import viewsets, permissions, status
from rest_framework.decorators import action
from rest_framework.response import Response
from base.utils import log_activity, diff_instance, export_to_csv
from company.mixins import CompanyScopedMixin
from sale.models import Sale
from sale.utils import record_sale, update_sale, delete_sale
from user.permissions import ModulePermission
from .filters import SaleFilter
from .serializers import SaleSerializer, SaleWriteSerializer, SaleUpdateSerializer


class SaleViewSet(CompanyScopedMixin, viewsets.ModelViewSet):
    queryset = Sale.objects.alive().order_by('-date')
    permission_classes = [permissions.IsAuthenticated, ModulePermission]
    filterset_class = SaleFilter
    permission_module = 'sales'
    permission_actions = {'create': 'create', 'destroy': 'refund'}

    def get_serializer_class(self):
        if self.action == 'create':
            return SaleWriteSerializer
        elif self.action in ['update', 'partial_update']:
            return SaleUpdateSerializer
        return SaleSerializer

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        with transaction.atomic():
            sale = record_sale(self.get_company(), request.user,
                               serializer.validated_data)
            log_activity(request, 'create', sale)
        return Response(SaleSerializer(sale).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        sale = self.get_object()
        serializer = self.get_serializer(data=request.data,
                                         partial=kwargs.get('partial', False))
        serializer.is_valid(raise_exception=True)
        with transaction.atomic():
            old_data = model_to_dict(sale)
            sale = update_sale(sale, request.user, serializer.validated_data)
            log_activity(request, 'update', sale, diff_instance(old_data, sale))
        return Response(SaleSerializer(sale).data)

    def destroy(self, request, *args, **kwargs):
        sale = self.get_object()
        with transaction.atomic():
            delete_sale(sale, request.user)
            log_activity(request, 'delete', sale)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=False, methods=['get'], url_path='totals')
    def totals(self, request):
        """
        Returns totals in the base currency for the filtered sales.
        """
        queryset = self.filter_queryset(self.get_queryset())
        totals = queryset.aggregate(total=Sum('total_base'),
                                    profit=Sum('gross_profit'),
                                    cogs=Sum('cost_of_goods_sold'),
                                    quantity=Sum('quantity'),
                                    count=Count('id'))
        return Response({
            "total_sales": totals['count'],
            "total_revenue": float(totals['total'] or 0),
            "total_cost_of_goods_sold": float(totals['cogs'] or 0),
            "total_gross_profit": float(totals['profit'] or 0),
            "total_quantity": totals['quantity'] or 0,
        })

    @action(detail=False, methods=['get'], url_path='export')
    def export(self, request):
        queryset = self.filter_queryset(self.get_queryset())
        rows = [{
            'date': s.date.isoformat(),
            'productCode': s.product_code,
            'productName': s.product_name,
            'clientName': s.client_name,
            'sellerName': s.seller_name,
            'quantity': s.quantity,
            'salePrice': s.sale_price,
            'currency': s.sale_price_currency,
            'total': s.total,
            'totalBase': s.total_base,
            'costOfGoodsSold': s.cost_of_goods_sold,
            'grossProfit': s.gross_profit,
            'paymentType': s.payment_type,
        } for s in queryset]
        if not rows:
            return Response({'error': 'No data to export.'},
                            status=status.HTTP_400_BAD_REQUEST)
        return export_to_csv(rows, 'sales.csv')
