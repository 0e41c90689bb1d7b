import logging
from django.db import transaction
from django.utils import timezone
from rest_framework import viewsets, status, permissions
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.views import APIView
from base.exceptions import DuplicateProductCode
from base.utils import export_to_csv, log_activity
from company.mixins import CompanyScopedMixin, get_request_company
from inventory.utils import set_stock
from products.models import Product
from user.permissions import ModulePermission
from .filters import ProductFilter
from .serializers import ProductSerializer, StockAdjustmentSerializer

logger = logging.getLogger(__name__)


class ProductViewSet(CompanyScopedMixin, viewsets.ModelViewSet):
    queryset = Product.objects.alive().order_by('product_code')
    serializer_class = ProductSerializer
    permission_classes = [permissions.IsAuthenticated, ModulePermission]
    filterset_class = ProductFilter
    permission_module = 'products'
    permission_actions = {'create': 'create', 'update': 'edit',
                          'partial_update': 'edit', 'destroy': 'delete'}

    def _check_duplicate_code(self, code, exclude_id=None):
        # soft-deleted rows still hold their code
        duplicates = Product.objects.for_company(self.get_company()).filter(
            product_code=code)
        if exclude_id:
            duplicates = duplicates.exclude(id=exclude_id)
        if duplicates.exists():
            raise DuplicateProductCode(
                f"Product with code '{code}' already exists.")

    def perform_create(self, serializer):
        self._check_duplicate_code(serializer.validated_data['product_code'])
        super().perform_create(serializer)

    def perform_update(self, serializer):
        code = serializer.validated_data.get('product_code')
        if code:
            self._check_duplicate_code(code, exclude_id=serializer.instance.id)
        super().perform_update(serializer)

    def perform_destroy(self, instance):
        # Soft delete: sales and logs keep pointing at the product
        with transaction.atomic():
            instance.is_deleted = True
            instance.deleted_at = timezone.now()
            instance.deleted_by = self.request.user
            instance.save()
            log_activity(self.request, 'delete', instance)

    @action(detail=False, methods=['get'], url_path='low-stock')
    def low_stock(self, request):
        queryset = self.filter_queryset(self.get_queryset()).filter(low_stock=True)
        serializer = self.get_serializer(queryset, many=True)
        return Response(serializer.data)

    @action(detail=False, methods=['get'], url_path='export')
    def export(self, request):
        queryset = self.filter_queryset(self.get_queryset())
        rows = [{
            'productCode': p.product_code,
            'name': p.name,
            'category': p.category,
            'quantity': p.quantity,
            'cost': p.cost,
            'purchasePrice': p.purchase_price,
            'purchasePriceCurrency': p.purchase_price_currency,
            'sellingPrice': p.selling_price,
            'sellingPriceCurrency': p.selling_price_currency,
            'supplier': p.supplier,
            'location': p.location,
            'minStock': p.min_stock,
            'lowStock': p.low_stock,
        } for p in queryset]
        if not rows:
            return Response({'error': 'No data to export.'},
                            status=status.HTTP_400_BAD_REQUEST)
        return export_to_csv(rows, 'inventory.csv')


class EditStockAPIView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def post(self, request):
        serializer = StockAdjustmentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        company = get_request_company(request)

        with transaction.atomic():
            try:
                product = Product.objects.select_for_update().alive().get(
                    company=company, product_code=data['product_code'])
            except Product.DoesNotExist:
                return Response({'error': 'Product not found.'},
                                status=status.HTTP_404_NOT_FOUND)
            old_quantity = set_stock(
                product, data['qty'], user=request.user,
                reason=data.get('reason') or 'Manual stock adjustment.')

        return Response({
            'product_code': product.product_code,
            'product_name': product.name,
            'old_quantity': old_quantity,
            'new_quantity': product.quantity,
            'low_stock': product.low_stock,
            'last_updated': product.modified_at
        }, status=status.HTTP_200_OK)
