from django.urls import path, include
from rest_framework.routers import DefaultRouter
from common.api.views_api import DailyExpenseViewSet
from company.api.views_api import CurrentCompanyAPIView
from customer.api.views_api import ClientViewSet, SupplierViewSet
from employee.api.views_api import EmployeeViewSet, SellerViewSet
from inventory.api.views_api import InventoryLogViewSet
from loans.api.views_api import (ClientLoanViewSet, ClientPaymentViewSet,
                                 ClientTransactionViewSet, ClientBalanceViewSet)
from products.api.views_api import ProductViewSet, EditStockAPIView
from purchase.api.views_api import IncomingProductLogViewSet
from sale.api.views_api import SaleViewSet
from user.api.views_api import (CustomAuthToken, CurrentUserAPIView,
                                CompanyUserViewSet, UserActivityViewSet)

router = DefaultRouter()
router.register(r'products', ProductViewSet)
router.register(r'inventory-logs', InventoryLogViewSet)
router.register(r'incoming', IncomingProductLogViewSet)
router.register(r'sales', SaleViewSet)
router.register(r'clients', ClientViewSet)
router.register(r'suppliers', SupplierViewSet)
router.register(r'loans', ClientLoanViewSet)
router.register(r'payments', ClientPaymentViewSet)
router.register(r'client-transactions', ClientTransactionViewSet)
router.register(r'client-balances', ClientBalanceViewSet, basename='client-balance')
router.register(r'employees', EmployeeViewSet)
router.register(r'sellers', SellerViewSet)
router.register(r'expenses', DailyExpenseViewSet)
router.register(r'users', CompanyUserViewSet, basename='company-user')
router.register(r'activities', UserActivityViewSet)

urlpatterns = [
    path('', include(router.urls)),
    path('api-token-auth/', CustomAuthToken.as_view(), name='api-token-auth'),
    path('me/', CurrentUserAPIView.as_view(), name='current-user'),
    path('company/', CurrentCompanyAPIView.as_view(), name='current-company'),
    path('edit-stock/', EditStockAPIView.as_view(), name='edit-stock'),
    path('reports/', include('report.api.urls')),
]
