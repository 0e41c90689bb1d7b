from django.urls import path
from .views_api import DashboardSummaryAPIView, MonthlySummaryAPIView

urlpatterns = [
    path('dashboard/', DashboardSummaryAPIView.as_view()),
    path('monthly/', MonthlySummaryAPIView.as_view()),
]
