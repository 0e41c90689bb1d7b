from datetime import date, datetime
from decimal import Decimal
import pytest
from django.utils import timezone
from common.models import DailyExpense
from customer.models import Client
from loans.utils import create_loan, record_payment
from products.models import Product
from report.utils import get_dashboard_summary, get_monthly_summary
from sale.models import Sale


def _sale(company, product, when, total, profit, deleted=False):
    return Sale.objects.create(
        company=company, product=product, product_code=product.product_code,
        product_name=product.name, quantity=1, sale_price=total, total=total,
        total_base=total, cost_of_goods_sold=total - profit, gross_profit=profit,
        date=timezone.make_aware(datetime(when.year, when.month, when.day, 12)),
        is_deleted=deleted)


@pytest.fixture
def books(company, admin_user):
    widget = Product.objects.create(company=company, product_code="W-1", name="Widget",
                                    quantity=10, cost=Decimal("2"), min_stock=2)
    Product.objects.create(company=company, product_code="G-1", name="Gadget",
                           quantity=1, cost=Decimal("5"), min_stock=3)
    Product.objects.create(company=company, product_code="OLD", name="Old", quantity=50,
                           cost=Decimal("1"), is_deleted=True)

    _sale(company, widget, date(2024, 1, 10), Decimal("100"), Decimal("40"))
    _sale(company, widget, date(2024, 2, 10), Decimal("50"), Decimal("20"))
    _sale(company, widget, date(2024, 2, 11), Decimal("999"), Decimal("999"), deleted=True)

    for when, amount in [(date(2024, 1, 15), "10"), (date(2024, 2, 15), "5")]:
        DailyExpense.objects.create(company=company, expense_type="rent", amount=amount,
                                    amount_base=Decimal(amount), date=when)

    owes = Client.objects.create(company=company, name="Owes")
    paid = Client.objects.create(company=company, name="Paid")
    create_loan(company, admin_user, owes, Decimal("30"), "USD")
    create_loan(company, admin_user, paid, Decimal("10"), "USD")
    record_payment(company, admin_user, paid, Decimal("10"))
    return company


@pytest.mark.django_db
def test_dashboard_summary(books):
    summary = get_dashboard_summary(books)
    assert summary["product_count"] == 2
    assert summary["total_units"] == 11
    assert summary["low_stock_count"] == 1
    assert summary["stock_value"] == Decimal("25")
    assert summary["sales_count"] == 2
    assert summary["total_revenue"] == Decimal("150")
    assert summary["gross_profit"] == Decimal("60")
    assert summary["total_expenses"] == Decimal("15")
    assert summary["net_profit"] == Decimal("45")
    assert summary["outstanding_loans"] == Decimal("30")
    assert summary["clients_with_balance"] == 1


@pytest.mark.django_db
def test_dashboard_summary_date_range(books):
    summary = get_dashboard_summary(books, date(2024, 2, 1), date(2024, 2, 28))
    assert summary["sales_count"] == 1
    assert summary["total_revenue"] == Decimal("50")
    assert summary["net_profit"] == Decimal("15")
    # stock is a snapshot, not a range figure
    assert summary["product_count"] == 2


@pytest.mark.django_db
def test_monthly_summary(books):
    rows = get_monthly_summary(books)
    assert [r["month"] for r in rows] == ["2024-01", "2024-02"]
    assert rows[0]["revenue"] == Decimal("100")
    assert rows[1]["expenses"] == Decimal("5")


@pytest.mark.django_db
def test_report_endpoints(api_client, books):
    response = api_client.get("/api/reports/dashboard/", {"start_date": "2024-01-01"})
    assert response.status_code == 200
    assert response.data["total_revenue"] == 150.0
    assert response.data["sales_count"] == 2

    response = api_client.get("/api/reports/monthly/")
    assert response.data[0]["net_profit"] == 30.0

    bad = api_client.get("/api/reports/dashboard/", {"start_date": "2024-03-01",
                                                     "end_date": "2024-01-01"})
    assert bad.status_code == 400
