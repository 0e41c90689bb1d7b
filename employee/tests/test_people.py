from decimal import Decimal
import pytest
from common.models import DailyExpense
from employee.models import Employee, Seller
from products.models import Product
from sale.models import Sale


@pytest.mark.django_db
def test_employee_crud_is_company_scoped(api_client, company, other_company):
    Employee.objects.create(company=other_company, employee_name="Eve")
    response = api_client.post("/api/employees/", {
        "employee_name": "Dan", "position": "Driver", "salary": "900",
        "salary_currency": "usd"}, format="json")
    assert response.status_code == 201
    assert response.data["salary_currency"] == "USD"

    listing = api_client.get("/api/employees/")
    assert [e["employee_name"] for e in listing.data["data"]] == ["Dan"]


@pytest.mark.django_db
def test_salary_history(api_client, company):
    dan = Employee.objects.create(company=company, employee_name="Dan")
    for day, amount in [("2024-01-31", "900"), ("2024-02-29", "950")]:
        api_client.post("/api/expenses/", {"expense_type": "salary", "amount": amount,
                                           "employee": dan.pk, "date": day}, format="json")
    DailyExpense.objects.create(company=company, expense_type="rent",
                                amount=Decimal("1"), employee=dan)

    response = api_client.get(f"/api/employees/{dan.pk}/salary-history/")
    assert response.status_code == 200
    assert response.data["total_paid"] == 1850.0
    assert str(response.data["last_payment_date"]) == "2024-02-29"
    assert len(response.data["payments"]) == 2

    february = api_client.get(f"/api/employees/{dan.pk}/salary-history/",
                              {"start_date": "2024-02-01"})
    assert february.data["total_paid"] == 950.0


@pytest.mark.django_db
def test_seller_stats_skip_deleted_sales(api_client, company):
    sam = Seller.objects.create(company=company, name="Sam")
    idle = Seller.objects.create(company=company, name="Ida")
    product = Product.objects.create(company=company, product_code="W-1",
                                     name="Widget", quantity=100)
    for qty, deleted in [(2, False), (3, False), (50, True)]:
        Sale.objects.create(company=company, product=product, product_code="W-1",
                            product_name="Widget", seller=sam, quantity=qty,
                            sale_price=Decimal("10"), total=Decimal(qty * 10),
                            total_base=Decimal(qty * 10), is_deleted=deleted)

    response = api_client.get("/api/sellers/stats/")
    stats = {row["name"]: row for row in response.data}
    assert stats["Sam"]["total_sales"] == 2
    assert stats["Sam"]["total_revenue"] == 50.0
    assert stats["Sam"]["total_quantity"] == 5
    assert stats["Ida"]["total_sales"] == 0
    assert stats["Ida"]["total_revenue"] == 0.0
