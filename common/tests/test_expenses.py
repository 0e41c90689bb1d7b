from decimal import Decimal
import pytest
from django.test import override_settings
from common.models import DailyExpense
from employee.models import Employee, Seller

RATES = {"USD": Decimal("1"), "EUR": Decimal("0.5")}


@pytest.mark.django_db
@override_settings(BASE_CURRENCY="USD", EXCHANGE_RATES=RATES)
def test_expense_amount_is_converted(api_client, company):
    response = api_client.post("/api/expenses/", {
        "expense_type": "rent", "amount": "100.00", "currency": "EUR",
        "date": "2024-03-01"}, format="json")
    assert response.status_code == 201
    expense = DailyExpense.objects.get(pk=response.data["id"])
    assert expense.amount_base == Decimal("200.0000")
    assert expense.company == company


@pytest.mark.django_db
def test_other_expense_requires_description(api_client):
    response = api_client.post("/api/expenses/", {
        "expense_type": "others", "amount": "5", "description": "  "}, format="json")
    assert response.status_code == 400
    assert "description" in response.data


@pytest.mark.django_db
def test_salary_expense_requires_payee(api_client, company):
    response = api_client.post("/api/expenses/", {
        "expense_type": "salary", "amount": "500"}, format="json")
    assert response.status_code == 400

    seller = Seller.objects.create(company=company, name="Sam")
    response = api_client.post("/api/expenses/", {
        "expense_type": "salary", "amount": "500", "paid_to_seller": seller.pk},
        format="json")
    assert response.status_code == 201
    assert response.data["paid_to_seller_name"] == "Sam"


@pytest.mark.django_db
def test_payee_from_other_company_is_rejected(api_client, other_company):
    stranger = Employee.objects.create(company=other_company, employee_name="Eve")
    response = api_client.post("/api/expenses/", {
        "expense_type": "salary", "amount": "500", "employee": stranger.pk},
        format="json")
    assert response.status_code == 400


@pytest.mark.django_db
def test_totals_honour_date_filter(api_client):
    for day, amount, kind in [("2024-01-05", "10", "rent"), ("2024-01-20", "15", "supplies"),
                              ("2024-02-02", "99", "rent")]:
        api_client.post("/api/expenses/", {"expense_type": kind, "amount": amount,
                                           "date": day}, format="json")

    response = api_client.get("/api/expenses/totals/", {"date__gte": "2024-01-01",
                                                        "date__lte": "2024-01-31"})
    assert response.data["total"] == 25.0
    assert response.data["count"] == 2
    assert response.data["by_type"] == {"rent": 10.0, "supplies": 15.0}


@pytest.mark.django_db
def test_expense_permissions(api_client, member_factory, company):
    expense = DailyExpense.objects.create(company=company, expense_type="rent",
                                          amount=Decimal("10"), amount_base=Decimal("10"))
    manager = member_factory(company, "mona", role="manager")
    api_client.force_authenticate(user=manager)

    assert api_client.patch(f"/api/expenses/{expense.pk}/", {"amount": "12"},
                            format="json").status_code == 200
    assert api_client.delete(f"/api/expenses/{expense.pk}/").status_code == 403
