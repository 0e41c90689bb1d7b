from decimal import Decimal
import pytest
from django.test import override_settings
from rest_framework.test import APIClient
from inventory.models import InventoryLog
from products.models import Product
from user.models import UserActivity


def create_product(api_client, **data):
    payload = {"product_code": " ab-100 ", "name": "Gear", "quantity": 10,
               "purchase_price": "20.00", "purchase_price_currency": "EUR",
               "selling_price": "30.00", "min_stock": 3}
    payload.update(data)
    return api_client.post("/api/products/", payload, format="json")


@pytest.mark.django_db
@override_settings(BASE_CURRENCY="USD",
                   EXCHANGE_RATES={"USD": Decimal("1"), "EUR": Decimal("0.5")})
def test_create_normalizes_code_and_prices(api_client, company):
    response = create_product(api_client)
    assert response.status_code == 201

    product = Product.objects.get(pk=response.data["id"])
    assert product.product_code == "AB-100"
    assert product.company == company
    assert product.purchase_price_base == Decimal("40.0000")
    assert product.selling_price_base == Decimal("30.0000")
    assert product.cost == Decimal("40.0000")
    assert not product.low_stock
    assert UserActivity.objects.filter(action="create", object_id=product.pk).exists()


@pytest.mark.django_db
def test_duplicate_code_conflicts(api_client):
    create_product(api_client)
    response = create_product(api_client, product_code="AB-100")
    assert response.status_code == 409
    assert "already exists" in response.data["error"]


@pytest.mark.django_db
def test_unknown_currency_is_rejected(api_client):
    response = create_product(api_client, purchase_price_currency="XXX")
    assert response.status_code == 400


@pytest.mark.django_db
def test_soft_delete_hides_product(api_client):
    product_id = create_product(api_client).data["id"]
    assert api_client.delete(f"/api/products/{product_id}/").status_code == 204

    product = Product.objects.get(pk=product_id)
    assert product.is_deleted
    assert product.deleted_at is not None
    assert api_client.get("/api/products/").data["total"] == 0
    # the code stays taken
    assert create_product(api_client).status_code == 409


@pytest.mark.django_db
def test_filters_and_low_stock(api_client):
    create_product(api_client, product_code="a-1", name="Bolt", quantity=1)
    create_product(api_client, product_code="b-1", name="Nut", quantity=50,
                   category="Fasteners")

    low = api_client.get("/api/products/low-stock/")
    assert [p["product_code"] for p in low.data] == ["A-1"]

    by_category = api_client.get("/api/products/", {"category": "fasteners"})
    assert [p["product_code"] for p in by_category.data["data"]] == ["B-1"]

    search = api_client.get("/api/products/", {"search": "bol"})
    assert [p["product_code"] for p in search.data["data"]] == ["A-1"]


@pytest.mark.django_db
def test_export_csv(api_client):
    assert api_client.get("/api/products/export/").status_code == 400
    create_product(api_client)
    response = api_client.get("/api/products/export/")
    assert response.status_code == 200
    lines = response.content.decode().strip().splitlines()
    assert lines[0].startswith("productCode,name,category")
    assert lines[1].startswith("AB-100,Gear")


@pytest.mark.django_db
def test_edit_stock_writes_inventory_log(api_client):
    create_product(api_client)
    response = api_client.post("/api/edit-stock/", {"product_code": "ab-100", "qty": 2,
                                                    "reason": "Damaged"}, format="json")
    assert response.status_code == 200
    assert response.data["old_quantity"] == 10
    assert response.data["new_quantity"] == 2
    assert response.data["low_stock"] is True

    log = InventoryLog.objects.get(product_code="AB-100")
    assert log.change_quantity == -8
    assert log.reason == "Damaged"

    missing = api_client.post("/api/edit-stock/", {"product_code": "zz", "qty": 1},
                              format="json")
    assert missing.status_code == 404


@pytest.mark.django_db
def test_products_are_isolated_per_company(api_client, member_factory, other_company):
    Product.objects.create(company=other_company, product_code="X-1", name="Theirs")
    create_product(api_client)

    listing = api_client.get("/api/products/")
    assert [p["product_code"] for p in listing.data["data"]] == ["AB-100"]

    theirs = Product.objects.get(product_code="X-1")
    assert api_client.get(f"/api/products/{theirs.pk}/").status_code == 404

    # same code may exist in another company
    rival = member_factory(other_company, "rita")
    api_client.force_authenticate(user=rival)
    assert create_product(api_client, product_code="x-2").status_code == 201
    assert create_product(api_client).status_code == 201


@pytest.mark.django_db
def test_product_permissions(api_client, member_factory, company):
    product_id = create_product(api_client).data["id"]
    seller = member_factory(company, "sam", role="sales")
    api_client.force_authenticate(user=seller)

    assert api_client.get("/api/products/").status_code == 200
    assert create_product(api_client, product_code="n-1").status_code == 403
    assert api_client.patch(f"/api/products/{product_id}/", {"name": "X"},
                            format="json").status_code == 403
    assert api_client.delete(f"/api/products/{product_id}/").status_code == 403


@pytest.mark.django_db
def test_user_without_company_is_refused(django_user_model):
    client = APIClient()
    client.force_authenticate(user=django_user_model.objects.create_user("loner", password="x"))
    assert client.get("/api/products/").status_code == 403
