from decimal import Decimal
import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from inventory.models import InventoryLog
from products.models import Product
from purchase.models import IncomingProductLog


def receive(api_client, **data):
    payload = {"product_code": "abc-1", "quantity": 10, "unit_cost": "2.00",
               "supplier": "Globex"}
    payload.update(data)
    return api_client.post("/api/incoming/", payload, format="json")


@pytest.mark.django_db
def test_first_receipt_creates_product(api_client, company):
    response = receive(api_client, name="Blue widget")
    assert response.status_code == 201

    product = Product.objects.get(company=company, product_code="ABC-1")
    assert product.name == "Blue widget"
    assert product.quantity == 10
    assert product.cost == Decimal("2.0000")
    assert product.category == "Uncategorized"

    log = IncomingProductLog.objects.get(product=product)
    assert log.total_cost == Decimal("20.0000")
    inventory_log = InventoryLog.objects.get(product=product)
    assert inventory_log.change_quantity == 10
    assert inventory_log.reason == "Incoming stock from supplier: Globex."


@pytest.mark.django_db
def test_receipts_use_weighted_average(api_client, company):
    receive(api_client)
    receive(api_client, quantity=30, unit_cost="4.00", supplier="")

    product = Product.objects.get(company=company, product_code="ABC-1")
    assert product.quantity == 40
    assert product.cost == Decimal("3.5000")
    assert InventoryLog.objects.filter(
        reason="Incoming stock from supplier: N/A.").count() == 1


@pytest.mark.django_db
def test_invalid_receipt_is_rejected(api_client):
    assert receive(api_client, quantity=0).status_code == 400
    assert receive(api_client, product_code="  ").status_code == 400
    assert not Product.objects.exists()


@pytest.mark.django_db
def test_edit_receipt_matches_receiving_new_values(api_client, company):
    receive(api_client, quantity=10, unit_cost="2.00")
    second = receive(api_client, quantity=10, unit_cost="4.00").data["id"]

    response = api_client.patch(f"/api/incoming/{second}/",
                                {"quantity": 5, "unit_cost": "8.00"}, format="json")
    assert response.status_code == 200

    product = Product.objects.get(company=company, product_code="ABC-1")
    assert product.quantity == 15
    assert product.cost == Decimal("4.0000")
    log = IncomingProductLog.objects.get(pk=second)
    assert log.total_cost == Decimal("40.0000")


@pytest.mark.django_db
def test_delete_receipt_undoes_it(api_client, company):
    receive(api_client, quantity=10, unit_cost="2.00")
    second = receive(api_client, quantity=10, unit_cost="4.00").data["id"]

    assert api_client.delete(f"/api/incoming/{second}/").status_code == 204

    product = Product.objects.get(company=company, product_code="ABC-1")
    assert product.quantity == 10
    assert product.cost == Decimal("2.0000")
    assert not IncomingProductLog.objects.filter(pk=second).exists()


@pytest.mark.django_db
def test_delete_after_stock_sold_clamps_to_zero(api_client, company, caplog):
    log_id = receive(api_client, quantity=10).data["id"]
    Product.objects.filter(product_code="ABC-1").update(quantity=4)

    with caplog.at_level("WARNING", logger="purchase.utils"):
        assert api_client.delete(f"/api/incoming/{log_id}/").status_code == 204

    product = Product.objects.get(company=company, product_code="ABC-1")
    assert product.quantity == 0
    assert product.cost == Decimal("0")
    assert "clamped to 0" in caplog.text


@pytest.mark.django_db
def test_receipt_for_missing_product(api_client, company):
    log_id = receive(api_client).data["id"]
    other_id = receive(api_client, product_code="xyz").data["id"]
    Product.objects.filter(product_code__in=["ABC-1", "XYZ"]).delete()

    response = api_client.patch(f"/api/incoming/{log_id}/", {"quantity": 3},
                                format="json")
    assert response.status_code == 404

    assert api_client.delete(f"/api/incoming/{other_id}/").status_code == 204
    assert not IncomingProductLog.objects.filter(pk=other_id).exists()


@pytest.mark.django_db
def test_filter_by_supplier(api_client):
    receive(api_client, supplier="Globex")
    receive(api_client, product_code="b-2", supplier="Initech")

    response = api_client.get("/api/incoming/", {"supplier": "initech"})
    assert response.status_code == 200
    assert [row["product_code"] for row in response.data["data"]] == ["B-2"]


def csv_file(text):
    return SimpleUploadedFile("incoming.csv", text.encode("utf-8"),
                             content_type="text/csv")


@pytest.mark.django_db
def test_csv_import_receives_every_row(api_client, company):
    upload = csv_file(
        "productCode,productName,category,quantity,cost,supplier,location,minStock\n"
        "p-1,Bolt,Hardware,100,0.10,Globex,A1,20\n"
        "p-2,Nut,Hardware,50,0.05,Globex,A2,10\n"
        "p-1,Bolt,Hardware,100,0.30,Globex,A1,20\n"
    )
    response = api_client.post("/api/incoming/import/", {"file": upload},
                               format="multipart")
    assert response.status_code == 201
    assert response.data["imported"] == 3

    bolt = Product.objects.get(company=company, product_code="P-1")
    assert bolt.quantity == 200
    assert bolt.cost == Decimal("0.2000")
    assert bolt.location == "A1"
    assert bolt.min_stock == 20


@pytest.mark.django_db
def test_product_code_cannot_be_renamed(api_client, company):
    receive(api_client, quantity=5)
    product = Product.objects.get(company=company, product_code="ABC-1")

    response = api_client.patch(f"/api/products/{product.pk}/", {"product_code": "zz9"},
                                format="json")
    assert response.status_code == 400
    assert "product_code" in response.data

    response = api_client.patch(f"/api/products/{product.pk}/",
                                {"product_code": " abc-1 ", "name": "Renamed"}, format="json")
    assert response.status_code == 200


@pytest.mark.django_db
def test_receipts_follow_their_product_after_edits(api_client, company):
    log_id = receive(api_client, quantity=5, unit_cost="2.00").data["id"]
    product = Product.objects.get(company=company, product_code="ABC-1")
    api_client.patch(f"/api/products/{product.pk}/", {"name": "Blue widget"}, format="json")
    # legacy rows can carry a code that no longer matches the product
    Product.objects.filter(pk=product.pk).update(product_code="ZZ9")

    response = api_client.patch(f"/api/incoming/{log_id}/", {"quantity": 8}, format="json")
    assert response.status_code == 200
    product.refresh_from_db()
    assert product.quantity == 8

    assert api_client.delete(f"/api/incoming/{log_id}/").status_code == 204
    product.refresh_from_db()
    assert product.quantity == 0
    assert product.name == "Blue widget"


@pytest.mark.django_db
def test_receipt_can_reset_min_stock(api_client, company):
    receive(api_client, min_stock=5)
    receive(api_client, min_stock=0)
    receive(api_client)

    product = Product.objects.get(company=company, product_code="ABC-1")
    assert product.min_stock == 0


@pytest.mark.django_db
@pytest.mark.parametrize("bad_row", [
    "p-2,Nut,Hardware,lots,0.05,Globex,A2,10",
    "p-2,Nut,Hardware,5,NaN,Globex,A2,10",
    "p-2,Nut,Hardware,5,Infinity,Globex,A2,10",
    "p-2,Nut,Hardware,5,-1,Globex,A2,10",
    "p-2,Nut,Hardware,5,0.05,Globex,A2,-5",
    ",Nut,Hardware,5,0.05,Globex,A2,10",
])
def test_csv_import_bad_values_reject_the_file(api_client, bad_row):
    upload = csv_file(
        "productCode,productName,category,quantity,cost,supplier,location,minStock\n"
        "p-1,Bolt,Hardware,100,0.10,Globex,A1,20\n"
        f"{bad_row}\n"
    )
    response = api_client.post("/api/incoming/import/", {"file": upload},
                               format="multipart")
    assert response.status_code == 400
    assert str(response.data["row"]) == "3"
    assert not Product.objects.exists()
    assert not IncomingProductLog.objects.exists()


@pytest.mark.django_db
def test_csv_blank_optional_cells_keep_product_values(api_client, company):
    receive(api_client, product_code="p-1", location="A1", min_stock=7)
    upload = csv_file(
        "productCode,productName,category,quantity,cost,supplier,location,minStock\n"
        "p-1,,,10,2.00,,,\n"
    )
    response = api_client.post("/api/incoming/import/", {"file": upload},
                               format="multipart")
    assert response.status_code == 201

    product = Product.objects.get(company=company, product_code="P-1")
    assert product.quantity == 20
    assert product.location == "A1"
    assert product.min_stock == 7
