import pytest
from customer.models import Client
from user.models import UserActivity


@pytest.mark.django_db
def test_client_is_created_in_users_company(api_client, company, admin_user):
    response = api_client.post("/api/clients/", {"name": "Northwind", "phone": "555-0101"},
                               format="json")
    assert response.status_code == 201
    client = Client.objects.get(pk=response.data["id"])
    assert client.company == company
    assert client.created_by == admin_user
    assert UserActivity.objects.filter(action="create", object_id=client.pk).exists()


@pytest.mark.django_db
def test_clients_of_other_companies_are_invisible(api_client, company, other_company):
    Client.objects.create(company=company, name="Mine")
    theirs = Client.objects.create(company=other_company, name="Theirs")

    response = api_client.get("/api/clients/")
    assert [c["name"] for c in response.data["data"]] == ["Mine"]
    assert api_client.get(f"/api/clients/{theirs.pk}/").status_code == 404
    assert api_client.delete(f"/api/clients/{theirs.pk}/").status_code == 404
    assert Client.objects.filter(pk=theirs.pk).exists()


@pytest.mark.django_db
def test_client_search(api_client, company):
    Client.objects.create(company=company, name="Alpha", email="ops@alpha.test")
    Client.objects.create(company=company, name="Beta", phone="777")

    response = api_client.get("/api/clients/", {"search": "777"})
    assert [c["name"] for c in response.data["data"]] == ["Beta"]
    response = api_client.get("/api/clients/", {"search": "alpha.test"})
    assert [c["name"] for c in response.data["data"]] == ["Alpha"]


@pytest.mark.django_db
def test_client_name_required(api_client):
    assert api_client.post("/api/clients/", {"name": "   "},
                           format="json").status_code == 400


@pytest.mark.django_db
def test_supplier_crud(api_client):
    response = api_client.post("/api/suppliers/", {"name": "Globex"}, format="json")
    assert response.status_code == 201
    supplier_id = response.data["id"]
    response = api_client.patch(f"/api/suppliers/{supplier_id}/", {"phone": "1"},
                                format="json")
    assert response.data["phone"] == "1"
    assert api_client.delete(f"/api/suppliers/{supplier_id}/").status_code == 204
