import pytest
from rest_framework.test import APIClient
from company.models import Company
from user.models import UserProfile
from user.permissions import ROLE_ACCESS


def make_member(django_user_model, company, username, role=UserProfile.ROLE_ADMIN):
    user = django_user_model.objects.create_user(username=username, password="pw-12345")
    UserProfile.objects.create(user=user, company=company, name=username.title(),
                               role=role, permissions=ROLE_ACCESS.get(role, {}))
    return user


@pytest.fixture
def company(db):
    return Company.objects.create(name="Acme Trading")


@pytest.fixture
def other_company(db):
    return Company.objects.create(name="Rival Imports")


@pytest.fixture
def admin_user(django_user_model, company):
    return make_member(django_user_model, company, "alice")


@pytest.fixture
def api_client(admin_user):
    client = APIClient()
    client.force_authenticate(user=admin_user)
    return client


@pytest.fixture
def member_factory(django_user_model):
    def factory(company, username, role=UserProfile.ROLE_ADMIN):
        return make_member(django_user_model, company, username, role)
    return factory
