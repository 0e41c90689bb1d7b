from django.db import models


class TenantQuerySet(models.QuerySet):
    def for_company(self, company):
        return self.filter(company=company)

    def orphans(self):
        return self.filter(company__isnull=True)


class TenantManager(models.Manager.from_queryset(TenantQuerySet)):
    pass


class SoftDeleteQuerySet(TenantQuerySet):
    def alive(self):
        return self.filter(is_deleted=False)


class SoftDeleteManager(models.Manager.from_queryset(SoftDeleteQuerySet)):
    pass
