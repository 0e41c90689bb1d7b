import logging
from django.db import transaction
from django.forms.models import model_to_dict
from django.utils import timezone
from base.exceptions import TenantMissing
from base.utils import log_activity, diff_instance

logger = logging.getLogger(__name__)


def get_request_company(request):
    profile = getattr(request.user, 'profile', None)
    company = profile.company if profile else None
    if company is None:
        raise TenantMissing()
    return company


class CompanyScopedMixin:
    """
    Restricts a viewset to the requesting user's company and stamps
    company/created_by/modified_by on writes, recording each change in the
    activity log.
    """

    def get_company(self):
        if not hasattr(self, '_company'):
            self._company = get_request_company(self.request)
        return self._company

    def get_queryset(self):
        return super().get_queryset().filter(company=self.get_company())

    def get_serializer_context(self):
        context = super().get_serializer_context()
        if self.request and self.request.user.is_authenticated:
            context['company'] = self.get_company()
        return context

    def perform_create(self, serializer):
        with transaction.atomic():
            instance = serializer.save(company=self.get_company(),
                                       created_by=self.request.user)
            log_activity(self.request, 'create', instance)

    def perform_update(self, serializer):
        with transaction.atomic():
            old_data = model_to_dict(serializer.instance)
            instance = serializer.save(modified_by=self.request.user,
                                       modified_at=timezone.now())
            log_activity(self.request, 'update', instance,
                         diff_instance(old_data, instance))

    def perform_destroy(self, instance):
        with transaction.atomic():
            log_activity(self.request, 'delete', instance)
            instance.delete()
