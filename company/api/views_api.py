from django.db import transaction
from django.forms.models import model_to_dict
from rest_framework import permissions
from rest_framework.response import Response
from rest_framework.views import APIView
from base.utils import log_activity, diff_instance
from company.mixins import get_request_company
from user.permissions import IsCompanyAdmin
from .serializers import CompanySerializer


class CurrentCompanyAPIView(APIView):
    """The requesting user's company. Only admins may change it."""

    def get_permissions(self):
        if self.request.method in permissions.SAFE_METHODS:
            return [permissions.IsAuthenticated()]
        return [permissions.IsAuthenticated(), IsCompanyAdmin()]

    def get(self, request):
        return Response(CompanySerializer(get_request_company(request)).data)

    def put(self, request):
        return self._update(request, partial=False)

    def patch(self, request):
        return self._update(request, partial=True)

    def _update(self, request, partial):
        company = get_request_company(request)
        serializer = CompanySerializer(company, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        with transaction.atomic():
            old_data = model_to_dict(company)
            company = serializer.save()
            log_activity(request, 'update', company, diff_instance(old_data, company))
        return Response(serializer.data)
