import logging
from django.contrib.auth.models import User
from django.db import transaction
from django.utils.crypto import get_random_string
from rest_framework import viewsets, mixins, permissions, status
from rest_framework.authtoken.models import Token
from rest_framework.authtoken.views import ObtainAuthToken
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.views import APIView
from base.utils import log_activity
from company.mixins import get_request_company
from user.custom_token import token_expired
from user.models import UserProfile, UserActivity
from user.permissions import IsCompanyAdmin, ROLE_ACCESS
from .serializers import (UserProfileSerializer, InviteUserSerializer,
                          UserActivitySerializer)

logger = logging.getLogger(__name__)


class CustomAuthToken(ObtainAuthToken):
    def post(self, request, *args, **kwargs):
        serializer = self.serializer_class(data=request.data,
                                           context={'request': request})
        serializer.is_valid(raise_exception=True)
        user = serializer.validated_data['user']
        token, created = Token.objects.get_or_create(user=user)
        if not created and token_expired(token):
            token.delete()
            token = Token.objects.create(user=user)
        profile = getattr(user, 'profile', None)
        return Response({
            'token': token.key,
            'user_id': user.pk,
            'username': user.username,
            'profile': UserProfileSerializer(profile).data if profile else None,
        })


class CurrentUserAPIView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        profile = getattr(request.user, 'profile', None)
        return Response({
            'user_id': request.user.pk,
            'username': request.user.username,
            'profile': UserProfileSerializer(profile).data if profile else None,
        })


class CompanyUserViewSet(mixins.ListModelMixin, mixins.RetrieveModelMixin,
                         mixins.UpdateModelMixin, viewsets.GenericViewSet):
    """Users of the requesting user's company; changes are admin only."""
    queryset = UserProfile.objects.select_related('user', 'company').order_by('name')
    serializer_class = UserProfileSerializer
    filter_backends = []

    def get_permissions(self):
        if self.action in ('list', 'retrieve'):
            return [permissions.IsAuthenticated()]
        return [permissions.IsAuthenticated(), IsCompanyAdmin()]

    def get_queryset(self):
        return super().get_queryset().filter(company=get_request_company(self.request))

    def perform_update(self, serializer):
        with transaction.atomic():
            old = {'role': serializer.instance.role,
                   'permissions': serializer.instance.permissions}
            profile = serializer.save()
            changes = {k: {'old': v, 'new': getattr(profile, k)}
                       for k, v in old.items() if getattr(profile, k) != v}
            log_activity(self.request, 'update', profile, changes)

    @action(detail=False, methods=['post'], url_path='invite')
    def invite(self, request):
        """
        Create a user in the admin's company. The generated password is
        returned once and never stored in clear.
        """
        serializer = InviteUserSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        company = get_request_company(request)
        password = get_random_string(12)

        with transaction.atomic():
            user = User.objects.create_user(username=data['email'],
                                            email=data['email'],
                                            password=password,
                                            first_name=data['name'])
            profile = UserProfile.objects.create(
                user=user, company=company, name=data['name'], role=data['role'],
                permissions=ROLE_ACCESS.get(data['role'], {}))
            log_activity(request, 'create', profile)

        logger.info("User %s invited to company %s as %s", user.username,
                    company.pk, data['role'])
        return Response({
            'profile': UserProfileSerializer(profile).data,
            'password': password,
        }, status=status.HTTP_201_CREATED)


class UserActivityViewSet(viewsets.ReadOnlyModelViewSet):
    queryset = UserActivity.objects.select_related('user', 'content_type').order_by('-timestamp')
    serializer_class = UserActivitySerializer
    permission_classes = [permissions.IsAuthenticated, IsCompanyAdmin]
    filter_backends = []

    def get_queryset(self):
        return super().get_queryset().filter(company=get_request_company(self.request))
