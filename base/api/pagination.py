from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class CustomPagination(PageNumberPagination):
    page_size = 25
    page_size_query_param = 'page_size'
    max_page_size = 500

    def get_paginated_response(self, data):
        return Response({
            'total': self.page.paginator.count,
            'per_page': self.get_page_size(self.request),
            'current_page_count': len(data),
            'next': self.get_next_link(),
            'previous': self.get_previous_link(),
            'data': data
        })
