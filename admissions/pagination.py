import math

from rest_framework.exceptions import NotFound
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class AdmissionPagination(PageNumberPagination):
    """
    Page/limit pagination
    Response: {'admissions': [...], 'pagination': {page, limit, total, pages}}

    A page past the end gives an empty list instead of a 404.
    """

    page_size = 10
    page_size_query_param = 'limit'
    max_page_size = 100

    def paginate_queryset(self, queryset, request, view=None):
        try:
            results = super().paginate_queryset(queryset, request, view=view)
        except NotFound:
            limit = self.get_page_size(request)
            paginator = self.django_paginator_class(queryset, limit)
            self.page_info = {
                'page': self._requested_page(request),
                'limit': limit,
                'total': paginator.count,
            }
            return []

        if results is not None:
            self.page_info = {
                'page': self.page.number,
                'limit': self.page.paginator.per_page,
                'total': self.page.paginator.count,
            }
        return results

    def _requested_page(self, request):
        try:
            return int(request.query_params.get(self.page_query_param, 1))
        except (TypeError, ValueError):
            return 1

    def get_paginated_response(self, data):
        total = self.page_info['total']
        limit = self.page_info['limit']
        return Response({
            'admissions': data,
            'pagination': {
                'page': self.page_info['page'],
                'limit': limit,
                'total': total,
                'pages': math.ceil(total / limit) if limit else 0,
            }
        })
