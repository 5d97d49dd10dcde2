from rest_framework.pagination import PageNumberPagination


class StandardResultsSetPagination(PageNumberPagination):
    """
    Page-number pagination that also reports the page as a
    ``Content-Range: <resource> <first>-<last>/<total>`` header, with
    zero-based item offsets. An empty result is reported as ``*/0``.
    """
    page_size = 25
    page_size_query_param = 'page_size'
    max_page_size = 100

    def paginate_queryset(self, queryset, request, view=None):
        self.resource = getattr(view, 'basename', None) or 'items'
        return super().paginate_queryset(queryset, request, view=view)

    def get_content_range(self) -> str:
        total = self.page.paginator.count
        if not total:
            return f'{self.resource} */0'
        first, last = self.page.start_index() - 1, self.page.end_index() - 1
        return f'{self.resource} {first}-{last}/{total}'

    def get_paginated_response(self, data):
        response = super().get_paginated_response(data)
        response['Content-Range'] = self.get_content_range()
        response['Access-Control-Expose-Headers'] = 'Content-Range'
        return response
