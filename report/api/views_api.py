from rest_framework import permissions, serializers
from rest_framework.response import Response
from rest_framework.views import APIView
from company.mixins import get_request_company
from report.utils import get_dashboard_summary, get_monthly_summary


class DateRangeSerializer(serializers.Serializer):
    start_date = serializers.DateField(required=False)
    end_date = serializers.DateField(required=False)

    def validate(self, attrs):
        if attrs.get('start_date') and attrs.get('end_date') and \
                attrs['start_date'] > attrs['end_date']:
            raise serializers.ValidationError("start_date must be before end_date.")
        return attrs


class DashboardSummaryAPIView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        params = DateRangeSerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        summary = get_dashboard_summary(get_request_company(request),
                                        params.validated_data.get('start_date'),
                                        params.validated_data.get('end_date'))
        return Response({k: float(v) if not isinstance(v, int) else v
                         for k, v in summary.items()})


class MonthlySummaryAPIView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        params = DateRangeSerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        rows = get_monthly_summary(get_request_company(request),
                                   params.validated_data.get('start_date'),
                                   params.validated_data.get('end_date'))
        return Response([{
            'month': r['month'],
            'revenue': float(r['revenue']),
            'gross_profit': float(r['gross_profit']),
            'expenses': float(r['expenses']),
            'net_profit': float(r['gross_profit'] - r['expenses']),
        } for r in rows])
