from decimal import Decimal
from django.db.models import Sum, Count, F, DecimalField, ExpressionWrapper
from django.db.models.functions import TruncMonth
from common.models import DailyExpense
from loans.utils import client_balances
from products.models import Product
from sale.models import Sale


def _date_range(queryset, field, start_date=None, end_date=None):
    if start_date:
        queryset = queryset.filter(**{f'{field}__gte': start_date})
    if end_date:
        queryset = queryset.filter(**{f'{field}__lte': end_date})
    return queryset


def get_dashboard_summary(company, start_date=None, end_date=None):
    """
    Headline figures for a company, all money in the base currency.
    Inventory figures are current; sales and expenses honour the date range.
    """
    products = Product.objects.for_company(company).alive()
    inventory = products.aggregate(
        count=Count('id'),
        units=Sum('quantity'),
        value=Sum(ExpressionWrapper(F('quantity') * F('cost'),
                                    output_field=DecimalField(max_digits=20, decimal_places=4))),
    )

    sales = _date_range(Sale.objects.for_company(company).alive(), 'date__date',
                        start_date, end_date)
    sale_totals = sales.aggregate(count=Count('id'), revenue=Sum('total_base'),
                                  cogs=Sum('cost_of_goods_sold'),
                                  profit=Sum('gross_profit'))

    expenses = _date_range(DailyExpense.objects.for_company(company), 'date',
                           start_date, end_date)
    total_expenses = expenses.aggregate(total=Sum('amount_base'))['total'] or Decimal('0')

    balances = client_balances(company)
    outstanding = sum((b['outstanding_balance'] for b in balances), Decimal('0'))

    gross_profit = sale_totals['profit'] or Decimal('0')
    return {
        'product_count': inventory['count'],
        'total_units': inventory['units'] or 0,
        'low_stock_count': products.filter(low_stock=True).count(),
        'stock_value': inventory['value'] or Decimal('0'),
        'sales_count': sale_totals['count'],
        'total_revenue': sale_totals['revenue'] or Decimal('0'),
        'cost_of_goods_sold': sale_totals['cogs'] or Decimal('0'),
        'gross_profit': gross_profit,
        'total_expenses': total_expenses,
        'net_profit': gross_profit - total_expenses,
        'outstanding_loans': outstanding,
        'clients_with_balance': len([b for b in balances if b['status'] == 'pending']),
    }


def get_monthly_summary(company, start_date=None, end_date=None):
    """Revenue, profit and expenses grouped by calendar month."""
    months = {}
    sales = _date_range(Sale.objects.for_company(company).alive(), 'date__date',
                        start_date, end_date)
    for row in (sales.annotate(month=TruncMonth('date')).values('month')
                .annotate(revenue=Sum('total_base'), profit=Sum('gross_profit'))
                .order_by('month')):
        key = row['month'].strftime('%Y-%m')
        months.setdefault(key, {'month': key, 'revenue': Decimal('0'),
                                'gross_profit': Decimal('0'), 'expenses': Decimal('0')})
        months[key]['revenue'] = row['revenue'] or Decimal('0')
        months[key]['gross_profit'] = row['profit'] or Decimal('0')

    expenses = _date_range(DailyExpense.objects.for_company(company), 'date',
                           start_date, end_date)
    for row in (expenses.annotate(month=TruncMonth('date')).values('month')
                .annotate(total=Sum('amount_base')).order_by('month')):
        key = row['month'].strftime('%Y-%m')
        months.setdefault(key, {'month': key, 'revenue': Decimal('0'),
                                'gross_profit': Decimal('0'), 'expenses': Decimal('0')})
        months[key]['expenses'] = row['total'] or Decimal('0')

    return [months[k] for k in sorted(months)]
