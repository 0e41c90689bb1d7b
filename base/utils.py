import csv
import io
import json
import logging
from decimal import Decimal, InvalidOperation
from datetime import date, datetime
from django.conf import settings
from django.contrib.contenttypes.models import ContentType
from django.forms.models import model_to_dict
from django.http import HttpResponse
from rest_framework import serializers
from user.models import UserActivity

logger = logging.getLogger(__name__)

MONEY_PLACES = Decimal('0.01')
COST_PLACES = Decimal('0.0001')


class DjangoJSONEncoder(json.JSONEncoder):
    """Custom JSON encoder for Django model fields"""
    def default(self, obj):
        if isinstance(obj, (date, datetime)):
            return obj.isoformat()
        elif isinstance(obj, Decimal):
            return str(obj)
        elif hasattr(obj, '__dict__'):
            return str(obj)
        return super().default(obj)


def log_activity(request, action, instance, changes=None):
    content_type = ContentType.objects.get_for_model(instance)

    # Convert changes to JSON-serializable format if provided
    serializable_changes = None
    if changes:
        try:
            serializable_changes = json.loads(json.dumps(changes, cls=DjangoJSONEncoder))
        except (TypeError, ValueError):
            serializable_changes = {k: {'old': str(v.get('old', '')), 'new': str(v.get('new', ''))}
                                    for k, v in changes.items() if isinstance(v, dict)}

    UserActivity.objects.create(
        user=request.user,
        company=getattr(instance, 'company', None),
        content_type=content_type,
        object_id=instance.pk,
        action=action,
        changes=serializable_changes,
        ip_address=request.META.get('REMOTE_ADDR'),
        user_agent=(request.META.get('HTTP_USER_AGENT') or '')[:200] or None
    )


def diff_instance(old_data, instance):
    """Field-level {'old', 'new'} changes between a model_to_dict snapshot and instance."""
    new_data = model_to_dict(instance)
    return {k: {'old': old_data[k], 'new': v} for k, v in new_data.items()
            if k in old_data and old_data[k] != v}


def to_decimal(value, default=Decimal('0')):
    if value is None or value == '':
        return default
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise serializers.ValidationError(f"'{value}' is not a valid number.")


def get_exchange_rate(currency):
    code = (currency or settings.BASE_CURRENCY).upper()
    try:
        return settings.EXCHANGE_RATES[code]
    except KeyError:
        raise serializers.ValidationError({'currency': f"Unsupported currency '{code}'."})


def to_base(amount, currency):
    """Convert an amount in `currency` into the base currency."""
    rate = get_exchange_rate(currency)
    return (to_decimal(amount) / rate).quantize(COST_PLACES)


def export_to_csv(rows, filename, fieldnames=None):
    """Build a CSV download response from a list of dicts."""
    if fieldnames is None:
        fieldnames = list(rows[0].keys()) if rows else []
    response = HttpResponse(content_type='text/csv')
    response['Content-Disposition'] = f'attachment; filename="{filename}"'
    writer = csv.DictWriter(response, fieldnames=fieldnames)
    writer.writeheader()
    for row in rows:
        writer.writerow(row)
    return response


def read_csv_upload(uploaded_file):
    """Parse an uploaded CSV file into a list of dicts keyed by header."""
    raw = uploaded_file.read()
    if isinstance(raw, bytes):
        raw = raw.decode('utf-8-sig')
    reader = csv.DictReader(io.StringIO(raw))
    rows = []
    for row in reader:
        rows.append({(k or '').strip(): (v or '').strip() for k, v in row.items()})
    return rows
