import logging
from decimal import Decimal
from django.db import transaction
from django.utils import timezone
from rest_framework import serializers
from base.exceptions import ProductNotFound
from base.utils import to_decimal
from inventory.utils import (receive_stock, reverse_receipt, replace_receipt,
                             write_inventory_log)
from products.models import Product, normalize_product_code
from purchase.api.serializers import IncomingReceiveSerializer
from purchase.models import IncomingProductLog

logger = logging.getLogger(__name__)


def _locked_product(company, product_code, product_id=None):
    products = Product.objects.select_for_update().filter(company=company)
    if product_id:
        # a receipt stays with its product even if the code was changed
        return products.filter(pk=product_id).first()
    return products.filter(product_code=product_code).first()


def receive_incoming(company, user, data):
    """
    Record a stock receipt, creating the product on first receipt and
    otherwise folding the receipt into its weighted-average cost.
    """
    product_code = normalize_product_code(data.get('product_code'))
    quantity = int(data.get('quantity') or 0)
    unit_cost = to_decimal(data.get('unit_cost'))
    supplier = data.get('supplier') or ''
    if not product_code or quantity <= 0:
        raise serializers.ValidationError("Invalid incoming product data.")
    if not unit_cost.is_finite() or unit_cost < 0:
        raise serializers.ValidationError({'unit_cost': "Cost must be a non-negative number."})

    with transaction.atomic():
        product = _locked_product(company, product_code)
        if product is None:
            product = Product(
                company=company,
                product_code=product_code,
                name=data.get('name') or f"Product {product_code}",
                category=data.get('category') or 'Uncategorized',
                quantity=quantity,
                cost=unit_cost,
                purchase_price=unit_cost,
                purchase_price_base=unit_cost,
                supplier=supplier,
                location=data.get('location') or '',
                min_stock=data.get('min_stock') or 0,
                created_by=user,
            )
            product.save()
        else:
            if product.is_deleted:
                # receiving stock for a deleted code brings it back
                product.is_deleted = False
                product.deleted_at = None
                product.deleted_by = None
            product.quantity, product.cost = receive_stock(
                product.quantity, product.cost, quantity, unit_cost)
            product.supplier = supplier or product.supplier
            product.location = data.get('location') or product.location
            if data.get('min_stock') is not None:
                product.min_stock = data['min_stock']
            product.modified_by = user
            product.save()

        log = IncomingProductLog.objects.create(
            company=company,
            product=product,
            product_code=product_code,
            quantity=quantity,
            unit_cost=unit_cost,
            supplier=supplier,
            created_by=user,
        )
        write_inventory_log(
            product, quantity,
            f"Incoming stock from supplier: {supplier or 'N/A'}.", user)

    logger.info("Received %s x %s @ %s for company %s", quantity, product_code,
                unit_cost, company.pk)
    return log, product


def update_incoming(log, user, quantity, unit_cost, supplier=None):
    """Reverse the original receipt and re-apply it with the edited values."""
    unit_cost = to_decimal(unit_cost)
    with transaction.atomic():
        product = _locked_product(log.company, log.product_code, log.product_id)
        if product is None:
            raise ProductNotFound()

        new_stock, new_cost, clamped = replace_receipt(
            product.quantity, product.cost, log.quantity, log.unit_cost,
            quantity, unit_cost)
        if clamped:
            logger.warning("Stock of %s became negative reversing incoming "
                           "log %s; clamped to 0.", product.product_code, log.pk)

        change = new_stock - product.quantity
        product.quantity = new_stock
        product.cost = new_cost
        product.modified_by = user
        product.save()

        log.quantity = quantity
        log.unit_cost = unit_cost
        if supplier is not None:
            log.supplier = supplier
        log.date = timezone.now()
        log.modified_by = user
        log.save()

        if change:
            write_inventory_log(product, change,
                                f"Incoming log #{log.pk} edited.", user)
    return log, product


def delete_incoming(log, user):
    """Undo a receipt's effect on its product and remove the log."""
    with transaction.atomic():
        product = _locked_product(log.company, log.product_code, log.product_id)
        if product is None:
            log.delete()
            return None

        new_stock, new_cost, clamped = reverse_receipt(
            product.quantity, product.cost, log.quantity, log.unit_cost)
        if clamped:
            logger.warning("Stock of %s became negative deleting incoming "
                           "log %s; clamped to 0.", product.product_code, log.pk)

        change = new_stock - product.quantity
        product.quantity = new_stock
        product.cost = max(new_cost, Decimal('0'))
        product.modified_by = user
        product.save()

        log_id = log.pk
        log.delete()
        if change:
            write_inventory_log(product, change,
                                f"Incoming log #{log_id} deleted.", user)
    return product


CSV_COLUMNS = {
    'productCode': 'product_code',
    'productName': 'name',
    'category': 'category',
    'quantity': 'quantity',
    'cost': 'unit_cost',
    'supplier': 'supplier',
    'location': 'location',
    'minStock': 'min_stock',
}


def import_incoming_rows(company, user, rows):
    """Receive every CSV row in one transaction; a bad row rejects the file."""
    if not rows:
        raise serializers.ValidationError("The file contains no rows.")
    missing = {'productCode', 'quantity', 'cost'} - set(rows[0].keys())
    if missing:
        raise serializers.ValidationError(
            f"Missing columns: {', '.join(sorted(missing))}.")

    logs = []
    with transaction.atomic():
        for number, row in enumerate(rows, start=2):
            # blank optional cells fall back to the product's current values
            data = {field: row[column] for column, field in CSV_COLUMNS.items()
                    if row.get(column, '') != ''}
            serializer = IncomingReceiveSerializer(data=data)
            if not serializer.is_valid():
                logger.error("Incoming import failed at row %s: %s", number,
                             serializer.errors)
                raise serializers.ValidationError({'row': number,
                                                   'detail': serializer.errors})
            log, _ = receive_incoming(company, user, serializer.validated_data)
            logs.append(log)
    return logs
