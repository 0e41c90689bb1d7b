import logging
from decimal import Decimal, ROUND_HALF_UP
from inventory.models import InventoryLog

logger = logging.getLogger(__name__)

COST_PLACES = Decimal('0.0001')


def _q(value):
    return Decimal(value).quantize(COST_PLACES, rounding=ROUND_HALF_UP)


def receive_stock(old_stock, old_avg_cost, qty_in, unit_cost):
    """
    Weighted-average cost after receiving `qty_in` units at `unit_cost`.

    Returns (new_stock, new_avg_cost). When the resulting stock is zero the
    receipt's own unit cost becomes the average.
    """
    old_stock = old_stock or 0
    old_avg_cost = Decimal(old_avg_cost or 0)
    unit_cost = Decimal(unit_cost or 0)
    new_stock = old_stock + qty_in
    if new_stock > 0:
        new_avg = (old_stock * old_avg_cost + qty_in * unit_cost) / new_stock
    else:
        new_avg = unit_cost
    return new_stock, _q(new_avg)


def reverse_receipt(old_stock, old_avg_cost, qty, unit_cost):
    """
    Remove a previous receipt's contribution from a product's stock value.

    Returns (stock, avg_cost, clamped). Stock never goes below zero; if the
    product already sold more than the remainder, stock is clamped to zero and
    `clamped` is True. The average is 0 when nothing remains.
    """
    old_stock = old_stock or 0
    old_avg_cost = Decimal(old_avg_cost or 0)
    unit_cost = Decimal(unit_cost or 0)
    total_value = old_avg_cost * old_stock - qty * unit_cost
    stock = old_stock - qty
    clamped = stock < 0
    if clamped:
        stock = 0
    avg = total_value / stock if stock > 0 else Decimal('0')
    return stock, _q(avg), clamped


def replace_receipt(old_stock, old_avg_cost, old_qty, old_unit_cost,
                    new_qty, new_unit_cost):
    """Reverse a receipt and re-apply it with edited quantity and cost."""
    stock, avg, clamped = reverse_receipt(old_stock, old_avg_cost, old_qty,
                                          old_unit_cost)
    new_unit_cost = Decimal(new_unit_cost or 0)
    new_stock = stock + new_qty
    if new_stock > 0:
        new_avg = (avg * stock + new_qty * new_unit_cost) / new_stock
    else:
        new_avg = Decimal('0')
    return new_stock, _q(new_avg), clamped


def write_inventory_log(product, change_quantity, reason, user=None):
    return InventoryLog.objects.create(
        company=product.company,
        product=product,
        product_code=product.product_code,
        change_quantity=change_quantity,
        reason=reason,
        created_by=user,
    )


def set_stock(product, new_quantity, user=None, reason='Manual stock adjustment.'):
    """Overwrite a product's quantity, logging the signed difference."""
    old_quantity = product.quantity
    product.quantity = new_quantity
    product.modified_by = user
    product.save()
    difference = new_quantity - old_quantity
    if difference:
        write_inventory_log(product, difference, reason, user)
    logger.info("Stock for %s set %s -> %s", product.product_code,
                old_quantity, new_quantity)
    return old_quantity
