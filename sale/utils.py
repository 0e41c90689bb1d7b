import logging
from decimal import Decimal
from django.conf import settings
from django.db import transaction
from django.utils import timezone
from rest_framework import serializers
from base.exceptions import InsufficientStock, UnknownProductCode
from base.utils import to_base, MONEY_PLACES, COST_PLACES
from customer.models import Client
from inventory.utils import write_inventory_log
from loans.utils import record_sale_loan, sync_sale_loan, remove_sale_loan
from products.models import Product, normalize_product_code
from sale.models import Sale

logger = logging.getLogger(__name__)


def calculate_sale_amounts(quantity, sale_price, currency, unit_cost, total=None):
    """
    Money figures of a sale line. `total` is taken as given when supplied,
    otherwise quantity x sale_price. Profit is in the base currency.
    """
    if total is None:
        total = Decimal(quantity) * Decimal(sale_price)
    total = Decimal(total).quantize(MONEY_PLACES)
    total_base = to_base(total, currency)
    cogs = (Decimal(unit_cost or 0) * quantity).quantize(COST_PLACES)
    return {
        'total': total,
        'total_base': total_base,
        'cost_of_goods_sold': cogs,
        'gross_profit': total_base - cogs,
    }


def resolve_client(company, client=None, client_name=''):
    """Find the ledger client of a sale by instance/id, falling back to name."""
    if isinstance(client, Client):
        return client
    clients = Client.objects.for_company(company)
    if client:
        found = clients.filter(pk=client).first()
        if found:
            return found
    if client_name:
        return clients.filter(name__iexact=client_name.strip()).first()
    return None


def record_sale(company, user, data):
    product_code = normalize_product_code(data.get('product_code'))
    quantity = data['quantity']
    currency = data.get('sale_price_currency') or settings.BASE_CURRENCY

    with transaction.atomic():
        product = (Product.objects.select_for_update().alive()
                   .filter(company=company, product_code=product_code).first())
        if product is None:
            raise UnknownProductCode(f"Product with code {product_code} not found")
        if quantity > product.quantity:
            raise InsufficientStock(
                f"Not enough stock for {product.name}. Available: {product.quantity}")

        client = None
        if data.get('payment_type') == Sale.PAYMENT_LOAN:
            client = resolve_client(company, data.get('client'), data.get('client_name'))
            if client is None:
                raise serializers.ValidationError(
                    {'client': "A known client is required for loan sales."})
        elif data.get('client'):
            client = resolve_client(company, data.get('client'))

        seller = data.get('seller')
        amounts = calculate_sale_amounts(quantity, data['sale_price'], currency,
                                         product.cost, data.get('total'))
        sale = Sale(
            company=company,
            product=product,
            product_code=product.product_code,
            product_name=product.name,
            client=client,
            client_name=data.get('client_name') or (client.name if client else ''),
            seller=seller,
            seller_name=seller.name if seller else data.get('seller_name', ''),
            warehouse=product.location,
            quantity=quantity,
            sale_price=data['sale_price'],
            sale_price_currency=currency,
            payment_type=data.get('payment_type') or Sale.PAYMENT_CASH,
            created_by=user,
            **amounts
        )
        if data.get('date'):
            sale.date = data['date']
        sale.save()

        product.quantity -= quantity
        product.modified_by = user
        product.save()
        write_inventory_log(product, -quantity, f"Sale #{sale.pk}.", user)

        if sale.is_loan:
            record_sale_loan(sale, client, user)

    logger.info("Sale %s: %s x %s for %s %s", sale.pk, quantity, product_code,
                sale.total, currency)
    return sale


def update_sale(sale, user, data):
    """
    Apply an edit to a recorded sale. Only the quantity difference touches
    stock; the cost basis of the product is left alone.
    """
    with transaction.atomic():
        product = None
        if sale.product_id:
            product = Product.objects.select_for_update().filter(pk=sale.product_id).first()

        old_quantity = sale.quantity
        new_quantity = data.get('quantity', old_quantity)
        difference = new_quantity - old_quantity

        if product is None:
            logger.warning("Product %s of sale %s no longer exists; updating "
                           "the sale without touching stock.", sale.product_code, sale.pk)
            unit_cost = (sale.cost_of_goods_sold / old_quantity) if old_quantity else Decimal('0')
        else:
            if product.quantity - difference < 0:
                raise InsufficientStock("Not enough stock for update")
            unit_cost = product.cost
            if difference:
                product.quantity -= difference
                product.modified_by = user
                product.save()
                write_inventory_log(product, -difference,
                                    f"Sale #{sale.pk} edited.", user)

        for field in ('sale_price', 'sale_price_currency', 'client_name',
                      'payment_type', 'date'):
            if field in data:
                setattr(sale, field, data[field])
        if 'seller' in data:
            sale.seller = data['seller']
            sale.seller_name = data['seller'].name if data['seller'] else ''
        if 'client' in data or 'client_name' in data:
            sale.client = resolve_client(sale.company, data.get('client'), sale.client_name)
            if sale.client and 'client_name' not in data:
                sale.client_name = sale.client.name

        sale.quantity = new_quantity
        amounts = calculate_sale_amounts(new_quantity, sale.sale_price,
                                         sale.sale_price_currency, unit_cost,
                                         data.get('total'))
        for field, value in amounts.items():
            setattr(sale, field, value)
        sale.modified_by = user
        sale.save()

        if sale.is_loan:
            if sale.client is None:
                raise serializers.ValidationError(
                    {'client': "A known client is required for loan sales."})
            if sync_sale_loan(sale, user) is None:
                record_sale_loan(sale, sale.client, user)
        else:
            remove_sale_loan(sale)
    return sale


def delete_sale(sale, user):
    """
    Soft-delete a sale and put its quantity back on the shelf. Deleting an
    already deleted sale does nothing.
    """
    with transaction.atomic():
        sale = Sale.objects.select_for_update().get(pk=sale.pk)
        if sale.is_deleted:
            return sale

        product = None
        if sale.product_id:
            product = Product.objects.select_for_update().filter(pk=sale.product_id).first()
        if product is None:
            logger.warning("Product %s of sale %s no longer exists; stock not "
                           "restored.", sale.product_code, sale.pk)
        else:
            product.quantity += sale.quantity
            product.modified_by = user
            product.save()
            write_inventory_log(product, sale.quantity,
                                f"Sale #{sale.pk} deleted.", user)

        if sale.is_loan:
            remove_sale_loan(sale)

        sale.is_deleted = True
        sale.deleted_at = timezone.now()
        sale.deleted_by = user
        sale.save()
    return sale
