import logging
from decimal import Decimal
from django.db import transaction
from django.db.models import Sum, Max, Q
from base.exceptions import LedgerEntryMissing
from base.utils import to_base, to_decimal
from customer.models import Client
from loans.models import ClientLoan, ClientPayment, ClientTransaction

logger = logging.getLogger(__name__)

BALANCE_STATUSES = ('all', 'pending', 'settled', 'overpaid')


def summarize_balance(total_loan, total_paid):
    """
    Derive the displayed balance figures for one client. Outstanding and
    overpaid amounts are never both non-zero.
    """
    total_loan = to_decimal(total_loan)
    total_paid = to_decimal(total_paid)
    balance = total_loan - total_paid
    return {
        'total_loan': total_loan,
        'total_paid': total_paid,
        'balance': balance,
        'outstanding_balance': balance if balance > 0 else Decimal('0'),
        'overpaid_amount': abs(balance) if balance <= 0 else Decimal('0'),
    }


def balance_status(summary):
    if summary['outstanding_balance'] > 0:
        return 'pending'
    if summary['overpaid_amount'] > 0:
        return 'overpaid'
    return 'settled'


def client_balances(company, status='all', date_from=None, date_to=None, client=None):
    """
    Aggregate the ledger per client. Balances are derived on every call,
    never stored.
    """
    totals = (ClientTransaction.objects.for_company(company)
              .values('client')
              .annotate(total_loan=Sum('amount', filter=Q(type=ClientTransaction.TYPE_LOAN)),
                        total_payment=Sum('amount', filter=Q(type=ClientTransaction.TYPE_PAYMENT)),
                        last_activity=Max('date')))
    by_client = {row['client']: row for row in totals}

    clients = Client.objects.for_company(company)
    if client is not None:
        clients = clients.filter(pk=client.pk)

    rows = []
    for c in clients:
        agg = by_client.get(c.pk, {})
        summary = summarize_balance(agg.get('total_loan') or 0,
                                    -(agg.get('total_payment') or 0))
        summary.update({
            'client_id': c.pk,
            'client_name': c.name,
            'last_activity_date': agg.get('last_activity'),
        })
        summary['status'] = balance_status(summary)
        rows.append(summary)

    if status and status != 'all':
        rows = [r for r in rows if r['status'] == status]
    if date_from:
        rows = [r for r in rows if r['last_activity_date'] and
                r['last_activity_date'].date() >= date_from]
    if date_to:
        rows = [r for r in rows if r['last_activity_date'] and
                r['last_activity_date'].date() <= date_to]

    dated = sorted((r for r in rows if r['last_activity_date']),
                   key=lambda r: r['last_activity_date'], reverse=True)
    return dated + [r for r in rows if not r['last_activity_date']]


def create_loan(company, user, client, loan_amount, currency, description='',
                due_date=None):
    amount_base = to_base(loan_amount, currency)
    with transaction.atomic():
        loan = ClientLoan.objects.create(
            company=company,
            client=client,
            client_name=client.name,
            loan_amount=loan_amount,
            currency=currency,
            amount_base=amount_base,
            description=description or '',
            due_date=due_date,
            created_by=user,
        )
        ClientTransaction.objects.create(
            company=company,
            client=client,
            type=ClientTransaction.TYPE_LOAN,
            amount=amount_base,
            related_id=loan.pk,
            related_type='loan',
            description=description or '',
            date=loan.date,
            created_by=user,
        )
    logger.info("Loan %s of %s %s recorded for client %s", loan.pk,
                loan_amount, currency, client.pk)
    return loan


def record_payment(company, user, client, amount, method='Cash', reference='',
                   payment_date=None):
    amount = to_decimal(amount)
    with transaction.atomic():
        payment = ClientPayment(company=company, client=client, amount=amount,
                                method=method, reference=reference or '',
                                created_by=user)
        if payment_date:
            payment.payment_date = payment_date
        payment.save()
        ClientTransaction.objects.create(
            company=company,
            client=client,
            type=ClientTransaction.TYPE_PAYMENT,
            amount=-amount,
            related_id=payment.pk,
            related_type='payment',
            description=reference or '',
            date=payment.payment_date,
            created_by=user,
        )
    return payment


def _related_transaction(company, related_type, related_id):
    matches = list(ClientTransaction.objects.select_for_update()
                   .filter(company=company, related_type=related_type,
                           related_id=related_id)
                   .order_by('id'))
    if len(matches) > 1:
        logger.warning("%s %s has %s ledger entries; using the first.",
                       related_type, related_id, len(matches))
    return matches[0] if matches else None


def update_loan(loan, user, loan_amount, currency, description=None, due_date=None):
    with transaction.atomic():
        entry = _related_transaction(loan.company, 'loan', loan.pk)
        if entry is None:
            raise LedgerEntryMissing()
        loan.loan_amount = loan_amount
        loan.currency = currency
        loan.amount_base = to_base(loan_amount, currency)
        if description is not None:
            loan.description = description
        if due_date is not None:
            loan.due_date = due_date
        loan.modified_by = user
        loan.save()

        entry.amount = loan.amount_base
        entry.description = loan.description
        entry.modified_by = user
        entry.save()
    return loan


def delete_loan(loan):
    with transaction.atomic():
        entry = _related_transaction(loan.company, 'loan', loan.pk)
        if entry is not None:
            entry.delete()
        else:
            logger.warning("Loan %s had no ledger entry to remove.", loan.pk)
        loan.delete()


def delete_payment(payment):
    with transaction.atomic():
        entry = _related_transaction(payment.company, 'payment', payment.pk)
        if entry is not None:
            entry.delete()
        payment.delete()


def record_sale_loan(sale, client, user=None):
    """Ledger entry for a sale made on credit."""
    return ClientTransaction.objects.create(
        company=sale.company,
        client=client,
        type=ClientTransaction.TYPE_LOAN,
        amount=sale.total_base,
        related_id=sale.pk,
        related_type='sale',
        description=f"Sale of {sale.quantity} x {sale.product_name}",
        date=sale.date,
        created_by=user,
    )


def sync_sale_loan(sale, user=None):
    entry = _related_transaction(sale.company, 'sale', sale.pk)
    if entry is None:
        return None
    entry.client = sale.client
    entry.amount = sale.total_base
    entry.date = sale.date
    entry.modified_by = user
    entry.save()
    return entry


def remove_sale_loan(sale):
    entry = _related_transaction(sale.company, 'sale', sale.pk)
    if entry is not None:
        entry.delete()
    return entry
