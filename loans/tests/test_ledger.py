from decimal import Decimal
import pytest
from django.test import SimpleTestCase, TestCase, override_settings
from base.exceptions import LedgerEntryMissing
from company.models import Company
from customer.models import Client
from loans.models import ClientLoan, ClientTransaction
from loans.utils import (summarize_balance, client_balances, create_loan,
                         record_payment, update_loan, delete_loan)

RATES = {"USD": Decimal("1"), "EUR": Decimal("0.5")}


class SummarizeBalanceTests(SimpleTestCase):

    def test_outstanding_balance(self):
        summary = summarize_balance(Decimal("100"), Decimal("40"))
        self.assertEqual(summary["balance"], Decimal("60"))
        self.assertEqual(summary["outstanding_balance"], Decimal("60"))
        self.assertEqual(summary["overpaid_amount"], Decimal("0"))

    def test_overpaid_balance(self):
        summary = summarize_balance(Decimal("100"), Decimal("130"))
        self.assertEqual(summary["outstanding_balance"], Decimal("0"))
        self.assertEqual(summary["overpaid_amount"], Decimal("30"))

    def test_outstanding_and_overpaid_are_exclusive(self):
        for loan, paid in [(0, 0), (10, 10), (10, 3), (3, 10), (0, 5)]:
            summary = summarize_balance(loan, paid)
            self.assertFalse(summary["outstanding_balance"] > 0 and
                             summary["overpaid_amount"] > 0)
            self.assertEqual(summary["balance"],
                             summary["outstanding_balance"] - summary["overpaid_amount"])


@override_settings(BASE_CURRENCY="USD", EXCHANGE_RATES=RATES)
class LedgerTests(TestCase):

    def setUp(self):
        self.company = Company.objects.create(name="Acme")
        self.bob = Client.objects.create(company=self.company, name="Bob")
        self.carol = Client.objects.create(company=self.company, name="Carol")

    def test_loan_and_payment_write_signed_entries(self):
        loan = create_loan(self.company, None, self.bob, Decimal("50"), "EUR")
        payment = record_payment(self.company, None, self.bob, Decimal("30"))

        self.assertEqual(loan.amount_base, Decimal("100.0000"))
        self.assertEqual(loan.client_name, "Bob")
        loan_entry = ClientTransaction.objects.get(related_type="loan", related_id=loan.pk)
        payment_entry = ClientTransaction.objects.get(related_type="payment",
                                                      related_id=payment.pk)
        self.assertEqual(loan_entry.amount, Decimal("100.0000"))
        self.assertEqual(payment_entry.amount, Decimal("-30"))

    def test_balances_are_derived_per_client(self):
        create_loan(self.company, None, self.bob, Decimal("100"), "USD")
        record_payment(self.company, None, self.bob, Decimal("40"))
        create_loan(self.company, None, self.carol, Decimal("20"), "USD")
        record_payment(self.company, None, self.carol, Decimal("25"))

        rows = {r["client_name"]: r for r in client_balances(self.company)}
        self.assertEqual(rows["Bob"]["outstanding_balance"], Decimal("60"))
        self.assertEqual(rows["Bob"]["status"], "pending")
        self.assertEqual(rows["Carol"]["overpaid_amount"], Decimal("5"))
        self.assertEqual(rows["Carol"]["status"], "overpaid")

        pending = client_balances(self.company, status="pending")
        self.assertEqual([r["client_name"] for r in pending], ["Bob"])

    def test_client_without_activity_is_settled(self):
        rows = client_balances(self.company, status="settled")
        self.assertEqual({r["client_name"] for r in rows}, {"Bob", "Carol"})
        self.assertTrue(all(r["last_activity_date"] is None for r in rows))

    def test_update_loan_moves_ledger_entry(self):
        loan = create_loan(self.company, None, self.bob, Decimal("100"), "USD")
        update_loan(loan, None, Decimal("30"), "EUR", description="Revised")

        entry = ClientTransaction.objects.get(related_type="loan", related_id=loan.pk)
        self.assertEqual(entry.amount, Decimal("60.0000"))
        self.assertEqual(ClientLoan.objects.get(pk=loan.pk).description, "Revised")

    def test_update_loan_without_entry_fails(self):
        loan = create_loan(self.company, None, self.bob, Decimal("100"), "USD")
        ClientTransaction.objects.all().delete()

        with self.assertRaises(LedgerEntryMissing):
            update_loan(loan, None, Decimal("30"), "USD")
        self.assertEqual(ClientLoan.objects.get(pk=loan.pk).loan_amount, Decimal("100"))

    def test_update_loan_with_duplicate_entries_uses_first(self):
        loan = create_loan(self.company, None, self.bob, Decimal("100"), "USD")
        ClientTransaction.objects.create(company=self.company, client=self.bob,
                                         type="Loan", amount=Decimal("100"),
                                         related_type="loan", related_id=loan.pk)

        with self.assertLogs("loans.utils", level="WARNING"):
            update_loan(loan, None, Decimal("10"), "USD")
        amounts = list(ClientTransaction.objects.order_by("id")
                       .values_list("amount", flat=True))
        self.assertEqual(amounts, [Decimal("10.0000"), Decimal("100.0000")])

    def test_delete_loan_removes_entry(self):
        loan = create_loan(self.company, None, self.bob, Decimal("100"), "USD")
        delete_loan(loan)
        self.assertFalse(ClientLoan.objects.exists())
        self.assertFalse(ClientTransaction.objects.exists())


@pytest.mark.django_db
def test_balance_endpoints(api_client, company, other_company):
    bob = Client.objects.create(company=company, name="Bob")
    Client.objects.create(company=other_company, name="Mallory")

    response = api_client.post("/api/loans/", {"client": bob.pk, "loan_amount": "80.00",
                                               "currency": "USD"}, format="json")
    assert response.status_code == 201
    api_client.post("/api/payments/", {"client": bob.pk, "amount": "30"}, format="json")

    listing = api_client.get("/api/client-balances/")
    assert listing.status_code == 200
    assert [row["client_name"] for row in listing.data["data"]] == ["Bob"]
    assert Decimal(listing.data["data"][0]["outstanding_balance"]) == Decimal("50")

    detail = api_client.get(f"/api/client-balances/{bob.pk}/")
    assert len(detail.data["loans"]) == 1
    assert len(detail.data["payments"]) == 1
    assert len(detail.data["transactions"]) == 2

    export = api_client.get("/api/client-balances/export/", {"status": "pending"})
    assert export.status_code == 200
    assert export["Content-Type"] == "text/csv"
    assert "Bob" in export.content.decode()

    assert api_client.get("/api/client-balances/", {"status": "bogus"}).status_code == 400


@pytest.mark.django_db
def test_loan_for_other_company_client_is_rejected(api_client, other_company):
    mallory = Client.objects.create(company=other_company, name="Mallory")
    response = api_client.post("/api/loans/", {"client": mallory.pk, "loan_amount": "10",
                                               "currency": "USD"}, format="json")
    assert response.status_code == 400
    assert not ClientLoan.objects.exists()
