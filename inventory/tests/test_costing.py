from decimal import Decimal
from django.test import SimpleTestCase, TestCase
from company.models import Company
from inventory.models import InventoryLog
from inventory.utils import receive_stock, reverse_receipt, replace_receipt, set_stock
from products.models import Product


class WeightedAverageTests(SimpleTestCase):

    def test_first_receipt_takes_unit_cost(self):
        self.assertEqual(receive_stock(0, 0, 10, Decimal("2.50")),
                         (10, Decimal("2.5000")))

    def test_average_equals_total_cost_over_total_quantity(self):
        receipts = [(10, Decimal("2")), (10, Decimal("4")), (5, Decimal("6"))]
        stock, avg = 0, Decimal("0")
        for qty, cost in receipts:
            stock, avg = receive_stock(stock, avg, qty, cost)

        total_cost = sum(q * c for q, c in receipts)
        self.assertEqual(stock, 25)
        self.assertEqual(avg, (total_cost / 25).quantize(Decimal("0.0001")))
        self.assertEqual(avg, Decimal("3.6000"))

    def test_reverse_undoes_receipt(self):
        stock, avg = receive_stock(10, Decimal("2"), 10, Decimal("4"))
        self.assertEqual(reverse_receipt(stock, avg, 10, Decimal("4")),
                         (10, Decimal("2.0000"), False))

    def test_reverse_of_everything_zeroes_cost(self):
        self.assertEqual(reverse_receipt(10, Decimal("3"), 10, Decimal("3")),
                         (0, Decimal("0.0000"), False))

    def test_reverse_clamps_when_stock_already_sold(self):
        stock, avg, clamped = reverse_receipt(4, Decimal("3"), 10, Decimal("3"))
        self.assertEqual(stock, 0)
        self.assertEqual(avg, Decimal("0"))
        self.assertTrue(clamped)

    def test_replace_matches_receiving_only_new_values(self):
        base_stock, base_avg = 10, Decimal("2")
        stock, avg = receive_stock(base_stock, base_avg, 10, Decimal("4"))

        replaced = replace_receipt(stock, avg, 10, Decimal("4"), 5, Decimal("8"))
        expected = receive_stock(base_stock, base_avg, 5, Decimal("8"))

        self.assertEqual(replaced[:2], expected)
        self.assertFalse(replaced[2])


class SetStockTests(TestCase):

    def setUp(self):
        self.company = Company.objects.create(name="Acme")
        self.product = Product.objects.create(company=self.company,
                                              product_code="a-1", name="Widget",
                                              quantity=5, min_stock=2)

    def test_set_stock_logs_signed_difference(self):
        old = set_stock(self.product, 1, reason="Counted")
        self.assertEqual(old, 5)

        log = InventoryLog.objects.get(product=self.product)
        self.assertEqual(log.change_quantity, -4)
        self.assertEqual(log.reason, "Counted")
        self.product.refresh_from_db()
        self.assertTrue(self.product.low_stock)

    def test_set_stock_without_change_writes_no_log(self):
        set_stock(self.product, 5)
        self.assertFalse(InventoryLog.objects.exists())
