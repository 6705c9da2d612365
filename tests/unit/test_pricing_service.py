"""
Unit tests for the pricing calculation (no database).
"""

from decimal import Decimal
from types import SimpleNamespace

from estimator.services.pricing_service import calculate_breakdown, convert


WEB_APP = SimpleNamespace(name='Web App', base_price=Decimal('15000'))
PAYMENT_GATEWAY = SimpleNamespace(id=2, name='Payment Gateway', base_price=Decimal('5000'))
USD = SimpleNamespace(code='USD', symbol='$', exchange_rate=Decimal('1'))
INR = SimpleNamespace(code='INR', symbol='₹', exchange_rate=Decimal('83'))


class TestCalculateBreakdown:

    def test_usd_standard_timeline(self):
        breakdown = calculate_breakdown([WEB_APP], [PAYMENT_GATEWAY], USD, Decimal('1.0'))

        data = breakdown.to_dict()
        assert data['basePrice'] == 15000
        assert data['featuresPrice'] == 5000
        assert data['totalPrice'] == 20000
        assert data['currency'] == {'code': 'USD', 'symbol': '$', 'exchangeRate': 1}

    def test_inr_conversion(self):
        breakdown = calculate_breakdown([WEB_APP], [PAYMENT_GATEWAY], INR, Decimal('1.0'))

        assert breakdown.to_dict()['basePrice'] == 1245000
        assert breakdown.to_dict()['featuresPrice'] == 415000
        assert breakdown.to_dict()['totalPrice'] == 1660000

    def test_express_multiplier(self):
        breakdown = calculate_breakdown([WEB_APP], [PAYMENT_GATEWAY], USD, Decimal('1.5'))

        assert breakdown.total_price == Decimal('30000')
        # Multiplier applies to the total only
        assert breakdown.to_dict()['basePrice'] == 15000
        assert breakdown.to_dict()['featuresPrice'] == 5000

    def test_no_features(self):
        breakdown = calculate_breakdown([WEB_APP], [], USD, Decimal('0.8'))

        assert breakdown.features_price == Decimal('0')
        assert breakdown.total_price == Decimal('12000')
        assert breakdown.feature_lines == []

    def test_multiple_software_types_are_summed(self):
        mobile = SimpleNamespace(name='Mobile App', base_price=Decimal('25000'))
        breakdown = calculate_breakdown([WEB_APP, mobile], [], USD, 1)

        assert breakdown.base_price == Decimal('40000')
        assert [line.name for line in breakdown.software_type_lines] == ['Web App', 'Mobile App']

    def test_full_precision_kept_and_display_rounded_half_up(self):
        cheap = SimpleNamespace(name='Landing Page', base_price=Decimal('100.5'))
        breakdown = calculate_breakdown([cheap], [], USD, 1)

        assert breakdown.total_price == Decimal('100.5')
        assert breakdown.display_total_price == Decimal('101')
        assert breakdown.to_dict()['totalPrice'] == 101

    def test_line_items(self):
        breakdown = calculate_breakdown([WEB_APP], [PAYMENT_GATEWAY], INR, 1)
        items = breakdown.line_items()

        assert items['softwareTypes'] == [
            {'name': 'Web App', 'basePrice': 15000, 'convertedPrice': 1245000},
        ]
        assert items['features'] == [
            {'id': 2, 'name': 'Payment Gateway', 'basePrice': 5000, 'convertedPrice': 415000},
        ]

    def test_float_inputs_are_handled_as_decimal(self):
        rate = SimpleNamespace(code='GBP', symbol='£', exchange_rate=0.8)
        breakdown = calculate_breakdown([WEB_APP], [], rate, 1.0)

        assert breakdown.total_price == Decimal('12000.0')
        assert breakdown.to_dict()['timelineMultiplier'] == 1


def test_convert():
    assert convert(Decimal('15000'), Decimal('83')) == Decimal('1245000')
    assert convert(None, 2) == Decimal('0')
