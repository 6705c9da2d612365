"""
Pricing calculation for estimations.

Pure arithmetic over already-resolved catalog rows; no database access here.

    base_price     = sum(software_type.base_price * exchange_rate)
    features_price = sum(feature.base_price * exchange_rate)
    total_price    = (base_price + features_price) * timeline_multiplier
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Optional, Sequence

from estimator.utils.formatters import round_amount, to_number


@dataclass
class PriceLine:
    """One priced item (a software type or a feature)."""
    name: str
    base_price: Decimal
    converted_price: Decimal
    id: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'name': self.name,
            'basePrice': to_number(self.base_price, 0),
            'convertedPrice': to_number(round_amount(self.converted_price, 2), 0),
        }
        if self.id is not None:
            data = {'id': self.id, **data}
        return data


@dataclass
class PriceBreakdown:
    """Full-precision result of a pricing run, in the selected currency."""
    currency_code: str
    currency_symbol: str
    exchange_rate: Decimal
    timeline_multiplier: Decimal
    base_price: Decimal
    features_price: Decimal
    total_price: Decimal
    software_type_lines: List[PriceLine] = field(default_factory=list)
    feature_lines: List[PriceLine] = field(default_factory=list)

    @property
    def display_base_price(self) -> Decimal:
        return round_amount(self.base_price)

    @property
    def display_features_price(self) -> Decimal:
        return round_amount(self.features_price)

    @property
    def display_total_price(self) -> Decimal:
        return round_amount(self.total_price)

    def line_items(self) -> Dict[str, List[Dict[str, Any]]]:
        """Per-item prices as stored on the Estimation row."""
        return {
            'softwareTypes': [line.to_dict() for line in self.software_type_lines],
            'features': [line.to_dict() for line in self.feature_lines],
        }

    def to_dict(self) -> Dict[str, Any]:
        """Rounded view for API callers."""
        return {
            **self.line_items(),
            'basePrice': int(self.display_base_price),
            'featuresPrice': int(self.display_features_price),
            'totalPrice': int(self.display_total_price),
            'timelineMultiplier': to_number(self.timeline_multiplier),
            'currency': {
                'code': self.currency_code,
                'symbol': self.currency_symbol,
                'exchangeRate': to_number(self.exchange_rate, 1.0),
            },
        }


def _as_decimal(value) -> Decimal:
    if value is None:
        return Decimal('0')
    return value if isinstance(value, Decimal) else Decimal(str(value))


def convert(amount, exchange_rate) -> Decimal:
    """Base-currency amount expressed in the target currency."""
    return _as_decimal(amount) * _as_decimal(exchange_rate)


def calculate_breakdown(software_types: Sequence, features: Sequence, currency,
                        timeline_multiplier) -> PriceBreakdown:
    """
    Price a selection.

    Args:
        software_types: resolved SoftwareType rows (anything with name/base_price)
        features: resolved Feature rows (id/name/base_price); may be empty
        currency: resolved Currency row (code/symbol/exchange_rate)
        timeline_multiplier: scalar applied to the summed price

    Returns:
        PriceBreakdown with full-precision amounts.
    """
    rate = _as_decimal(currency.exchange_rate)
    multiplier = _as_decimal(timeline_multiplier)

    software_type_lines = [
        PriceLine(
            name=software_type.name,
            base_price=_as_decimal(software_type.base_price),
            converted_price=convert(software_type.base_price, rate),
        )
        for software_type in software_types
    ]
    feature_lines = [
        PriceLine(
            id=feature.id,
            name=feature.name,
            base_price=_as_decimal(feature.base_price),
            converted_price=convert(feature.base_price, rate),
        )
        for feature in features
    ]

    base_price = sum((line.converted_price for line in software_type_lines), Decimal('0'))
    features_price = sum((line.converted_price for line in feature_lines), Decimal('0'))
    total_price = (base_price + features_price) * multiplier

    return PriceBreakdown(
        currency_code=currency.code,
        currency_symbol=currency.symbol,
        exchange_rate=rate,
        timeline_multiplier=multiplier,
        base_price=base_price,
        features_price=features_price,
        total_price=total_price,
        software_type_lines=software_type_lines,
        feature_lines=feature_lines,
    )
