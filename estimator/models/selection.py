"""
Value objects for the wizard selection stored on an Estimation.

The selection is persisted as JSON columns; these classes give it a fixed
shape and are the only place where that JSON is read or written.
"""
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional

TECH_STACK_SLOTS = ('backend', 'frontend', 'mobile', 'database', 'cloud', 'other')


@dataclass(frozen=True)
class TechStackSelection:
    """One technology name per category slot; empty string when not chosen."""
    backend: str = ''
    frontend: str = ''
    mobile: str = ''
    database: str = ''
    cloud: str = ''
    other: str = ''

    @classmethod
    def from_payload(cls, payload: Optional[Dict[str, Any]]) -> 'TechStackSelection':
        """Build from a request body or stored JSON. Unknown keys are ignored."""
        payload = payload or {}
        values = {}
        for slot in TECH_STACK_SLOTS:
            value = payload.get(slot)
            values[slot] = str(value).strip() if value else ''
        return cls(**values)

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class EstimationSelection:
    """Everything the visitor picked in the wizard."""
    software_types: List[str]
    timeline: str
    currency: str
    industries: List[str] = field(default_factory=list)
    tech_stack: TechStackSelection = field(default_factory=TechStackSelection)
    feature_ids: List[int] = field(default_factory=list)
    timeline_multiplier: Optional[float] = None

    def to_columns(self) -> Dict[str, Any]:
        """Column values for the Estimation row."""
        return {
            'industries': list(self.industries),
            'software_types': list(self.software_types),
            'tech_stack': self.tech_stack.to_dict(),
            'timeline': self.timeline,
            'feature_ids': list(self.feature_ids),
            'currency': self.currency,
        }
