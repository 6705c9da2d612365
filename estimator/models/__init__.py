"""Models package - exports all SQLAlchemy models."""
# Pricing catalog
from estimator.models.industry import Industry
from estimator.models.software_type import SoftwareType, SOFTWARE_CATEGORIES, COMPLEXITY_LEVELS
from estimator.models.tech_stack import TechStack, TECH_STACK_CATEGORIES, DIFFICULTY_LEVELS
from estimator.models.timeline import Timeline
from estimator.models.feature import Feature
from estimator.models.currency import Currency

# Submissions
from estimator.models.selection import EstimationSelection, TechStackSelection
from estimator.models.estimation import Estimation, EstimationStatus
from estimator.models.contact import Contact, ContactStatus

__all__ = [
    # Catalog
    'Industry', 'SoftwareType', 'TechStack', 'Timeline', 'Feature', 'Currency',
    'SOFTWARE_CATEGORIES', 'COMPLEXITY_LEVELS', 'TECH_STACK_CATEGORIES', 'DIFFICULTY_LEVELS',
    # Submissions
    'EstimationSelection', 'TechStackSelection',
    'Estimation', 'EstimationStatus',
    'Contact', 'ContactStatus',
]
