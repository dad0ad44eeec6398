"""
Pure filter / sort / aggregate passes over registration snapshots.

Nothing in this package touches the database or Flask; callers pass in
snapshots and get fresh lists back.
"""
from .aggregation import CHART_PALETTE, count_by, product_chart_data, recent_activity, top_n
from .filtering import (
    filter_names,
    filter_products_for_picker,
    filter_registrations,
    registration_day,
    search_products,
)
from .sorting import collation_key, sort_names, sort_registrations
from .stores import ReferenceStore, RegistrationStore, Snapshot, SOURCE_DATABASE, SOURCE_DEMO
from .types import (
    ALL,
    Category,
    ChartSegment,
    Dimension,
    FilterCriteria,
    Product,
    Registration,
    SortKey,
    SortOrder,
    UNKNOWN_CATEGORY,
)

__all__ = [
    'CHART_PALETTE', 'count_by', 'product_chart_data', 'recent_activity', 'top_n',
    'filter_names', 'filter_products_for_picker', 'filter_registrations',
    'registration_day', 'search_products',
    'collation_key', 'sort_names', 'sort_registrations',
    'ReferenceStore', 'RegistrationStore', 'Snapshot', 'SOURCE_DATABASE', 'SOURCE_DEMO',
    'ALL', 'Category', 'ChartSegment', 'Dimension', 'FilterCriteria', 'Product',
    'Registration', 'SortKey', 'SortOrder', 'UNKNOWN_CATEGORY',
]
