"""
Projector module for monthly track revenue projections.

Provides the monthly accumulation model and the platform revenue split.
"""

from .revenue_model import (
    Accumulator,
    RevenueModel,
    first_crossing,
    create_platform_breakdown,
    create_revenue_model,
)

__version__ = "1.0.0"

__all__ = [
    # revenue_model.py
    "Accumulator",
    "RevenueModel",
    "first_crossing",
    "create_platform_breakdown",
    "create_revenue_model",
]
