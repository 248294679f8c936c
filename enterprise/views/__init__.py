"""
Enterprise Views

Read-only license status and helpers for gating enterprise views.
"""

from .api import license_status
from .utils import enterprise_required

__all__ = ['license_status', 'enterprise_required']
