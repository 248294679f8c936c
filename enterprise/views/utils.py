"""
Utility functions for views
"""
from functools import wraps

from django.http import HttpResponseForbidden

from enterprise.apps import get_resources
from enterprise.licensing import EnterpriseLicenseRequiredError, check_running_enterprise


def enterprise_required(view_func):
    """Reject requests with 403 unless an enterprise license is active."""
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        try:
            check_running_enterprise(get_resources())
        except EnterpriseLicenseRequiredError as e:
            return HttpResponseForbidden(str(e))
        return view_func(request, *args, **kwargs)
    return _wrapped
