"""
API views for license status.
"""
from django.http import JsonResponse
from django.views.decorators.http import require_GET

from enterprise.apps import get_resources
from enterprise.licensing import get_shared_service


@require_GET
def license_status(request):
    """Current license of this installation as JSON."""
    service = get_shared_service(get_resources())
    loaded = service.current_license() if service else None

    if loaded is None:
        return JsonResponse({'error': 'License service not available'}, status=503)

    return JsonResponse({
        'organization': loaded.organization,
        'type': loaded.type,
        'type_name': loaded.type_name(),
        'expires_at': loaded.expiry_display(),
        'enterprise': loaded.allows_enterprise_features(),
    })
