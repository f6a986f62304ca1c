"""JSON views for hospital access codes.

Authentication is left to the host project, which should wrap or route these
views so that only staff can read a hospital's code.
"""

import json
from uuid import UUID

from django.http import JsonResponse
from django.shortcuts import get_object_or_404
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST

from . import services
from .exceptions import (
    AccessCodeRequiredError,
    InvalidAccessCodeError,
    UnauthorizedRoleError,
)
from .models import Hospital


def _read_json(request):
    """Return the request body as a dict, or None if it is not a JSON object."""
    try:
        body = json.loads(request.body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    return body if isinstance(body, dict) else None


@require_GET
def api_access_code(request, hospital_id: UUID):
    """API: Today's access code for a hospital."""
    hospital = get_object_or_404(Hospital, pk=hospital_id)
    return JsonResponse(services.describe_access_code(hospital))


@csrf_exempt
@require_POST
def api_validate_access_code(request, hospital_id: UUID):
    """API: Check a submitted code against today's code."""
    hospital = get_object_or_404(Hospital, pk=hospital_id)
    body = _read_json(request)
    if body is None:
        return JsonResponse({"error": "Request body must be a JSON object"}, status=400)

    access_code = body.get("access_code")
    if not isinstance(access_code, str) or not access_code:
        return JsonResponse({"error": "access_code is required"}, status=400)

    return JsonResponse({"valid": hospital.check_access_code(access_code)})


@csrf_exempt
@require_POST
def api_check_visit_access(request, hospital_id: UUID):
    """API: Gate a visit registration on role and access code."""
    hospital = get_object_or_404(Hospital, pk=hospital_id)
    body = _read_json(request)
    if body is None:
        return JsonResponse({"error": "Request body must be a JSON object"}, status=400)

    role = body.get("role")
    access_code = body.get("access_code")
    if not isinstance(role, str) or not role:
        return JsonResponse({"error": "role is required"}, status=400)
    if access_code is not None and not isinstance(access_code, str):
        return JsonResponse({"error": "access_code must be a string"}, status=400)

    try:
        services.require_access_code(hospital, access_code, role=role)
    except UnauthorizedRoleError as e:
        return JsonResponse({"error": str(e)}, status=403)
    except (AccessCodeRequiredError, InvalidAccessCodeError) as e:
        return JsonResponse({"allowed": False, "error": str(e)}, status=400)

    return JsonResponse({"allowed": True})
