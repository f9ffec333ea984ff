# gradecalc/views.py
import json
import logging

from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt

from .services.feasibility import evaluate_payload_async
from .services.shared.errors import ValidationError

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "There was a problem with the calculation. Please try again."


def _rid(request) -> str:
    return getattr(request, "request_id", "-")


def _log_extra(request) -> dict:
    return {"request_id": _rid(request)}


def _get_client_ip(request) -> str:
    ip = request.META.get("HTTP_X_FORWARDED_FOR") or request.META.get("REMOTE_ADDR") or "-"
    return ip.split(",")[0].strip() if ip else "-"


def health_api(request):
    return JsonResponse({"status": "ok"})


@csrf_exempt
async def feasibility_api(request):
    ip = _get_client_ip(request)

    if request.method != "POST":
        logger.warning(f" [FEASIBILITY] Method not allowed method={request.method} ip={ip}", extra=_log_extra(request))
        return JsonResponse({"status": "error", "error_code": "METHOD_NOT_ALLOWED", "error": "Method not allowed"}, status=405)

    try:
        data = json.loads(request.body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.warning(f" [FEASIBILITY] Invalid JSON ip={ip}", extra=_log_extra(request))
        return JsonResponse({"status": "error", "error_code": "INVALID_PAYLOAD", "error": "Invalid JSON"}, status=400)

    try:
        outcome = await evaluate_payload_async(data, request_id=_rid(request))
    except ValidationError as e:
        logger.warning(
            f" [FEASIBILITY] Input ditolak code={e.error_code} field={e.field or '-'} ip={ip}",
            extra=_log_extra(request),
        )
        return JsonResponse(e.as_payload(), status=400)
    except Exception as e:
        logger.error(f" [FEASIBILITY CRASH] ip={ip} err={repr(e)}", extra=_log_extra(request), exc_info=True)
        return JsonResponse(
            {"status": "error", "error_code": "INTERNAL_ERROR", "error": GENERIC_ERROR_MESSAGE},
            status=500,
        )

    logger.info(
        f" [FEASIBILITY RESPONSE] ip={ip} type={outcome.kind} warnings={len(outcome.warnings)}",
        extra=_log_extra(request),
    )
    return JsonResponse(outcome.as_payload())
