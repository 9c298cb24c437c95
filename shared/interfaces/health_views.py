"""
Health endpoints for the catalog service.

Liveness only proves the process answers. Readiness checks the two services
every product operation depends on: the database holding the catalog and the
bucket holding product images.
"""
import logging

from django.db import connection
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from shared.domain.exceptions import error_message
from shared.infrastructure.storage import S3ImageStorage

logger = logging.getLogger(__name__)


def database_status() -> dict:
    try:
        connection.ensure_connection()
    except Exception as e:
        logger.error(f"Readiness: database unavailable: {error_message(e)}")
        return {'healthy': False, 'error': error_message(e)}
    return {'healthy': True, 'vendor': connection.vendor}


def image_storage_status() -> dict:
    try:
        storage = S3ImageStorage()
        storage.check_bucket()
    except Exception as e:
        logger.error(f"Readiness: image storage unavailable: {error_message(e)}")
        return {'healthy': False, 'error': error_message(e)}
    return {'healthy': True, 'bucket': storage.bucket}


READINESS_CHECKS = {
    'database': database_status,
    'image_storage': image_storage_status,
}


class HealthCheckView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    def get(self, request):
        return Response({'status': 'healthy'})


class LivenessCheckView(HealthCheckView):

    def get(self, request):
        return Response({'status': 'alive'})


class ReadinessCheckView(HealthCheckView):
    """Reports 503 while any backing service is unavailable."""

    def get(self, request):
        checks = {name: check() for name, check in READINESS_CHECKS.items()}
        ready = all(check['healthy'] for check in checks.values())
        return Response(
            {'status': 'ready' if ready else 'not_ready', 'checks': checks},
            status=status.HTTP_200_OK if ready else status.HTTP_503_SERVICE_UNAVAILABLE,
        )
