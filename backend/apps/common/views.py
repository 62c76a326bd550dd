from django.conf import settings
from django.http import JsonResponse
from django.db import connections
from django.db.utils import OperationalError
from pathlib import Path
import time
from .logger import get_logger

logger = get_logger(__name__).bind(component='common', layer='health')


def _db_check(alias='default'):
    started = time.time()
    try:
        conn = connections[alias]
        conn.cursor().execute('SELECT 1')
        latency = round((time.time() - started) * 1000, 2)
        logger.debug('Database health check succeeded', alias=alias, latency_ms=latency)
        return {'status': 'ok', 'latency_ms': latency}
    except OperationalError as e:
        logger.warning('Database health check encountered operational error', alias=alias, error=str(e))
        return {'status': 'fail', 'error': str(e)}
    except Exception as e:  # report any driver failure as a failed probe
        logger.error('Database health check failed unexpectedly', alias=alias, error=str(e), exception=e.__class__.__name__)
        return {'status': 'fail', 'error': str(e), 'exception': e.__class__.__name__}


def _image_dir_check():
    image_dir = Path(getattr(settings, 'CATALOG_IMAGE_DIR', ''))
    if not image_dir.exists():
        # Created lazily on the first upload.
        logger.debug('Image directory not created yet', path=str(image_dir))
        return {'status': 'skipped', 'detail': 'image directory not created yet'}
    if not image_dir.is_dir():
        logger.warning('Image path is not a directory', path=str(image_dir))
        return {'status': 'fail', 'error': 'image path is not a directory'}
    return {'status': 'ok'}


def live_health(request):
    """Liveness probe: process is up and can service requests."""
    logger.debug('Liveness probe served')
    return JsonResponse({'status': 'alive'})


def ready_health(request):
    """Readiness probe: verifies critical dependencies (database, image storage)."""
    checks = {
        'database': _db_check(),
        'images': _image_dir_check(),
    }

    failing = [name for name, r in checks.items() if r.get('status') == 'fail']
    overall_status = 'ok' if not failing else 'degraded'
    http_status = 200 if not failing else 503
    payload = {
        'status': overall_status,
        'checks': checks,
    }
    logger.info('Readiness probe evaluated', status=overall_status, failing_components=failing)
    return JsonResponse(payload, status=http_status)
