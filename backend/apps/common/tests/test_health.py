import json
import tempfile
import unittest
from unittest import mock

from django.test import override_settings

from apps.common import views


class HealthViewsUnitTests(unittest.TestCase):
    def test_live_health_returns_alive_payload(self):
        response = views.live_health(None)
        self.assertEqual(response.status_code, 200)
        payload = json.loads(response.content)
        self.assertEqual(payload['status'], 'alive')

    @mock.patch('apps.common.views._image_dir_check', return_value={'status': 'ok'})
    @mock.patch('apps.common.views._db_check', return_value={'status': 'ok', 'latency_ms': 1.23})
    def test_ready_health_ok_when_dependencies_pass(self, mock_db_check, _mock_images):
        response = views.ready_health(None)
        self.assertEqual(response.status_code, 200)
        payload = json.loads(response.content)
        self.assertEqual(payload['status'], 'ok')
        self.assertEqual(payload['checks']['database'], mock_db_check.return_value)
        self.assertEqual(payload['checks']['images']['status'], 'ok')

    @mock.patch('apps.common.views._image_dir_check', return_value={'status': 'skipped'})
    @mock.patch('apps.common.views._db_check', return_value={'status': 'fail', 'error': 'db down'})
    def test_ready_health_degraded_on_database_failure(self, mock_db_check, _mock_images):
        response = views.ready_health(None)
        self.assertEqual(response.status_code, 503)
        payload = json.loads(response.content)
        self.assertEqual(payload['status'], 'degraded')
        self.assertEqual(payload['checks']['database'], mock_db_check.return_value)

    def test_image_dir_check_skipped_when_missing(self):
        with tempfile.TemporaryDirectory() as tmp:
            with override_settings(CATALOG_IMAGE_DIR=f"{tmp}/missing"):
                self.assertEqual(views._image_dir_check()['status'], 'skipped')
            with override_settings(CATALOG_IMAGE_DIR=tmp):
                self.assertEqual(views._image_dir_check()['status'], 'ok')
