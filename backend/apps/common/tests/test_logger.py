import logging
import unittest

from apps.common.logger import AppLogger, get_logger


class _ListHandler(logging.Handler):
    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.records = []

    def emit(self, record):
        self.records.append(record)


class AppLoggerTests(unittest.TestCase):
    def setUp(self):
        self.handler = _ListHandler()
        self.std_logger = logging.getLogger("apps.tests.logger")
        self.std_logger.addHandler(self.handler)
        self.std_logger.setLevel(logging.DEBUG)

    def tearDown(self):
        self.std_logger.removeHandler(self.handler)

    def test_bind_merges_context_without_mutating_parent(self):
        base = get_logger("apps.tests.logger").bind(component="catalog")
        child = base.bind(service="ProductService")
        self.assertEqual(base.context, {"component": "catalog"})
        self.assertEqual(
            child.context, {"component": "catalog", "service": "ProductService"}
        )

    def test_message_carries_context_suffix_and_record_context(self):
        log = get_logger("apps.tests.logger").bind(component="catalog")
        log.info("Product created", product_id=7)
        record = self.handler.records[-1]
        self.assertEqual(
            record.getMessage(), "Product created | component=catalog product_id=7"
        )
        self.assertEqual(record.context, {"component": "catalog", "product_id": 7})

    def test_non_scalar_values_use_repr(self):
        self.assertEqual(AppLogger._stringify([1, 2]), "[1, 2]")
        self.assertEqual(AppLogger._stringify(None), "None")

    def test_exception_attaches_exc_info(self):
        log = get_logger("apps.tests.logger")
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            log.exception("Failed")
        record = self.handler.records[-1]
        self.assertEqual(record.levelno, logging.ERROR)
        self.assertIsNotNone(record.exc_info)
