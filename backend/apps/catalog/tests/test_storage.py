import os
import tempfile
import unittest
from unittest import mock

from django.core.files.uploadedfile import SimpleUploadedFile

from apps.catalog.exceptions import CatalogValidationError, ImageStorageFailure
from apps.catalog.storage import FileSystemImageStorage


class FileSystemImageStorageTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.directory = os.path.join(self._tmp.name, "images")
        self.storage = FileSystemImageStorage()

    def tearDown(self):
        self._tmp.cleanup()

    def test_generate_name_keeps_extension(self):
        name = FileSystemImageStorage.generate_name("photo.JPG")
        stem, ext = os.path.splitext(name)
        self.assertEqual(ext, ".jpg")
        self.assertEqual(len(stem), 36)

    def test_generate_name_is_unique(self):
        self.assertNotEqual(
            FileSystemImageStorage.generate_name("a.png"),
            FileSystemImageStorage.generate_name("a.png"),
        )

    def test_generate_name_requires_extension(self):
        with self.assertRaises(CatalogValidationError) as ctx:
            FileSystemImageStorage.generate_name("README")
        self.assertIn("image", ctx.exception.errors)

    def test_store_creates_directory_and_writes_bytes(self):
        upload = SimpleUploadedFile("photo.png", b"\x89PNG-bytes", content_type="image/png")
        name = self.storage.store(self.directory, upload)
        self.assertTrue(name.endswith(".png"))
        path = os.path.join(self.directory, name)
        with open(path, "rb") as fh:
            self.assertEqual(fh.read(), b"\x89PNG-bytes")

    def test_store_write_failure(self):
        upload = SimpleUploadedFile("photo.png", b"data")
        with mock.patch(
            "django.core.files.storage.FileSystemStorage.save",
            side_effect=PermissionError("read-only"),
        ):
            with self.assertRaises(ImageStorageFailure):
                self.storage.store(self.directory, upload)

    def test_discard_removes_file_and_tolerates_missing(self):
        upload = SimpleUploadedFile("photo.gif", b"GIF89a")
        name = self.storage.store(self.directory, upload)
        self.storage.discard(self.directory, name)
        self.assertFalse(os.path.exists(os.path.join(self.directory, name)))
        self.storage.discard(self.directory, name)
