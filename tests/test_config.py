import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from app.ai.config import load_ai_config
from app.ai.factory import get_ai_client
from app.core.config import ExtractionConfig, StoragePaths, load_settings
from app.services.uploads import UploadTooLargeError, sanitize_filename, save_upload, stored_file_name


class SettingsTests(unittest.TestCase):
    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = load_settings()
        self.assertEqual(settings.port, 4000)
        self.assertEqual(settings.extraction.pdf_ocr_mode, "auto")
        self.assertEqual(settings.extraction.pdf_ocr_min_chars, 200)
        self.assertEqual(settings.extraction.image_ocr_min_chars, 100)
        self.assertEqual(settings.chat_excerpt_chars, 4000)
        self.assertFalse(settings.upload_llm_scoring)
        self.assertEqual(settings.ai_provider, "gemini")
        self.assertIsNone(settings.gemini_api_key)
        self.assertEqual(settings.storage.data_dir.name, "data")

    def test_pdf_ocr_override(self):
        for raw, expected in (("force", "force"), ("FORCE", "force"), ("false", "off"), ("0", "off"), ("yes", "auto")):
            with patch.dict(os.environ, {"ENABLE_PDF_OCR": raw}, clear=True):
                self.assertEqual(load_settings().extraction.pdf_ocr_mode, expected)

    def test_credential_quotes_are_stripped(self):
        with patch.dict(os.environ, {"GEMINI_API_KEY": '"abc123"', "PORT": "8080"}, clear=True):
            settings = load_settings()
        self.assertEqual(settings.gemini_api_key, "abc123")
        self.assertEqual(settings.port, 8080)

    def test_invalid_ocr_mode_is_rejected(self):
        with self.assertRaises(ValueError):
            ExtractionConfig(pdf_ocr_mode="sometimes")


class AIConfigTests(unittest.TestCase):
    def test_missing_credential_yields_no_client(self):
        with patch.dict(os.environ, {}, clear=True):
            cfg = load_ai_config(load_settings())
        self.assertFalse(cfg.configured)
        self.assertEqual(cfg.model, "gemini-2.5-pro")
        self.assertIsNone(get_ai_client(cfg))

    def test_placeholder_credential_is_not_configured(self):
        with patch.dict(os.environ, {"AI_PROVIDER": "openai", "OPENAI_API_KEY": "your_key_here"}, clear=True):
            cfg = load_ai_config(load_settings())
        self.assertEqual(cfg.provider, "openai")
        self.assertEqual(cfg.model, "gpt-4o-mini")
        self.assertFalse(cfg.configured)

    def test_unknown_provider_is_rejected(self):
        with patch.dict(os.environ, {"AI_PROVIDER": "acme"}, clear=True):
            cfg = load_ai_config(load_settings())
        with self.assertRaises(ValueError):
            get_ai_client(cfg)


class UploadStorageTests(unittest.TestCase):
    def test_sanitize_filename(self):
        self.assertEqual(sanitize_filename("My CV (2024).pdf"), "My_CV__2024_.pdf")
        self.assertEqual(sanitize_filename("../../etc/passwd"), "passwd")
        self.assertEqual(sanitize_filename(""), "resume")
        self.assertEqual(sanitize_filename(None), "resume")

    def test_stored_file_name_is_timestamped(self):
        self.assertEqual(stored_file_name("cv.pdf", now_ms=1700000000000), "1700000000000_cv.pdf")

    def test_save_upload_writes_raw_bytes(self):
        with tempfile.TemporaryDirectory() as tmp:
            paths = StoragePaths(data_dir=Path(tmp))
            stored = save_upload(paths, "Resume.PNG", b"\x89PNG data")
            self.assertEqual(stored.extension, "png")
            self.assertEqual(stored.path.parent, paths.uploads_dir)
            self.assertEqual(stored.path.read_bytes(), b"\x89PNG data")

    def test_oversized_upload_is_rejected_before_writing(self):
        with tempfile.TemporaryDirectory() as tmp:
            paths = StoragePaths(data_dir=Path(tmp) / "data")
            with self.assertRaises(UploadTooLargeError):
                save_upload(paths, "cv.pdf", b"x" * 11, max_bytes=10)
            self.assertFalse(paths.uploads_dir.exists())


if __name__ == "__main__":
    unittest.main()
