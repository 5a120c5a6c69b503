from __future__ import annotations

import logging
from pathlib import Path

import pytesseract
from pdf2image import convert_from_path
from PIL import Image
from pypdf import PdfReader

from app.ai.types import AIClient
from app.parsing.scratch import scratch_directory

logger = logging.getLogger(__name__)

IMAGE_MIME_TYPES = {
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "webp": "image/webp",
}

VISION_INSTRUCTION = (
    "Extract all clearly readable text from this resume image. "
    "Return ONLY the text, no extra commentary."
)


def read_pdf_text(file_path: Path) -> str:
    reader = PdfReader(str(file_path))
    text_parts: list[str] = []
    for page_number, page in enumerate(reader.pages, start=1):
        try:
            page_text = (page.extract_text() or "").strip()
        except Exception as exc:
            logger.warning("pdf_page_text_failed path=%s page=%s: %s", file_path, page_number, exc)
            continue
        if page_text:
            text_parts.append(page_text)
    return "\n".join(text_parts)


def ocr_image(image_path: Path | str, *, language: str = "eng") -> str:
    with Image.open(image_path) as image:
        return pytesseract.image_to_string(image.convert("L"), lang=language) or ""


def ocr_pdf_pages(file_path: Path, *, language: str = "eng", dpi: int = 200) -> str:
    with scratch_directory() as scratch:
        page_images = convert_from_path(
            str(file_path),
            dpi=dpi,
            fmt="png",
            output_folder=str(scratch),
            paths_only=True,
        )
        page_texts: list[str] = []
        for page_number, page_image in enumerate(page_images, start=1):
            try:
                page_text = ocr_image(page_image, language=language)
            except Exception as exc:
                logger.warning("pdf_page_ocr_failed path=%s page=%s: %s", file_path, page_number, exc)
                continue
            if page_text.strip():
                page_texts.append(page_text)
        return "\n".join(page_texts)


def read_plain_text(file_path: Path) -> str:
    return file_path.read_text(encoding="utf-8")


def vision_image_text(file_path: Path, client: AIClient) -> str:
    ext = file_path.suffix.lower().lstrip(".")
    mime_type = IMAGE_MIME_TYPES.get(ext, "application/octet-stream")
    return client.extract_image_text(file_path.read_bytes(), mime_type, VISION_INSTRUCTION)
