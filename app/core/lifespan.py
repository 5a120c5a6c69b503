from contextlib import asynccontextmanager
import logging

from app.ai.config import load_ai_config
from app.core.config import settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    settings.storage.ensure()
    ai_config = load_ai_config(settings)
    logger.info(
        "startup data_dir=%s ai_provider=%s ai_configured=%s pdf_ocr_mode=%s",
        settings.storage.data_dir,
        ai_config.provider,
        ai_config.configured,
        settings.extraction.pdf_ocr_mode,
    )
    if not ai_config.configured:
        logger.warning("ai_credential_missing provider=%s chat replies run in dev mode", ai_config.provider)
    yield
