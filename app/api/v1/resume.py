import logging

from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile, status
from fastapi.concurrency import run_in_threadpool

from app.core.dependencies import get_resume_processor
from app.core.rate_limit import rate_limit
from app.schemas.resume import UploadResumeResponse
from app.services.resume_service import ResumeProcessor
from app.services.uploads import UploadTooLargeError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/upload-resume", response_model=UploadResumeResponse)
@rate_limit()
async def upload_resume(
    request: Request,
    file: UploadFile | None = File(default=None),
    processor: ResumeProcessor = Depends(get_resume_processor),
):
    _ = request
    if file is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file uploaded")

    try:
        content = await file.read()
        return await run_in_threadpool(processor.process, file.filename, content)
    except UploadTooLargeError as exc:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=str(exc),
        ) from exc
    except Exception as exc:
        logger.exception("resume_upload_failed file=%s", file.filename)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to process resume",
        ) from exc
    finally:
        await file.close()
