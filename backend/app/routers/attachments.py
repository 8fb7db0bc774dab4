import logging

import httpx
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.user import User
from app.models.course import Course
from app.models.assignment import Assignment
from app.models.attachment import Attachment
from app.schemas.attachment import ExtractionResponse
from app.services import attachments as attachment_service
from app.utils.auth import get_current_user
from app.utils.pdf_parser import UnsupportedDocumentType

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/attachments", tags=["Attachments"])


@router.post("/{attachment_id}/extract", response_model=ExtractionResponse)
async def extract_attachment(
    attachment_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Extract and store the plain text of an assignment attachment."""
    attachment = db.query(Attachment).join(Assignment).join(Course).filter(
        Attachment.id == attachment_id,
        Course.user_id == current_user.id
    ).first()

    if not attachment:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Not found"
        )

    if attachment.extraction_status == "completed" and attachment.extracted_text:
        return ExtractionResponse(status="completed", text=attachment.extracted_text)

    attachment.extraction_status = "processing"
    db.commit()

    try:
        file_content = await attachment_service.download_file(attachment.url)
        text = attachment_service.extract_text(file_content, attachment.filename, attachment.mime or "")
    except (httpx.HTTPError, UnsupportedDocumentType) as e:
        logger.exception("Extraction failed for attachment %s", attachment_id)
        attachment.extraction_status = "failed"
        db.commit()
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(e) or "Extraction failed"}
        )
    except Exception as e:
        logger.exception("Unexpected extraction error for attachment %s", attachment_id)
        attachment.extraction_status = "failed"
        db.commit()
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(e) or "Extraction failed"}
        )

    attachment.extracted_text = text[:attachment_service.MAX_STORED_TEXT]
    attachment.extraction_status = "completed"
    db.commit()

    return ExtractionResponse(status="completed", text=text[:attachment_service.MAX_RETURNED_TEXT])
