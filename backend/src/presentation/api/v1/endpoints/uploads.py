"""Document upload endpoint."""

from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile

from presentation.schemas import UploadResponse
from presentation.api.v1.dependencies import get_upload_document_use_case
from application.use_cases import UploadDocumentUseCase

router = APIRouter(prefix="/uploads", tags=["uploads"])


@router.post("", response_model=UploadResponse)
async def upload_document(
    file: Optional[UploadFile] = File(None),
    use_case: UploadDocumentUseCase = Depends(get_upload_document_use_case),
) -> UploadResponse:
    """Store a document and return the URL to put in a document field."""
    if file is None:
        file_url = await use_case.execute(None, None)
    else:
        content = await file.read()
        file_url = await use_case.execute(content, file.filename)
    return UploadResponse(file_url=file_url)
