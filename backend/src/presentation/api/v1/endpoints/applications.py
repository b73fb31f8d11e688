"""Vendor application endpoints."""

from typing import Optional, Union
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from domain.enums import ApplicationTab
from presentation.schemas import (
    ApplicationCreateRequest,
    ApplicationResponse,
    ApplicationSubmitRequest,
    ApplicationUpdateRequest,
    DeleteResponse,
    ReviewActionRequest,
    SubmissionCheckResponse,
)
from presentation.api.v1.dependencies import (
    get_application_use_case,
    get_check_submission_use_case,
    get_create_application_use_case,
    get_delete_application_use_case,
    get_list_applications_use_case,
    get_review_application_use_case,
    get_submit_application_use_case,
    get_update_application_use_case,
)
from application.use_cases import (
    CheckSubmissionUseCase,
    CreateApplicationUseCase,
    DeleteApplicationUseCase,
    GetApplicationUseCase,
    ListApplicationsUseCase,
    ReviewApplicationUseCase,
    SubmitApplicationUseCase,
    UpdateApplicationUseCase,
)
from infrastructure.config import get_logger

router = APIRouter(prefix="/applications", tags=["applications"])
logger = get_logger(__name__)


@router.get("", response_model=Union[ApplicationResponse, list[ApplicationResponse]])
async def get_applications(
    code: Optional[str] = Query(None, description="Application code for applicant lookup"),
    email: Optional[str] = Query(None, description="Primary contact email for applicant lookup"),
    include_all: bool = Query(False, alias="includeAll"),
    tab: ApplicationTab = Query(ApplicationTab.ALL),
    get_use_case: GetApplicationUseCase = Depends(get_application_use_case),
    list_use_case: ListApplicationsUseCase = Depends(get_list_applications_use_case),
):
    """
    Look up one application by code and email, or list applications.

    Listing needs ``includeAll=true``; without it an empty list is returned
    so that an applicant page never receives other vendors' data.
    """
    if code or email:
        application = await get_use_case.by_code_and_email(code, email)
        return ApplicationResponse.from_entity(application)

    if not include_all:
        return []

    applications = await list_use_case.execute(tab)
    return [ApplicationResponse.from_entity(a) for a in applications]


@router.post("", response_model=ApplicationResponse, status_code=status.HTTP_201_CREATED)
async def create_application(
    request: ApplicationCreateRequest,
    use_case: CreateApplicationUseCase = Depends(get_create_application_use_case),
) -> ApplicationResponse:
    """Create an application as a draft or submit it straight away."""
    application = await use_case.execute(request.model_dump())
    return ApplicationResponse.from_entity(application)


@router.get("/{application_id}", response_model=ApplicationResponse)
async def get_application(
    application_id: UUID,
    use_case: GetApplicationUseCase = Depends(get_application_use_case),
) -> ApplicationResponse:
    application = await use_case.by_id(application_id)
    return ApplicationResponse.from_entity(application)


@router.patch("/{application_id}", response_model=ApplicationResponse)
async def update_application(
    application_id: UUID,
    request: ApplicationUpdateRequest,
    use_case: UpdateApplicationUseCase = Depends(get_update_application_use_case),
) -> ApplicationResponse:
    """Partially update an application; status changes run through the workflow."""
    application = await use_case.execute(application_id, request.to_changes())
    return ApplicationResponse.from_entity(application)


@router.delete("/{application_id}", response_model=DeleteResponse)
async def delete_application(
    application_id: UUID,
    use_case: DeleteApplicationUseCase = Depends(get_delete_application_use_case),
) -> DeleteResponse:
    await use_case.execute(application_id)
    return DeleteResponse(success=True)


@router.get("/{application_id}/submission-check", response_model=SubmissionCheckResponse)
async def check_submission(
    application_id: UUID,
    use_case: CheckSubmissionUseCase = Depends(get_check_submission_use_case),
) -> SubmissionCheckResponse:
    """Report the required fields and documents still missing."""
    check = await use_case.execute(application_id)
    return SubmissionCheckResponse.from_check(check)


@router.post("/{application_id}/submit", response_model=ApplicationResponse)
async def submit_application(
    application_id: UUID,
    request: Optional[ApplicationSubmitRequest] = None,
    use_case: SubmitApplicationUseCase = Depends(get_submit_application_use_case),
) -> ApplicationResponse:
    """Submit a draft or resubmit a rejected application."""
    changes = request.to_changes() if request is not None else None
    application = await use_case.execute(application_id, changes)
    return ApplicationResponse.from_entity(application)


@router.post("/{application_id}/review", response_model=ApplicationResponse)
async def review_application(
    application_id: UUID,
    request: ReviewActionRequest,
    use_case: ReviewApplicationUseCase = Depends(get_review_application_use_case),
) -> ApplicationResponse:
    """Administrator decision on a submitted application."""
    application = await use_case.execute(
        application_id,
        request.action,
        admin_notes=request.admin_notes,
        rejection_reason=request.rejection_reason,
    )
    return ApplicationResponse.from_entity(application)
