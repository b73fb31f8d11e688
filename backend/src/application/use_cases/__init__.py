"""Use cases - one class per operation exposed to the presentation layer."""

from .create_application import CreateApplicationUseCase
from .update_application import UpdateApplicationUseCase
from .get_application import GetApplicationUseCase
from .list_applications import ListApplicationsUseCase, GetDashboardStatsUseCase, filter_by_tab
from .review_application import ReviewApplicationUseCase
from .submit_application import SubmitApplicationUseCase, CheckSubmissionUseCase
from .delete_application import DeleteApplicationUseCase
from .upload_document import UploadDocumentUseCase

__all__ = [
    "CreateApplicationUseCase",
    "UpdateApplicationUseCase",
    "GetApplicationUseCase",
    "ListApplicationsUseCase",
    "GetDashboardStatsUseCase",
    "filter_by_tab",
    "ReviewApplicationUseCase",
    "SubmitApplicationUseCase",
    "CheckSubmissionUseCase",
    "DeleteApplicationUseCase",
    "UploadDocumentUseCase",
]
