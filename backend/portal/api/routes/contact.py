"""Contact Routes: public contact form plus the caseworker CRM endpoints.

Invariants:
    - POST /api/contact validates the body; bad input → 400 via global handler
    - PATCH parses the id and reads status/assignedTo inside the failure
      boundary, so a bad id or an unknown submission is a 500, not a 400/404
    - The PATCH body shape is checked inside that boundary too: a non-object
      body is a 500, never a validation 400
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends

from portal.api.dependencies import get_storage
from portal.core.domain_types import SubmissionId, UserId
from portal.core.errors import OperationError
from portal.core.repository_protocols import Storage
from portal.schemas.contact import (
    ContactSubmissionCreate, ContactSubmissionRead, ContactSubmissionStatusUpdate,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["contact"])

CONTACT_SUCCESS_MESSAGE = (
    "Contact form submitted successfully. We'll get back to you within 48 hours!"
)


@router.post("/contact")
async def submit_contact_form(
    body: ContactSubmissionCreate, storage: Storage = Depends(get_storage),
):
    """Store a contact form submission."""
    try:
        submission = await storage.create_contact_submission(body)
    except Exception as e:
        logger.error(f"Failed to store contact submission: {e}", exc_info=True)
        raise OperationError(
            "An error occurred while submitting your form. Please try again.",
        ) from e
    return {
        "success": True,
        "message": CONTACT_SUCCESS_MESSAGE,
        "submissionId": submission.id,
    }


@router.get(
    "/contact-submissions", response_model=list[ContactSubmissionRead],
)
async def list_contact_submissions(storage: Storage = Depends(get_storage)):
    """All submissions, newest first (admin view)."""
    try:
        submissions = await storage.get_contact_submissions()
    except Exception as e:
        logger.error(f"Failed to list contact submissions: {e}", exc_info=True)
        raise OperationError("Failed to retrieve contact submissions") from e
    return [ContactSubmissionRead.model_validate(s) for s in submissions]


@router.patch("/contact-submissions/{submission_id}")
async def update_contact_submission(
    submission_id: str,
    payload: Any = Body(None),
    storage: Storage = Depends(get_storage),
):
    """Set a submission's status and, optionally, its assignee."""
    try:
        update = ContactSubmissionStatusUpdate.model_validate(payload or {})
        submission = await storage.update_contact_submission_status(
            SubmissionId(int(submission_id)),
            update.status,
            UserId(update.assigned_to) if update.assigned_to else None,
        )
    except Exception as e:
        logger.error(
            f"Failed to update contact submission {submission_id}: {e}",
            exc_info=True,
        )
        raise OperationError("Failed to update submission") from e
    return {
        "success": True,
        "submission": ContactSubmissionRead.model_validate(submission),
    }
