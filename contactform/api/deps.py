from functools import lru_cache

from contactform.services.email_service import NotificationSender
from contactform.services.submission_store import SubmissionStore


@lru_cache
def get_store() -> SubmissionStore:
    return SubmissionStore()


@lru_cache
def get_sender() -> NotificationSender:
    return NotificationSender()
