"""
SMTP notification for contact submissions.

The outgoing mail is sent from the fixed, authenticated system address; the
submitter only appears as display name and Reply-To. Delivery runs on the
sender's own small thread pool and is bounded by EMAIL_SEND_TIMEOUT; a timeout
is reported as SendError like any transport failure.
"""

import asyncio
import logging
import smtplib
import ssl
from concurrent.futures import ThreadPoolExecutor
from email.message import EmailMessage
from email.utils import formataddr
from typing import Optional

from contactform.core.config import Settings, get_settings
from contactform.core.errors import SendError
from contactform.models.contact import Submission
from contactform.services.templates import render_html, render_text

logger = logging.getLogger(__name__)

SMTP_WORKERS = 4


def sanitize_header_value(value: str) -> str:
    """Strip CR/LF so user input can't inject extra headers."""
    return (value or "").replace("\r", " ").replace("\n", " ").strip()


class NotificationSender:
    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        # Abandoned (timed out) deliveries only tie up these threads
        self._executor = ThreadPoolExecutor(max_workers=SMTP_WORKERS, thread_name_prefix="smtp-send")

    @property
    def timeout(self) -> float:
        return self.settings.email_send_timeout

    def build_message(self, submission: Submission) -> EmailMessage:
        settings = self.settings
        if not settings.sender_address:
            raise SendError("SMTP sender not configured (set EMAIL_USER or EMAIL_FROM)")

        name = sanitize_header_value(submission.name)
        msg = EmailMessage()
        msg["From"] = formataddr((f"{name} via {settings.site_name}", settings.sender_address))
        msg["To"] = settings.contact_email
        msg["Reply-To"] = formataddr((name, sanitize_header_value(submission.email)))
        msg["Subject"] = f"Contact Form: {sanitize_header_value(submission.subject)}"
        msg.set_content(render_text(submission))
        msg.add_alternative(render_html(submission, settings.site_name), subtype="html")
        return msg

    def _connect(self):
        """Open an authenticated SMTP connection."""
        settings = self.settings
        context = ssl.create_default_context()

        if settings.email_secure:
            server = smtplib.SMTP_SSL(settings.email_host, settings.email_port,
                                      context=context, timeout=self.timeout)
        else:
            server = smtplib.SMTP(settings.email_host, settings.email_port, timeout=self.timeout)
            server.ehlo()
            if server.has_extn("starttls"):
                server.starttls(context=context)
                server.ehlo()

        try:
            if settings.email_user and settings.email_pass:
                server.login(settings.email_user, settings.email_pass)
        except Exception:
            server.close()
            raise
        return server

    def _deliver(self, msg: EmailMessage):
        server = self._connect()
        try:
            server.send_message(msg)
        finally:
            try:
                server.quit()
            except (smtplib.SMTPException, OSError):
                # A failed QUIT never changes the delivery outcome
                server.close()

    def _run_in_pool(self, func, *args):
        loop = asyncio.get_running_loop()
        return loop.run_in_executor(self._executor, func, *args)

    async def send(self, submission: Submission):
        """
        Send the notification email for a submission.

        Raises:
            SendError: not configured, transport failure, or timeout
        """
        msg = self.build_message(submission)

        try:
            await asyncio.wait_for(self._run_in_pool(self._deliver, msg), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise SendError(f"Email send timed out after {self.timeout}s") from e
        except (smtplib.SMTPException, OSError) as e:
            raise SendError(f"Email transport failed: {str(e)}") from e

        logger.info(f"✉️ Contact email sent to {self.settings.contact_email}")

    def _check_connection(self):
        server = self._connect()
        server.quit()

    async def verify_connection(self) -> bool:
        """Diagnostic check of the SMTP server; logs the outcome, never raises."""
        try:
            await asyncio.wait_for(self._run_in_pool(self._check_connection), timeout=self.timeout)
        except Exception as e:
            logger.warning(f"⚠️ SMTP server check failed: {str(e)}")
            return False

        logger.info("✅ SMTP server is ready to take messages")
        return True
