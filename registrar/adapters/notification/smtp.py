"""SMTP email notifier adapter.

Implements NotifierPort by sending plain-text email through aiosmtplib.
Delivery errors are logged and re-raised; the caller decides whether a
failed confirmation matters.
"""

import logging
from email.message import EmailMessage

import aiosmtplib

from registrar.core.ports import NotifierPort

logger = logging.getLogger(__name__)


class SMTPNotifierAdapter(NotifierPort):
    """Sends messages as email over SMTP."""

    def __init__(
        self,
        host: str,
        from_email: str,
        port: int = 587,
        username: str | None = None,
        password: str | None = None,
        use_tls: bool = True,
        timeout: float = 30.0,
    ):
        """Initialize SMTP notifier.

        Args:
            host: SMTP server hostname.
            from_email: Sender address.
            port: SMTP server port.
            username: SMTP authentication username (optional).
            password: SMTP authentication password (optional).
            use_tls: Upgrade the connection with STARTTLS.
            timeout: Connection timeout in seconds.

        Raises:
            ValueError: If host or from_email is empty.
        """
        if not host:
            raise ValueError("SMTP host must be set")
        if not from_email:
            raise ValueError("SMTP sender address must be set")

        self.host = host
        self.port = port
        self.from_email = from_email
        self.username = username or None
        self.password = password or None
        self.use_tls = use_tls
        self.timeout = timeout

    def _build_message(self, address: str, subject: str, body: str) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self.from_email
        message["To"] = address
        message["Subject"] = subject
        message.set_content(body)
        return message

    async def send(self, address: str, subject: str, body: str) -> None:
        """Send one email.

        Raises:
            aiosmtplib.SMTPException: If the server rejects or is unreachable.
        """
        message = self._build_message(address, subject, body)
        try:
            await aiosmtplib.send(
                message,
                hostname=self.host,
                port=self.port,
                username=self.username,
                password=self.password,
                start_tls=self.use_tls,
                timeout=self.timeout,
            )
        except aiosmtplib.SMTPException as e:
            logger.error(
                f"Failed to send email to {address}: {e}",
                extra={"subject": subject, "smtp_host": self.host},
            )
            raise

        logger.info(f"Email sent to {address}", extra={"subject": subject})
