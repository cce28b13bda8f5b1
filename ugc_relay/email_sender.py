import logging
from email.utils import parseaddr

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from mailersend import emails

from ugc_relay.config import Config

PROVIDERS = ("mailersend", "ses")


class EmailSendError(Exception):
    """Raised when the email provider rejects or fails to accept a send."""


class EmailSender(object):
    """
    Client for the transactional email provider that delivers inquiries.

    One instance is built from configuration when the application starts
    and shared by every request; it holds no per-request state.
    """

    def __init__(self, config=Config):
        self.provider = (config.EMAIL_PROVIDER or "mailersend").lower()
        if self.provider not in PROVIDERS:
            raise ValueError(f"Unsupported email provider: {config.EMAIL_PROVIDER}")
        self.charset = "UTF-8"
        self.sender = config.INQUIRY_SENDER
        self.from_name, self.from_email = parseaddr(self.sender)
        self.recipient = config.INQUIRY_RECIPIENT

        self.mailer = None
        self.ses_client = None
        if self.provider == "mailersend":
            self.mailer = emails.NewEmail(config.MAILERSEND_API_KEY)
        else:
            self.ses_client = boto3.client(
                "ses",
                aws_access_key_id=config.SES_ACCESS_KEY,
                aws_secret_access_key=config.SES_SECRET_KEY,
                region_name=config.AWS_REGION,
            )

    def send(self, subject, text, to=None):
        to = to or self.recipient
        logging.info(f"Sending a '{subject}' mail using {self.provider}")
        if self.provider == "ses":
            result = self._ses_send(to, subject, text)
        else:
            result = self._mailersend_send(to, subject, text)
        logging.debug(f"Mail to {to} response: {result}")
        return result

    def _mailersend_send(self, to, subject, text):
        data = {
            "from": {"email": self.from_email, "name": self.from_name},
            "to": [{"email": to}],
            "subject": subject,
            "text": text,
        }

        response = str(self.mailer.send(data))
        status, _, body = response.partition("\n")
        if not status.startswith("2"):
            logging.error(f"MailerSend error: {response}")
            raise EmailSendError(body.strip() or f"MailerSend responded with status {status}")
        return {"provider": "mailersend", "status_code": int(status), "body": body.strip()}

    def _ses_send(self, to, subject, text):
        try:
            response = self.ses_client.send_email(
                Source=self.sender,
                Destination={"ToAddresses": [to]},
                Message={
                    "Subject": {"Charset": self.charset, "Data": subject},
                    "Body": {"Text": {"Charset": self.charset, "Data": text}},
                },
            )
        except ClientError as err:
            error = err.response.get("Error", {})
            logging.error(f"SES error: {error.get('Code')} {error.get('Message')}")
            raise EmailSendError(error.get("Message") or str(err)) from err
        except BotoCoreError as err:
            logging.error(f"SES error: {err}")
            raise EmailSendError(str(err)) from err
        return {"provider": "ses", "id": response.get("MessageId")}
