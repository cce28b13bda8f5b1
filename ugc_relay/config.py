import os


class Config(object):
    DEPLOY_ENV = os.environ.get("DEPLOY_ENV", "development")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # Which transactional email service relays inquiries: "mailersend" or "ses"
    EMAIL_PROVIDER = os.environ.get("EMAIL_PROVIDER", "mailersend")
    MAILERSEND_API_KEY = os.environ.get("MAILERSEND_API_KEY")

    AWS_REGION = os.environ.get("AWS_REGION", "us-east-1")
    SES_ACCESS_KEY = os.environ.get("SES_ACCESS_KEY")
    SES_SECRET_KEY = os.environ.get("SES_SECRET_KEY")

    # Sender is fixed; only the inbox receiving inquiries is configurable
    INQUIRY_SENDER = "APEX UGC <contact@apexugc.agency>"
    INQUIRY_RECIPIENT = os.environ.get("INQUIRY_RECIPIENT", "contact@apexugc.agency")

    # Address used by the website's mailto: links
    MAILTO_ADDRESS = os.environ.get("MAILTO_ADDRESS", "apexUGC@gmail.com")

    RELAY_URL = os.environ.get("RELAY_URL", "http://localhost:5000")
    RELAY_TIMEOUT = os.environ.get("RELAY_TIMEOUT", "10")
