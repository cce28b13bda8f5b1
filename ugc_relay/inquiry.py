import logging
from collections import namedtuple
from urllib.parse import quote

import requests

from ugc_relay.config import Config
from ugc_relay.serializer import CreatorRegistrationSchema, QuoteRequestSchema

QUOTE_SUBJECT = "Quote request - Apex UGC"
CREATOR_SUBJECT = "UGC Creator Registration - Apex UGC"

Inquiry = namedtuple("Inquiry", ["subject", "message"])
RelayResult = namedtuple("RelayResult", ["success", "status_code", "envelope"])


def _yes_no(value):
    return "Yes" if value else "No"


def format_quote_request(data):
    """Validate the home page quote form and turn it into an inquiry."""
    form = QuoteRequestSchema().load(data)
    message = (
        f"Name: {form['name']}\n"
        f"Email: {form['email']}\n"
        f"Brand/Website: {form['brand']}\n"
        f"Budget: {form['budget']}\n"
        f"Needs: {form['needs']}\n"
    )
    return Inquiry(QUOTE_SUBJECT, message)


def format_creator_registration(data):
    """Validate the creator registration form and turn it into an inquiry."""
    form = CreatorRegistrationSchema().load(data)
    message = (
        "Role: UGC Creator\n"
        f"First name: {form['firstName']}\n"
        f"Last name: {form['lastName']}\n"
        f"Email: {form['email']}\n"
        f"Country: {form['country']}\n"
        f"Date of Birth: {form['dob']}\n"
        f"Instagram: {form['instagram']}\n"
        f"TikTok: {form['tiktok']}\n"
        f"Links to assets / UGC examples: {form['links']}\n"
        f"Agree to marketing use of submitted assets: {_yes_no(form['permission'])}\n"
        f"Subscribe to creator updates: {_yes_no(form['subscribe'])}\n"
    )
    return Inquiry(CREATOR_SUBJECT, message)


def _encode_component(value):
    # Same reserved set as JavaScript's encodeURIComponent
    return quote(value, safe="!*'()")


def build_mailto(inquiry, address=None):
    address = address or Config.MAILTO_ADDRESS
    return (
        f"mailto:{address}"
        f"?subject={_encode_component(inquiry.subject)}"
        f"&body={_encode_component(inquiry.message)}"
    )


class RelayClient(object):
    """
    Posts inquiries to the relay endpoint.

    Success is read from the relay's reply: a 200 status and an envelope
    whose ``success`` flag is true. Anything else, including a network
    failure or a reply that is not JSON, is reported as a failure.
    """

    def __init__(self, base_url=None, timeout=None, session=None):
        self.base_url = (base_url or Config.RELAY_URL).rstrip("/")
        self.timeout = float(timeout if timeout is not None else Config.RELAY_TIMEOUT)
        self.session = session or requests.Session()

    @property
    def endpoint(self):
        return f"{self.base_url}/api/send-email"

    def submit(self, inquiry):
        payload = {"subject": inquiry.subject, "message": inquiry.message}
        try:
            response = self.session.post(self.endpoint, json=payload, timeout=self.timeout)
        except requests.exceptions.RequestException as err:
            logging.error(f"Could not reach relay at {self.endpoint}: {err}")
            return RelayResult(False, None, {"success": False, "error": str(err)})

        try:
            envelope = response.json()
        except ValueError:
            logging.error(f"Relay returned a non JSON reply ({response.status_code})")
            return RelayResult(False, response.status_code, {"success": False, "error": response.text})

        success = response.status_code == 200 and isinstance(envelope, dict) and envelope.get("success") is True
        if not success:
            logging.warning(f"Relay reported failure ({response.status_code}): {envelope}")
        return RelayResult(success, response.status_code, envelope)
