import pytest

from ugc_relay import create_app


class FakeEmailSender(object):
    def __init__(self, error=None):
        self.error = error
        self.sent = []

    def send(self, subject, text, to=None):
        self.sent.append({"subject": subject, "text": text, "to": to})
        if self.error is not None:
            raise self.error
        return {"provider": "fake", "id": f"msg-{len(self.sent)}"}


@pytest.fixture
def email_sender():
    return FakeEmailSender()


@pytest.fixture
def client(email_sender):
    # Spin up test flask app
    app = create_app(email_sender=email_sender)
    app.config['TESTING'] = True
    return app.test_client()
