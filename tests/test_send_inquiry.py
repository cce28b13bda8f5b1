import json
from unittest import mock

import pytest

from ugc_relay.send_inquiry import main
from ugc_relay.inquiry import QUOTE_SUBJECT, RelayResult

QUOTE_ARGS = ["quote", "--name", "Jane Doe", "--email", "jane@brand.com", "--needs", "1 TikTok ad"]


@pytest.fixture
def relay_client():
    with mock.patch("ugc_relay.send_inquiry.RelayClient") as client:
        yield client


def test_mailto_does_not_post(capsys, relay_client):
    code = main(["--mailto"] + QUOTE_ARGS)

    assert code == 0
    out = capsys.readouterr().out.strip()
    assert out.startswith("mailto:")
    assert "Quote%20request" in out
    relay_client.assert_not_called()


def test_quote_posts_to_relay(capsys, relay_client):
    relay_client.return_value.submit.return_value = RelayResult(True, 200, {"success": True, "data": {}})

    code = main(["--relay-url", "http://relay"] + QUOTE_ARGS + ["--budget", "$5,000+"])

    assert code == 0
    relay_client.assert_called_once_with("http://relay")
    inquiry = relay_client.return_value.submit.call_args[0][0]
    assert inquiry.subject == QUOTE_SUBJECT
    assert "Budget: $5,000+\n" in inquiry.message
    assert json.loads(capsys.readouterr().out) == {"success": True, "data": {}}


def test_creator_relay_failure(relay_client):
    relay_client.return_value.submit.return_value = RelayResult(False, 500, {"success": False, "error": "boom"})

    code = main(["creator", "--first-name", "Jane", "--last-name", "Doe", "--email", "jane@example.com",
                 "--permission"])

    assert code == 1
    inquiry = relay_client.return_value.submit.call_args[0][0]
    assert "Agree to marketing use of submitted assets: Yes\n" in inquiry.message
    assert "Subscribe to creator updates: No\n" in inquiry.message


def test_invalid_form(capsys, relay_client):
    code = main(["quote", "--name", "Jane", "--email", "not-an-email", "--needs", "Ads"])

    assert code == 1
    assert "email" in json.loads(capsys.readouterr().err)["error"]
    relay_client.assert_not_called()


def test_no_command(capsys):
    assert main([]) == 2


def test_main_configures_logging(relay_client):
    with mock.patch("ugc_relay.send_inquiry.logging.basicConfig") as basic_config:
        main(["--mailto"] + QUOTE_ARGS)
    basic_config.assert_called_once()
