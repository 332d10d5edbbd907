"""
Webhook 전송 테스트 (requests.post 모킹, 실제 전송 없음)
"""
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).parent
sys.path.insert(0, str(ROOT_DIR))

from unittest.mock import MagicMock, patch

import requests

from src.discord.payload_builder import MessageBuilder
from src.discord.webhook import RetryConfig, WebhookSender, backoff_delay, parse_retry_after

URL = "https://example.com/webhook"


def make_response(status_code: int, headers: dict = None) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.headers = headers or {}
    return response


def test_send_without_url_makes_no_request():
    sender = WebhookSender()
    sender.webhook_url = ""
    with patch("src.discord.webhook.requests.post") as mock_post:
        assert sender.send({"embeds": [{"fields": []}]}) is False
    mock_post.assert_not_called()


def test_send_builder_posts_snapshot():
    builder = MessageBuilder().set_title("Hi").add_field("A", "1")
    sender = WebhookSender(URL, timeout=5)

    with patch("src.discord.webhook.requests.post", return_value=make_response(204)) as mock_post:
        assert sender.send(builder) is True

    mock_post.assert_called_once_with(URL, json=builder.get_json(), timeout=5)


def test_send_dict_payload():
    payload = {"text": "plain", "embeds": [{"fields": []}]}
    with patch("src.discord.webhook.requests.post", return_value=make_response(200)) as mock_post:
        assert WebhookSender(URL).send(payload) is True
    assert mock_post.call_args.kwargs["json"] == payload


@patch("src.discord.webhook.time.sleep")
def test_rate_limit_is_retried(mock_sleep):
    responses = [make_response(429, {"Retry-After": "2"}), make_response(204)]
    with patch("src.discord.webhook.requests.post", side_effect=responses) as mock_post:
        assert WebhookSender(URL).send({}) is True

    assert mock_post.call_count == 2
    mock_sleep.assert_called_once_with(2.0)


@patch("src.discord.webhook.time.sleep")
def test_rate_limit_wait_is_capped(mock_sleep):
    responses = [make_response(429, {"Retry-After": "60"}), make_response(200)]
    with patch("src.discord.webhook.requests.post", side_effect=responses):
        WebhookSender(URL).send({})
    mock_sleep.assert_called_once_with(RetryConfig.MAX_DELAY)


@patch("src.discord.webhook.time.sleep")
def test_server_error_exhausts_retries(mock_sleep):
    with patch("src.discord.webhook.requests.post", return_value=make_response(502)) as mock_post:
        assert WebhookSender(URL).send({}) is False

    assert mock_post.call_count == RetryConfig.MAX_RETRIES + 1
    assert [c.args[0] for c in mock_sleep.call_args_list] == [1.0, 2.0, 4.0]


@patch("src.discord.webhook.time.sleep")
def test_client_error_is_not_retried(mock_sleep):
    with patch("src.discord.webhook.requests.post", return_value=make_response(400)) as mock_post:
        assert WebhookSender(URL).send({}) is False

    assert mock_post.call_count == 1
    mock_sleep.assert_not_called()


@patch("src.discord.webhook.time.sleep")
def test_request_exception_is_retried(mock_sleep):
    side_effect = [requests.ConnectionError("boom"), make_response(204)]
    with patch("src.discord.webhook.requests.post", side_effect=side_effect) as mock_post:
        assert WebhookSender(URL).send({}) is True
    assert mock_post.call_count == 2


@patch("src.discord.webhook.time.sleep")
def test_send_many_reports_partial_failure(mock_sleep):
    responses = [make_response(204), make_response(400), make_response(204)]
    with patch("src.discord.webhook.requests.post", side_effect=responses):
        assert WebhookSender(URL).send_many([{}, {}, MessageBuilder()]) is False

    # 전송 사이에만 대기
    assert mock_sleep.call_count == 2


@patch("src.discord.webhook.time.sleep")
def test_rate_limit_with_http_date_does_not_raise(mock_sleep):
    response = make_response(429, {"Retry-After": "Wed, 21 Oct 2026 07:28:00 GMT"})
    with patch("src.discord.webhook.requests.post", return_value=response) as mock_post:
        assert WebhookSender(URL).send({}) is False

    assert mock_post.call_count == RetryConfig.MAX_RETRIES + 1
    assert all(c.args[0] == RetryConfig.BASE_DELAY for c in mock_sleep.call_args_list)


@patch("src.discord.webhook.time.sleep")
def test_rate_limit_without_header_uses_base_delay(mock_sleep):
    responses = [make_response(429), make_response(204)]
    with patch("src.discord.webhook.requests.post", side_effect=responses):
        assert WebhookSender(URL).send({}) is True
    mock_sleep.assert_called_once_with(RetryConfig.BASE_DELAY)


def test_parse_retry_after():
    assert parse_retry_after("2.5") == 2.5
    assert parse_retry_after("-3") == 0.0
    assert parse_retry_after("600") == RetryConfig.MAX_DELAY
    assert parse_retry_after(None) == RetryConfig.BASE_DELAY
    assert parse_retry_after("soon") == RetryConfig.BASE_DELAY


def test_backoff_delay_is_capped():
    assert [backoff_delay(n) for n in range(6)] == [1.0, 2.0, 4.0, 8.0, 10.0, 10.0]


@patch("src.discord.webhook.time.sleep")
def test_final_failure_reports_last_status(mock_sleep):
    with patch("src.discord.webhook.requests.post", return_value=make_response(503)), \
            patch("src.discord.webhook.logger") as mock_logger:
        assert WebhookSender(URL).send({}) is False

    final = mock_logger.error.call_args.args[0]
    assert "HTTP 503" in final
    assert "None" not in final


def test_send_many_without_url_makes_no_request():
    sender = WebhookSender()
    sender.webhook_url = ""
    with patch("src.discord.webhook.requests.post") as mock_post:
        assert sender.send_many([{}, MessageBuilder()]) is False
    mock_post.assert_not_called()
