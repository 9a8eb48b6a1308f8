# tests/test_bolls_client.py
"""
Tests for bolls_client.py.

No network access: requests.get is patched with canned responses.
"""

from unittest.mock import MagicMock, patch

import requests

from bible_callout.references import BollsClient, FetchError, Verse

GET = "bible_callout.references.bolls_client.requests.get"


def make_response(status=200, payload=None, bad_json=False):
    response = MagicMock()
    response.status_code = status
    if bad_json:
        response.json.side_effect = ValueError("Expecting value")
    else:
        response.json.return_value = payload
    if status >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status} Error")
    else:
        response.raise_for_status.return_value = None
    return response


def test_get_text():
    """get_text requests one chapter and converts the payload."""
    print("\n=== Testing get_text ===")

    payload = [
        {"pk": 1, "verse": 16, "text": "For God so loved the world"},
        {"pk": 2, "verse": 17, "text": "For God did not send<br/>his Son"},
    ]
    client = BollsClient(base_url="https://bolls.test/", timeout=5)

    with patch(GET, return_value=make_response(payload=payload)) as mock_get:
        verses = client.get_text("NIV", 43, 3)

    mock_get.assert_called_once_with(
        "https://bolls.test/get-text/NIV/43/3/", timeout=5
    )
    assert verses == (
        Verse(16, "For God so loved the world"),
        Verse(17, "For God did not send<br/>his Son"),
    )
    print("✓ chapter fetched and converted")

    # The client itself is a valid cache fetcher
    with patch(GET, return_value=make_response(payload=payload)):
        assert client("NIV", 43, 3) == verses
    print("✓ client is callable as a fetcher")


def test_invalid_json():
    client = BollsClient(base_url="https://bolls.test")

    with patch(GET, return_value=make_response(bad_json=True)):
        try:
            client.get_text("NIV", 43, 3)
            assert False, "Should have raised FetchError"
        except FetchError as e:
            assert "Invalid response" in str(e)
    print("✓ invalid JSON raises FetchError")


def test_get_translations():
    payload = [
        {"language": "English", "translations": [
            {"short_name": "YLT", "full_name": "Young's Literal Translation", "updated": 1},
        ]},
    ]
    client = BollsClient(base_url="https://bolls.test")

    with patch(GET, return_value=make_response(payload=payload)) as mock_get:
        languages = client.get_translations()

    assert mock_get.call_args[0][0] == (
        "https://bolls.test/static/bolls/app/views/languages.json"
    )
    assert languages[0].language == "English"
    assert languages[0].translations[0].short_name == "YLT"

    with patch(GET, return_value=make_response(payload=[{"name": "no language"}])):
        try:
            client.get_translations()
            assert False, "Should have raised FetchError"
        except FetchError:
            pass
    print("✓ translations list fetched")


def test_server_error_not_retried():
    """A 503 fails after a single request, with no backoff sleep."""
    print("\n=== Testing failures ===")

    client = BollsClient(base_url="https://bolls.test")

    with patch(GET, return_value=make_response(status=503)) as mock_get, \
            patch("time.sleep") as mock_sleep:
        try:
            client.get_text("NIV", 43, 3)
            assert False, "Should have raised FetchError"
        except FetchError as e:
            assert isinstance(e.__cause__, requests.HTTPError)
    assert mock_get.call_count == 1
    mock_sleep.assert_not_called()
    print("✓ 503 fails after one request")

    with patch(GET, return_value=make_response(status=404)) as mock_get:
        try:
            client.get_text("NIV", 43, 3)
            assert False, "Should have raised FetchError"
        except FetchError:
            pass
    assert mock_get.call_count == 1
    print("✓ 404 fails after one request")


def test_connection_and_timeout_errors():
    client = BollsClient(base_url="https://bolls.test", timeout=1)

    with patch(GET, side_effect=requests.ConnectionError("refused")) as mock_get:
        try:
            client.get_text("NIV", 43, 3)
            assert False, "Should have raised FetchError"
        except FetchError as e:
            assert isinstance(e.__cause__, requests.ConnectionError)
    assert mock_get.call_count == 1
    print("✓ connection error raised after one request")

    with patch(GET, side_effect=requests.Timeout("slow")) as mock_get:
        try:
            client.get_text("NIV", 43, 3)
            assert False, "Should have raised FetchError"
        except FetchError as e:
            assert "timed out" in str(e)
    assert mock_get.call_count == 1
    print("✓ timeout raised after one request")


def main():
    """Run all tests."""
    print("=" * 60)
    print("bolls.life Client Test Suite")
    print("=" * 60)

    test_get_text()
    test_invalid_json()
    test_get_translations()
    test_server_error_not_retried()
    test_connection_and_timeout_errors()

    print("\n" + "=" * 60)
    print("ALL TESTS PASSED!")
    print("=" * 60)


if __name__ == "__main__":
    main()
