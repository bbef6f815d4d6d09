from genai.webc.errors import (
    RequestFailedError,
    ResponseFailedNotJsonError,
    ResponseFailedStatusError,
)


def test_not_json_keeps_content_type():
    err = ResponseFailedNotJsonError("text/html")
    assert err.content_type == "text/html"
    assert "text/html" in str(err)


def test_status_error_keeps_status_and_body():
    err = ResponseFailedStatusError(404, "missing")
    assert err.status == 404
    assert err.body == "missing"
    assert "404" in str(err)
    assert "missing" in str(err)


def test_request_failed_chains_cause():
    cause = ConnectionError("refused")
    err = RequestFailedError(cause)
    assert err.cause is cause
    assert err.__cause__ is cause
    assert "refused" in str(err)