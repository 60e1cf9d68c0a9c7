from unittest.mock import MagicMock

import pytest
import requests

from archive import ArchiveClient, ArchiveError
from schemas import ParsedResult, Question

RESULT = ParsedResult(
    questions=[Question(question="Q?", answers=["a", "b"], correctAnswerPositions=[1])],
    requestMessage="prompt",
    responseMessage="$1. Q?|a|b#",
)


def test_send_posts_result_as_json():
    session = MagicMock()
    archiver = ArchiveClient("http://archive.local/api", timeout=3, session=session)

    assert archiver.send(RESULT) is True

    session.post.assert_called_once()
    args, kwargs = session.post.call_args
    assert args == ("http://archive.local/api",)
    assert kwargs["timeout"] == 3
    assert kwargs["json"] == {
        "questions": [{"question": "Q?", "answers": ["a", "b"], "correctAnswerPositions": [1]}],
        "requestMessage": "prompt",
        "responseMessage": "$1. Q?|a|b#",
    }
    session.post.return_value.raise_for_status.assert_called_once()


def test_send_without_url_is_skipped():
    session = MagicMock()
    archiver = ArchiveClient(None, session=session)

    assert not archiver.enabled
    assert archiver.send(RESULT) is False
    session.post.assert_not_called()


def test_http_error_raises_archive_error():
    session = MagicMock()
    session.post.return_value.raise_for_status.side_effect = requests.HTTPError("500 Server Error")
    archiver = ArchiveClient("http://archive.local/api", session=session)

    with pytest.raises(ArchiveError, match="500 Server Error"):
        archiver.send(RESULT)


def test_connection_error_raises_archive_error():
    session = MagicMock()
    session.post.side_effect = requests.ConnectionError("refused")
    archiver = ArchiveClient("http://archive.local/api", session=session)

    with pytest.raises(ArchiveError):
        archiver.send(RESULT)


def test_close_closes_session():
    session = MagicMock()
    ArchiveClient("http://archive.local/api", session=session).close()

    session.close.assert_called_once()
