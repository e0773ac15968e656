from unittest.mock import patch

from scripts import search_twitter as cli
from twitter_tools.client import TwitterSearchClient


class FakeResp:
    status_code = 200

    def json(self):
        return {"results": []}

    def raise_for_status(self):
        return None


def test_cli_prints_report(capsys, monkeypatch):
    monkeypatch.setattr(cli, "client_from_env", lambda: TwitterSearchClient(api_key="k"))
    with patch("requests.get", return_value=FakeResp()) as get:
        rc = cli.main(["@openai", "--section", "top", "--limit", "3", "--min-likes", "7"])
    assert rc == 0
    assert capsys.readouterr().out.strip() == "No tweets found for query: (from:openai)"
    params = get.call_args.kwargs["params"]
    assert params == {"query": "(from:openai)", "section": "top", "limit": "3", "min_likes": "7"}


def test_cli_user_mode_error_exit_code(capsys, monkeypatch):
    monkeypatch.setattr(cli, "client_from_env", lambda: TwitterSearchClient(api_key=None))
    rc = cli.main(["openai", "--user"])
    assert rc == 1
    assert capsys.readouterr().out.startswith("Error fetching tweets from openai:")
