from docmanager.core.request_context import bind_request_id, get_request_id


def test_bound_id_wins_over_environment(monkeypatch):
    monkeypatch.setenv("AWS_REQUEST_ID", "from-env")
    with bind_request_id("from-header"):
        assert get_request_id() == "from-header"
    assert get_request_id() == "from-env"


def test_bind_without_id_generates_one(monkeypatch):
    monkeypatch.delenv("AWS_REQUEST_ID", raising=False)
    with bind_request_id() as request_id:
        assert len(request_id) == 32
        assert get_request_id() == request_id
    assert get_request_id() == ""
