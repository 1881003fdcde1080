import pytest
import yaml
from unittest.mock import patch
from urllib.parse import parse_qsl, urlsplit
from click.testing import CliRunner

from edusharing_backend.cli.cli import cli
from edusharing_backend.repositories.edusharing import EdusharingRepository
from edusharing_backend.repositories.plugin_settings import PluginSettingRepository
from edusharing_backend.settings import SETTINGS_PLUGIN
from edusharing_backend.tests.fixtures import OBJECT_ID, OBJECT_URL, REPOSITORY_ID


@pytest.fixture
def context_file(tmp_path, request_context):
    path = tmp_path / "context.yaml"
    path.write_text(yaml.safe_dump(request_context.model_dump()))
    return str(path)


@pytest.fixture
def configured_session(Session, edusharing_settings):
    session = Session()
    repository = PluginSettingRepository(session)
    for name in ("application_cc_gui_url", "application_appid", "repository_public_key"):
        repository.set_plugin_setting(SETTINGS_PLUGIN, name, getattr(edusharing_settings, name))
    session.close()
    return Session


class TestParseUrl:

    def test_prints_ids(self):
        result = CliRunner().invoke(cli, ["parse-url", OBJECT_URL])

        assert result.exit_code == 0
        assert f"repository: {REPOSITORY_ID}" in result.output
        assert OBJECT_ID in result.output

    def test_unparsable_url(self):
        result = CliRunner().invoke(cli, ["parse-url", "ccrep://[broken/x"])

        assert result.exit_code != 0
        assert "Error" in result.output


class TestRedirectUrl:

    def test_prints_url(self, configured_session, context_file):
        session = configured_session()
        resource_id = EdusharingRepository(session).create({"course": 3, "object_url": OBJECT_URL}).id
        session.close()

        with patch("edusharing_backend.cli.edusharing.SessionLocal", configured_session):
            result = CliRunner().invoke(cli, ["redirect-url", str(resource_id), "-c", context_file, "-d", "inline"])

        assert result.exit_code == 0, result.output
        url = urlsplit(result.output.strip())
        params = dict(parse_qsl(url.query))
        assert url.path == "/edu-sharing/renderingproxy"
        assert params["display"] == "inline"
        assert params["obj_id"] == OBJECT_ID
        assert params["session"] == "sess-42"

    def test_missing_resource(self, configured_session, context_file):
        with patch("edusharing_backend.cli.edusharing.SessionLocal", configured_session):
            result = CliRunner().invoke(cli, ["redirect-url", "99", "-c", context_file])

        assert result.exit_code != 0
        assert "99" in result.output

    def test_empty_context_file(self, tmp_path, configured_session):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        with patch("edusharing_backend.cli.edusharing.SessionLocal", configured_session):
            result = CliRunner().invoke(cli, ["redirect-url", "1", "-c", str(path)])

        assert result.exit_code != 0
        assert "empty" in result.output
