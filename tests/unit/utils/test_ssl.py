"""Tests for the SSL verification helpers."""

import ssl
from unittest.mock import MagicMock, patch

from requests.adapters import HTTPAdapter
from requests.sessions import Session

from jira_issue_client.utils.ssl import SSLIgnoreAdapter, configure_ssl_verification


def test_adapter_never_verifies_certificates():
    adapter = SSLIgnoreAdapter()
    connection = MagicMock()

    with patch.object(HTTPAdapter, "cert_verify") as parent_cert_verify:
        adapter.cert_verify(connection, "https://jira.local", verify=True, cert=None)

    parent_cert_verify.assert_called_once_with(
        connection, "https://jira.local", verify=False, cert=None
    )


def test_adapter_pool_uses_unverified_context():
    adapter = SSLIgnoreAdapter()
    context = MagicMock()

    with (
        patch("ssl.create_default_context", return_value=context),
        patch("jira_issue_client.utils.ssl.PoolManager") as pool_manager,
    ):
        adapter.init_poolmanager(3, 7, block=False)

    assert context.check_hostname is False
    assert context.verify_mode == ssl.CERT_NONE
    kwargs = pool_manager.call_args.kwargs
    assert (kwargs["num_pools"], kwargs["maxsize"], kwargs["block"]) == (3, 7, False)
    assert kwargs["ssl_context"] is context


def test_verification_enabled_mounts_nothing():
    session = MagicMock(spec=Session)

    configure_ssl_verification("https://jira.example.com", session, ssl_verify=True)

    session.mount.assert_not_called()


def test_verification_disabled_mounts_adapter_for_host(caplog):
    session = MagicMock(spec=Session)

    with caplog.at_level("WARNING", logger="jira-issue-client"):
        configure_ssl_verification(
            "https://jira.example.com:8443/jira", session, ssl_verify=False
        )

    mounted = {call.args[0] for call in session.mount.call_args_list}
    assert mounted == {"https://jira.example.com:8443", "http://jira.example.com:8443"}
    assert all(
        isinstance(call.args[1], SSLIgnoreAdapter)
        for call in session.mount.call_args_list
    )
    assert "SSL verification disabled" in caplog.text


def test_real_session_gets_adapter():
    session = Session()

    configure_ssl_verification("https://jira.example.com", session, ssl_verify=False)

    adapter = session.get_adapter("https://jira.example.com/rest/api/2/myself")
    assert isinstance(adapter, SSLIgnoreAdapter)
    other = session.get_adapter("https://other.example.com")
    assert not isinstance(other, SSLIgnoreAdapter)
