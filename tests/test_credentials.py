import base64

from documize_mcp.core.credentials import Credentials


def test_from_parts_encodes_tenant_identity_secret():
    creds = Credentials.from_parts("acme", "user@example.com", "pw")
    assert base64.b64decode(creds.encoded) == b"acme:user@example.com:pw"


def test_from_parts_allows_empty_tenant():
    creds = Credentials.from_parts("", "user@example.com", "pw")
    assert base64.b64decode(creds.encoded) == b":user@example.com:pw"
    assert creds.basic_header() == "Basic " + creds.encoded


def test_secret_is_not_echoed():
    creds = Credentials.from_parts("", "user@example.com", "hunter2")
    assert creds.encoded not in repr(creds)
    assert creds.encoded not in str(creds)
