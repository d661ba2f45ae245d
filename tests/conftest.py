"""Pytest configuration for tavern tests."""

import socket
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

# Add the package source to path for testing
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture
def fake_dns(monkeypatch):
    """Replace host name resolution with a fixed table.

    ``hosts`` maps host names to the address families they resolve for;
    ``lookups`` records every name that was looked up. Unknown names fail the
    way an NXDOMAIN answer does.
    """
    dns = SimpleNamespace(
        hosts={"localhost": {socket.AF_INET, socket.AF_INET6}},
        lookups=[],
    )

    def getaddrinfo(host, port, family=0, type=0, proto=0, flags=0):
        dns.lookups.append(host)
        families = dns.hosts.get(host, set())
        if families and (family == socket.AF_UNSPEC or family in families):
            return [(f, type, proto, "", ("127.0.0.1", 0)) for f in families]
        raise socket.gaierror(socket.EAI_NONAME, "Name or service not known")

    monkeypatch.setattr("tavern.validators.network.socket.getaddrinfo", getaddrinfo)
    return dns
