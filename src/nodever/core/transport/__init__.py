"""Network transport subpackage.

Abstractions over HTTP access with a requests-based and a curl/wget-based
implementation, plus an in-memory fake for tests.
"""

from nodever.core.transport.abc import Transport
from nodever.core.transport.real import CommandLineTransport, RequestsTransport, create_transport

__all__ = [
    "Transport",
    "RequestsTransport",
    "CommandLineTransport",
    "create_transport",
]
