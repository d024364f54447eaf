from bosonnlp.transport.base import BaseTransport
from bosonnlp.transport.http_transport import HttpTransport

__all__ = ["BaseTransport", "HttpTransport"]
