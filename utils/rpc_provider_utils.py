from urllib.parse import urlparse

from web3 import HTTPProvider, IPCProvider, LegacyWebSocketProvider
from web3.providers.base import BaseProvider

from utils.logger_utils import get_logger

logger = get_logger("RPC Provider Utils")

DEFAULT_TIMEOUT = 120


def get_provider_from_uri(uri_string: str, timeout: int = DEFAULT_TIMEOUT) -> BaseProvider:
    """
    Creates a synchronous Web3 provider for the forking node based on the URI scheme.
    Supports http, https, ws, wss and ipc.
    """
    uri = urlparse(uri_string)

    if uri.scheme == "http" or uri.scheme == "https":
        request_kwargs = {"timeout": timeout}
        return HTTPProvider(uri_string, request_kwargs=request_kwargs)
    elif uri.scheme == "ws" or uri.scheme == "wss":
        return LegacyWebSocketProvider(uri_string, websocket_timeout=timeout)
    elif uri.scheme == "file" or uri_string.endswith(".ipc"):
        return IPCProvider(uri.path if uri.scheme == "file" else uri_string, timeout=timeout)
    else:
        raise ValueError(f"Unknown uri scheme {uri_string}. Supported: http, https, ws, wss, file (ipc)")
