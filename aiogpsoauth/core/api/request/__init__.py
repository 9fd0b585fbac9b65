"""Request building and response handling."""
from .request_builder import RequestBuilder
from .response_handler import ResponseParser, ResponseHandler

__all__ = [
    'RequestBuilder',
    'ResponseParser',
    'ResponseHandler',
]
