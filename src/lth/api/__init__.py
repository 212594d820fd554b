"""
External resource clients used by the scaffold pipeline.
"""

from .remote import FetchError, RemoteFetcher, format_request_exception

__all__ = ["FetchError", "RemoteFetcher", "format_request_exception"]
