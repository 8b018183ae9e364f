"""
Query String Request Adapter

Services only need read access to the query string of the current request.
QueryRequest wraps a Starlette/FastAPI Request and exposes exactly that,
which keeps services independent of the web framework and easy to test.
"""

from typing import Mapping, Optional, Union

from starlette.requests import Request


class QueryRequest:
    """Read-only view over the query parameters of one HTTP request."""

    def __init__(self, source: Union[Request, Mapping[str, str]]):
        """
        Args:
            source: The incoming request, or a plain mapping of query
                parameters (handy outside of an HTTP request)
        """
        if isinstance(source, Request):
            # Repeated keys: the last value wins
            self._params = dict(source.query_params)
        else:
            self._params = dict(source)

    def get_query_param(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self._params.get(name, default)

    def get_query_params(self) -> dict[str, str]:
        return dict(self._params)

    def __repr__(self) -> str:
        return f"QueryRequest({self._params!r})"
