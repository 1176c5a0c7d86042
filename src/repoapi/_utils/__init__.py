from ._interpolate import interpolate
from ._logs import setup_logging
from ._request import ApiRequest, RequestMethod, RequestOptions

__all__ = [
    "ApiRequest",
    "interpolate",
    "RequestMethod",
    "RequestOptions",
    "setup_logging",
]
