from htmx_headers.contracts.error_codes import HeaderErrorCode
from htmx_headers.contracts.header_names import KNOWN_HX_HEADERS, HxHeaders

__all__ = ["HeaderErrorCode", "HxHeaders", "KNOWN_HX_HEADERS"]
