"""Module de transfert HTTP.

Classes disponibles :
    TransferClient : Interface abstraite des clients de transfert.
    CurlClient : Façade curl.
    TransferOptions, DownloadOptions, UploadOptions,
    RequestOptions : Options par opération.
"""

from linux_admin_utils.transfer.base import TransferClient
from linux_admin_utils.transfer.curl import (
    CURL_CMD,
    CurlClient,
    DownloadOptions,
    RequestOptions,
    TransferOptions,
    UploadOptions,
    extract_status_code,
)

__all__ = [
    "TransferClient",
    "CURL_CMD",
    "CurlClient",
    "TransferOptions",
    "DownloadOptions",
    "UploadOptions",
    "RequestOptions",
    "extract_status_code",
]
