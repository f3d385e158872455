"""Configuration settings for the UnixFS library."""

import os


LOG_LEVEL = os.environ.get("UNIXFS_LOG_LEVEL", os.environ.get("LOG_LEVEL", "INFO")).upper()

LOG_PAYLOAD_PREVIEW_BYTES = int(os.environ.get("UNIXFS_LOG_PAYLOAD_PREVIEW_BYTES", "16"))
