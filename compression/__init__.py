"""FAF compression module."""

from .compressor import STANDARD_KEY_FILES_LIMIT, TOKEN_ESTIMATES, compress, estimate_tokens

__all__ = ["STANDARD_KEY_FILES_LIMIT", "TOKEN_ESTIMATES", "compress", "estimate_tokens"]
