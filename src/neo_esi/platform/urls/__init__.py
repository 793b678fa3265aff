"""Fragment URL encoding."""

from .url_codec import UrlCodec, encode_page_path, decode_page_path

__all__ = ["UrlCodec", "encode_page_path", "decode_page_path"]
