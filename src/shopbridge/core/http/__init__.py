from .client import get_http_client, read_json_body, send_json

__all__ = ["get_http_client", "read_json_body", "send_json"]
