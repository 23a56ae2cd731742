"""
Response formatters.

Pure functions that reshape users, tokens, roles and permissions into API
response bodies. Inputs may be ORM objects or plain mappings; missing fields
degrade to empty values instead of raising.
"""
from resources.auth_resource import format_refresh_token_response, format_register_response
from resources.login_resource import format_login_response

__all__ = ["format_login_response", "format_refresh_token_response", "format_register_response"]
