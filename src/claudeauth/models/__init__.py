from claudeauth.models.credentials import OAUTH_SCOPES, OAuthCredentials, parse_expires_at

__all__ = ["OAUTH_SCOPES", "OAuthCredentials", "parse_expires_at"]
