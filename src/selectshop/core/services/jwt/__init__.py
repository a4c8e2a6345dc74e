from .jwt_service import JwtService, TokenClaims

__all__ = ["JwtService", "TokenClaims"]
