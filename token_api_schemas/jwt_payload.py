"""
JWT Payload Schemas

Claims carried by access tokens issued after a successful wallet login. Two
payload shapes are in circulation and both are exposed here:

- WalletJwtPayload: ``sub`` is the ``0x``-prefixed wallet address (canonical).
- UserJwtPayload: ``sub`` is the user's UUID and the wallet is carried separately
  in ``address``.

``get_jwt_payload_schema`` returns the variant selected by ``JWT_PAYLOAD_VARIANT``.
Signing and verification happen elsewhere; these schemas only check the decoded
claims.
"""
from typing import Literal, Optional, Type

from pydantic import Field, StrictStr

from token_api_schemas import config
from token_api_schemas.validation import JsonStringSchema, PayloadModel, wire_int

AUTHENTICATED_ROLE = "authenticated"

# Hyphenated 8-4-4-4-12 form only
UUID_PATTERN = r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
HEX_ADDRESS_PREFIX_PATTERN = r"^0x"

# Seconds since the epoch; JS encoders may emit these in exponent form
TimestampClaim = wire_int(gt=0)


class WalletJwtPayload(PayloadModel):
    sub: StrictStr = Field(pattern=HEX_ADDRESS_PREFIX_PATTERN)
    role: Literal["authenticated"]
    aud: Literal["authenticated"]
    iat: TimestampClaim
    exp: TimestampClaim


class UserJwtPayload(PayloadModel):
    sub: StrictStr = Field(pattern=UUID_PATTERN)
    address: StrictStr = Field(pattern=HEX_ADDRESS_PREFIX_PATTERN)
    role: Literal["authenticated"]
    aud: Literal["authenticated"]
    iat: TimestampClaim
    exp: TimestampClaim


JwtPayload = WalletJwtPayload

JWT_PAYLOAD_SCHEMAS = {
    "wallet": WalletJwtPayload,
    "user": UserJwtPayload,
}

WalletJwtPayloadStringSchema = JsonStringSchema(WalletJwtPayload)
UserJwtPayloadStringSchema = JsonStringSchema(UserJwtPayload)


def get_jwt_payload_schema(variant: Optional[str] = None) -> Type[PayloadModel]:
    """Returns the payload schema for ``variant``, defaulting to the configured one."""
    variant = variant or config.JWT_PAYLOAD_VARIANT
    try:
        return JWT_PAYLOAD_SCHEMAS[variant]
    except KeyError:
        raise ValueError(f"Unknown JWT payload variant '{variant}'")
