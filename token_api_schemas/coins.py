"""
Coin Creation Payload Schemas

Payloads exchanged by the coin-creation workflow:

- RequestCoinCreationPayload: submitted by a creator to request a new coin, with
  its metadata, royalty rates and bonding curve pricing schedule.
- ConfirmCoinCreationPayload: submitted once the deployment transaction has been
  mined, reporting whether it was confirmed or reverted.
- FunctionErrorResponse: error envelope returned by the coin-creation functions.

Royalty rates are expressed in basis points (1 bps = 0.01%) and capped at 10%.
Bonding curve steps keep their range and price as decimal strings so that large
values survive the trip through JSON unchanged.
"""
import re
from enum import Enum
from typing import Any, List, Optional

from pydantic import AnyUrl, Field, StrictBool, StrictStr, TypeAdapter, ValidationError, field_validator
from pydantic_core import PydanticKnownError

from token_api_schemas.jwt_payload import UUID_PATTERN
from token_api_schemas.validation import (
    JsonStringSchema,
    PayloadModel,
    ValidationFailure,
    js_str,
    optional_str,
    wire_int,
)

# Constants
MAX_NAME_LENGTH = 50
MIN_SYMBOL_LENGTH = 3
MAX_SYMBOL_LENGTH = 8
MAX_DESCRIPTION_LENGTH = 1000
MAX_ROYALTY_BPS = 1000  # 10%

SYMBOL_PATTERN = r"^[A-Z0-9]+$"
TRANSACTION_HASH_PATTERN = r"^0x[a-fA-F0-9]{64}$"
CONTRACT_ADDRESS_PATTERN = r"^0x[a-fA-F0-9]{40}$"

STEP_RANGE_RE = re.compile(r"[0-9]+")
STEP_PRICE_RE = re.compile(r"[0-9]+(\.[0-9]+)?")

_url_adapter = TypeAdapter(AnyUrl)

RoyaltyBps = wire_int(ge=0, le=MAX_ROYALTY_BPS)
OptionalStr = optional_str()


class BondingCurveStep(PayloadModel):
    """One step of the pricing schedule: tokens in this range sell at ``price``."""

    range: StrictStr
    price: StrictStr

    @field_validator("range")
    @classmethod
    def _range_is_positive_integer(cls, value: str) -> str:
        if not STEP_RANGE_RE.fullmatch(value) or not value.strip("0"):
            raise ValueError("step range must be a positive integer")
        return value

    @field_validator("price")
    @classmethod
    def _price_is_non_negative_number(cls, value: str) -> str:
        if not STEP_PRICE_RE.fullmatch(value) or float(value) < 0:
            raise ValueError("step price must be a number greater than or equal to 0")
        return value


class RequestCoinCreationPayload(PayloadModel):
    name: js_str(1, MAX_NAME_LENGTH)
    symbol: StrictStr = Field(min_length=MIN_SYMBOL_LENGTH, max_length=MAX_SYMBOL_LENGTH, pattern=SYMBOL_PATTERN)
    logo_url: OptionalStr = None
    description: js_str(1, MAX_DESCRIPTION_LENGTH)
    # Address format is checked on-chain when the reserve token is resolved
    reserve_token_address: StrictStr = Field(min_length=1)
    mint_royalty_bps: RoyaltyBps
    burn_royalty_bps: RoyaltyBps
    bonding_curve_steps: List[BondingCurveStep] = Field(min_length=1)
    manual_verification_requested: StrictBool

    @field_validator("logo_url")
    @classmethod
    def _logo_url_is_well_formed(cls, value: str) -> str:
        try:
            _url_adapter.validate_python(value)
        except ValidationError:
            raise ValueError("logo URL must be a valid URL")
        return value


class CoinCreationStatus(str, Enum):
    confirmed = "confirmed"
    reverted = "reverted"


class ConfirmCoinCreationPayload(PayloadModel):
    coin_id: StrictStr = Field(pattern=UUID_PATTERN)
    transaction_hash: StrictStr = Field(pattern=TRANSACTION_HASH_PATTERN)
    status: CoinCreationStatus
    contract_address: optional_str(pattern=CONTRACT_ADDRESS_PATTERN) = None
    error_message: OptionalStr = None

    def consistency_failures(self) -> List[ValidationFailure]:
        """A confirmed deployment must report its contract; a reverted one cannot have one."""
        failures = []
        if self.status == CoinCreationStatus.confirmed and not self.contract_address:
            failures.append(self.consistency_failure("contract_address", "address_required"))
        if self.status == CoinCreationStatus.reverted and self.contract_address:
            failures.append(self.consistency_failure("contract_address", "address_forbidden"))
        return failures


class FunctionErrorDetail(PayloadModel):
    code: StrictStr
    message: StrictStr
    data: Optional[Any] = None


class FunctionErrorResponse(PayloadModel):
    success: StrictBool
    error: FunctionErrorDetail

    @field_validator("success")
    @classmethod
    def _success_is_false(cls, value: bool) -> bool:
        if value is not False:
            raise PydanticKnownError("literal_error", {"expected": "False"})
        return value


RequestCoinCreationPayloadStringSchema = JsonStringSchema(RequestCoinCreationPayload)
ConfirmCoinCreationPayloadStringSchema = JsonStringSchema(ConfirmCoinCreationPayload)
FunctionErrorResponseStringSchema = JsonStringSchema(FunctionErrorResponse)


def create_function_error_response(code: str, message: str, data: Any = None) -> FunctionErrorResponse:
    """Builds the ``success: false`` envelope. ``data`` is included only when not None."""
    detail = {"code": code, "message": message}
    if data is not None:
        detail["data"] = data
    return FunctionErrorResponse(success=False, error=FunctionErrorDetail(**detail))
