"""
Validation Failure Message Catalogs

Fixed, localized failure messages keyed by schema name and then by
``"<field path>.<error type>"``. List indexes are dropped from the field path, so
every bonding curve step shares the ``bonding_curve_steps.range`` entries.

Error types are pydantic's (``string_too_short``, ``less_than_equal``, ...) plus
the codes raised by the cross-field checks in ``coins``. Anything without an
entry keeps pydantic's own message.

The ``ja`` catalog keeps the wording used by the web frontend.
"""
from typing import Dict, Optional

from token_api_schemas import config

MessageCatalog = Dict[str, Dict[str, str]]

EN_MESSAGES: MessageCatalog = {
    "LoginRequest": {
        "message.string_too_short": "Message is required.",
        "signature.string_too_short": "Signature is required.",
    },
    "RequestCoinCreationPayload": {
        "name.string_too_short": "Token name must be at least 1 character.",
        "name.string_too_long": "Token name must be 50 characters or fewer.",
        "symbol.string_too_short": "Token symbol must be at least 3 characters.",
        "symbol.string_too_long": "Token symbol must be 8 characters or fewer.",
        "symbol.string_pattern_mismatch": "Token symbol may only contain uppercase letters and digits.",
        "logo_url.value_error": "Logo URL must be a valid URL.",
        "description.string_too_short": "Coin description must be at least 1 character.",
        "description.string_too_long": "Coin description must be 1000 characters or fewer.",
        "reserve_token_address.string_too_short": "Please select a reserve token.",
        "mint_royalty_bps.greater_than_equal": "Mint royalty must be 0 or greater.",
        "mint_royalty_bps.less_than_equal": "Mint royalty must be 10% or less (1000 BPS).",
        "burn_royalty_bps.greater_than_equal": "Burn royalty must be 0 or greater.",
        "burn_royalty_bps.less_than_equal": "Burn royalty must be 10% or less (1000 BPS).",
        "bonding_curve_steps.too_short": "Please configure at least one bonding curve step.",
        "bonding_curve_steps.range.value_error": "Step range must be a positive integer.",
        "bonding_curve_steps.price.value_error": "Step price must be a number greater than or equal to 0.",
    },
    "BondingCurveStep": {
        "range.value_error": "Step range must be a positive integer.",
        "price.value_error": "Step price must be a number greater than or equal to 0.",
    },
    "ConfirmCoinCreationPayload": {
        "coin_id.string_pattern_mismatch": "Invalid coin_id format.",
        "transaction_hash.string_pattern_mismatch": "Invalid transaction hash format.",
        "status.missing": "status must be 'confirmed' or 'reverted'.",
        "status.enum": "status must be 'confirmed' or 'reverted'.",
        "contract_address.string_pattern_mismatch": "Invalid contract address format.",
        "contract_address.address_required": "contract_address is required when status is 'confirmed'.",
        "contract_address.address_forbidden": "contract_address must not be set when status is 'reverted'.",
    },
}

JA_MESSAGES: MessageCatalog = {
    "LoginRequest": {
        "message.string_too_short": "メッセージは必須です",
        "signature.string_too_short": "署名は必須です",
    },
    "RequestCoinCreationPayload": {
        "name.string_too_short": "トークン名は1文字以上で入力してください。",
        "name.string_too_long": "トークン名は50文字以内で入力してください。",
        "symbol.string_too_short": "トークンシンボルは3文字以上で入力してください。",
        "symbol.string_too_long": "トークンシンボルは8文字以内で入力してください。",
        "symbol.string_pattern_mismatch": "トークンシンボルは英大文字アルファベットと数字のみ使用できます。",
        "logo_url.value_error": "ロゴURLは有効なURL形式で入力してください。",
        "description.string_too_short": "コイン説明は1文字以上で入力してください。",
        "description.string_too_long": "コイン説明は1000文字以内で入力してください。",
        "reserve_token_address.string_too_short": "準備金トークンを選択してください。",
        "mint_royalty_bps.greater_than_equal": "ミントロイヤリティは0以上で入力してください。",
        "mint_royalty_bps.less_than_equal": "ミントロイヤリティは10%以下で入力してください (1000 BPS)。",
        "burn_royalty_bps.greater_than_equal": "バーンロイヤリティは0以上で入力してください。",
        "burn_royalty_bps.less_than_equal": "バーンロイヤリティは10%以下で入力してください (1000 BPS)。",
        "bonding_curve_steps.too_short": "ボンディングカーブステップを1つ以上設定してください。",
        "bonding_curve_steps.range.value_error": "ステップ範囲は正の整数で入力してください。",
        "bonding_curve_steps.price.value_error": "ステップ価格は0以上の数値で入力してください。",
    },
    "BondingCurveStep": {
        "range.value_error": "ステップ範囲は正の整数で入力してください。",
        "price.value_error": "ステップ価格は0以上の数値で入力してください。",
    },
    "ConfirmCoinCreationPayload": {
        "coin_id.string_pattern_mismatch": "無効な coin_id 形式です。",
        "transaction_hash.string_pattern_mismatch": "無効なトランザクションハッシュ形式です。",
        "status.missing": "status は 'confirmed' または 'reverted' である必要があります。",
        "status.enum": "status は 'confirmed' または 'reverted' である必要があります。",
        "contract_address.string_pattern_mismatch": "無効なコントラクトアドレス形式です。",
        "contract_address.address_required": "status が 'confirmed' の場合、contract_address は必須です。",
        "contract_address.address_forbidden": "status が 'reverted' の場合、contract_address は指定できません。",
    },
}

# Prefix for failures raised while decoding a JSON string payload.
INVALID_JSON_PREFIX = {
    "en": "Not valid JSON or not in the expected format",
    "ja": "有効なJSONではないか、期待する形式ではありません",
}

CATALOGS: Dict[str, MessageCatalog] = {"en": EN_MESSAGES, "ja": JA_MESSAGES}


def lookup_message(schema_name: str, key: str, locale: Optional[str] = None) -> Optional[str]:
    """Returns the catalog message for a schema failure key, or None if there is none."""
    catalog = CATALOGS.get(locale or config.MESSAGE_LOCALE, EN_MESSAGES)
    return catalog.get(schema_name, {}).get(key)


def invalid_json_message(detail: str, locale: Optional[str] = None) -> str:
    prefix = INVALID_JSON_PREFIX.get(locale or config.MESSAGE_LOCALE, INVALID_JSON_PREFIX["en"])
    return f"{prefix}: {detail}"
