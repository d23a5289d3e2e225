"""
Token API Schemas Package Initialization

This package provides the data-validation schemas shared by the authentication and
token-issuance services. Each schema is a frozen pydantic model that validates an
untyped payload and returns either the typed value or a list of failures.

The package includes:
- Wallet login request/response and error response schemas (auth)
- JWT payload schemas in both circulating variants (jwt_payload)
- Coin creation request and confirmation payload schemas (coins)
- JSON-string wrappers for validating raw wire payloads (validation)
- Localized failure message catalogs (messages)
- Environment-driven configuration (config)
"""
