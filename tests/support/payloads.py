"""JSON request bodies for API tests (camelCase, as the UI sends them)."""

from typing import Any

CREATOR = "0x" + "ab" * 20
OWNER = "0x" + "cd" * 20
WALLET = "0x" + "ef" * 20


def token_payload(**overrides: Any) -> dict[str, Any]:
    payload = {
        "name": "Token A",
        "symbol": "TKA",
        "totalSupply": "1000",
        "creatorAddress": CREATOR,
    }
    payload.update(overrides)
    return payload


def presale_payload(token_id: str, **overrides: Any) -> dict[str, Any]:
    payload = {
        "tokenId": token_id,
        "tokenName": "Token A",
        "tokenSymbol": "TKA",
        "pricePerToken": "0.01",
        "hardCap": "100",
        "startDate": "2025-02-01T00:00:00Z",
        "endDate": "2025-02-08T00:00:00Z",
        "ownerAddress": OWNER,
    }
    payload.update(overrides)
    return payload


def contribution_payload(amount: str, **overrides: Any) -> dict[str, Any]:
    payload = {
        "walletAddress": WALLET,
        "contributionAmount": amount,
        "tokenAmount": "100",
    }
    payload.update(overrides)
    return payload
