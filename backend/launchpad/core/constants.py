# EVM address / hash formats accepted by the API
EVM_ADDRESS_PATTERN = r"^0x[a-fA-F0-9]{40}$"
TX_HASH_PATTERN = r"^0x[a-fA-F0-9]{64}$"

# Amount formats (decimal strings, never floats)
INTEGER_AMOUNT_PATTERN = r"^\d+$"
DECIMAL_AMOUNT_PATTERN = r"^\d+\.?\d*$"

# Total value locked is reported with two fraction digits
TVL_FRACTION_DIGITS = 2

# Lengths of mock on-chain identifiers (hex chars, without 0x)
CONTRACT_ADDRESS_HEX_LENGTH = 40
TX_HASH_HEX_LENGTH = 64
