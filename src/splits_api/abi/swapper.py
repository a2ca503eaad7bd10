_QUOTE_PAIR = {
    "components": [
        {"internalType": "address", "name": "base", "type": "address"},
        {"internalType": "address", "name": "quote", "type": "address"},
    ],
    "internalType": "struct QuotePair",
    "name": "quotePair",
    "type": "tuple",
}

_PAIR_SCALED_OFFER_FACTOR_PARAMS = {
    "components": [
        _QUOTE_PAIR,
        {"internalType": "uint32", "name": "scaledOfferFactor", "type": "uint32"},
    ],
    "internalType": "struct SetPairScaledOfferFactorParams[]",
    "name": "params_",
    "type": "tuple[]",
}

_CALLS = {
    "components": [
        {"internalType": "address", "name": "to", "type": "address"},
        {"internalType": "uint256", "name": "value", "type": "uint256"},
        {"internalType": "bytes", "name": "data", "type": "bytes"},
    ],
    "internalType": "struct WalletImpl.Call[]",
    "name": "calls_",
    "type": "tuple[]",
}


def _setter(name: str, arg_name: str, arg_type: str) -> dict:
    return {
        "inputs": [{"internalType": arg_type, "name": arg_name, "type": arg_type}],
        "name": name,
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function",
    }


def _getter(name: str, output_type: str) -> dict:
    return {
        "inputs": [],
        "name": name,
        "outputs": [{"internalType": output_type, "name": "", "type": output_type}],
        "stateMutability": "view",
        "type": "function",
    }


def _event(name: str, arg_name: str, arg_type: str) -> dict:
    return {
        "anonymous": False,
        "inputs": [
            {"indexed": False, "internalType": arg_type, "name": arg_name, "type": arg_type}
        ],
        "name": name,
        "type": "event",
    }


Swapper_abi = (
    _setter("setBeneficiary", "beneficiary_", "address"),
    _setter("setTokenToBeneficiary", "tokenToBeneficiary_", "address"),
    _setter("setOracle", "oracle_", "address"),
    _setter("setDefaultScaledOfferFactor", "defaultScaledOfferFactor_", "uint32"),
    _setter("setPaused", "paused_", "bool"),
    {
        "inputs": [_PAIR_SCALED_OFFER_FACTOR_PARAMS],
        "name": "setPairScaledOfferFactors",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function",
    },
    {
        "inputs": [_CALLS],
        "name": "execCalls",
        "outputs": [
            {"internalType": "uint256", "name": "blockNumber", "type": "uint256"},
            {"internalType": "bytes[]", "name": "returnData", "type": "bytes[]"},
        ],
        "stateMutability": "payable",
        "type": "function",
    },
    _getter("beneficiary", "address"),
    _getter("tokenToBeneficiary", "address"),
    _getter("oracle", "address"),
    _getter("paused", "bool"),
    _getter("defaultScaledOfferFactor", "uint32"),
    {
        "inputs": [
            {
                **_QUOTE_PAIR,
                "internalType": "struct QuotePair[]",
                "name": "quotePairs_",
                "type": "tuple[]",
            }
        ],
        "name": "getPairScaledOfferFactors",
        "outputs": [
            {"internalType": "uint32[]", "name": "pairScaledOfferFactors", "type": "uint32[]"}
        ],
        "stateMutability": "view",
        "type": "function",
    },
    _event("SetBeneficiary", "beneficiary", "address"),
    _event("SetTokenToBeneficiary", "tokenToBeneficiary", "address"),
    _event("SetOracle", "oracle", "address"),
    _event("SetDefaultScaledOfferFactor", "defaultScaledOfferFactor", "uint32"),
    _event("SetPaused", "paused", "bool"),
    {
        "anonymous": False,
        "inputs": [{**_PAIR_SCALED_OFFER_FACTOR_PARAMS, "indexed": False, "name": "params"}],
        "name": "SetPairScaledOfferFactors",
        "type": "event",
    },
    {
        "anonymous": False,
        "inputs": [{**_CALLS, "indexed": False, "name": "calls"}],
        "name": "ExecCalls",
        "type": "event",
    },
)
