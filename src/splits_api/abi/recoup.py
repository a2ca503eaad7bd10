Recoup_abi = (
    {
        "inputs": [
            {"internalType": "address", "name": "token", "type": "address"},
            {"internalType": "address", "name": "nonWaterfallRecipientAddress", "type": "address"},
            {
                "internalType": "uint256",
                "name": "nonWaterfallRecipientTrancheIndex",
                "type": "uint256",
            },
            {
                "components": [
                    {"internalType": "address[]", "name": "recipients", "type": "address[]"},
                    {"internalType": "uint32[]", "name": "percentAllocations", "type": "uint32[]"},
                    {"internalType": "address", "name": "controller", "type": "address"},
                    {"internalType": "uint32", "name": "distributorFee", "type": "uint32"},
                ],
                "internalType": "struct Recoup.Tranche[]",
                "name": "tranches",
                "type": "tuple[]",
            },
            {"internalType": "uint256[]", "name": "thresholds", "type": "uint256[]"},
        ],
        "name": "createRecoup",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function",
    },
    {
        "anonymous": False,
        "inputs": [
            {
                "indexed": False,
                "internalType": "address",
                "name": "waterfallModule",
                "type": "address",
            }
        ],
        "name": "CreateRecoup",
        "type": "event",
    },
)
