"""Example: Create a Recoup waterfall whose residual tranche is a split."""

from __future__ import annotations

import asyncio
import logging
import os

from dotenv import load_dotenv

from splits_api import (
    CreateSplitConfig,
    LocalSigner,
    RecoupTranche,
    SplitRecipient,
    TemplatesClient,
    Web3Transport,
)

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOGLEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

NATIVE_TOKEN = "0x0000000000000000000000000000000000000000"
RECOUP_AMOUNT = "0.05"


async def main() -> None:
    """Recoup the first 0.05 ETH to the signer, then split the rest 50/50."""

    rpc_url = os.getenv("RPC_URL")
    if not rpc_url:
        raise ValueError("RPC_URL not found in environment variables")
    private_key = os.getenv("PRIVATE_KEY")
    if not private_key:
        raise ValueError("PRIVATE_KEY not found in environment variables")
    partner = os.getenv("PARTNER_ADDRESS")
    if not partner:
        raise ValueError("PARTNER_ADDRESS not found in environment variables")
    chain_id = int(os.getenv("CHAIN_ID", "5"))

    signer = LocalSigner.from_key(private_key)
    client = TemplatesClient(chain_id, Web3Transport.from_url(rpc_url), signer)

    residual = CreateSplitConfig(
        recipients=(
            SplitRecipient(signer.address, 50),
            SplitRecipient(partner, 50),
        ),
        distributor_fee_percent=1,
    )
    tranches = [
        RecoupTranche(signer.address, size=RECOUP_AMOUNT),
        RecoupTranche(residual),
    ]

    result = await client.create_recoup(NATIVE_TOKEN, tranches)
    print(f"Waterfall module created: {result.waterfall_module_id}")
    print(f"Transaction: {result.event.transaction_hash}")


if __name__ == "__main__":
    asyncio.run(main())
