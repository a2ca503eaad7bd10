"""Example: Estimate, then create a Swapper through the factory."""

from __future__ import annotations

import asyncio
import logging
import os

from dotenv import load_dotenv

from splits_api import LocalSigner, OracleParams, SwapperClient, Web3Transport

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOGLEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

DEFAULT_DISCOUNT_PERCENT = 0.5


async def main() -> None:
    """Create a paused Swapper owned by the signer."""

    rpc_url = os.getenv("RPC_URL")
    if not rpc_url:
        raise ValueError("RPC_URL not found in environment variables")
    private_key = os.getenv("PRIVATE_KEY")
    if not private_key:
        raise ValueError("PRIVATE_KEY not found in environment variables")
    chain_id = int(os.getenv("CHAIN_ID", "84531"))

    signer = LocalSigner.from_key(private_key)
    client = SwapperClient(chain_id, Web3Transport.from_url(rpc_url), signer)

    oracle = os.getenv("ORACLE_ADDRESS")
    token = os.getenv("TOKEN_TO_BENEFICIARY")
    if not oracle or not token:
        raise ValueError("ORACLE_ADDRESS and TOKEN_TO_BENEFICIARY must be set")
    request = dict(
        owner=signer.address,
        paused=True,
        beneficiary=os.getenv("BENEFICIARY", signer.address),
        token_to_beneficiary=token,
        oracle_params=OracleParams(address=oracle),
        default_scaled_offer_factor_percent=DEFAULT_DISCOUNT_PERCENT,
    )

    gas = await client.estimate_gas.create_swapper(**request)
    print(f"Estimated gas: {gas}")

    call_data = await client.call_data.create_swapper(**request)
    print(f"Calldata for {call_data.target}: {call_data.data[:74]}...")

    result = await client.create_swapper(**request)
    print(f"Swapper created: {result.swapper_id} (block {result.event.block_number})")


if __name__ == "__main__":
    asyncio.run(main())
