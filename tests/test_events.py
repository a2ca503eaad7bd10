"""Tests for operation descriptors and event extraction."""

from __future__ import annotations

import pytest
from conftest import BENEFICIARY, ORACLE, OWNER, SWAPPER_ID
from eth_utils import keccak
from hexbytes import HexBytes

from splits_api.abi import Swapper_abi, SwapperFactory_abi
from splits_api.constants import ContractKind
from splits_api.evm.descriptors import EventSchema, FunctionSchema, OperationDescriptor
from splits_api.evm.events import EventExtractor
from splits_api.exceptions import InvalidResponseError
from splits_api.testing import encode_event_log
from splits_api.types import SubmittedTransaction

SET_BENEFICIARY = EventSchema.from_abi(Swapper_abi, "SetBeneficiary")
SET_ORACLE = EventSchema.from_abi(Swapper_abi, "SetOracle")
SET_PAUSED = EventSchema.from_abi(Swapper_abi, "SetPaused")
CREATE_SWAPPER = EventSchema.from_abi(SwapperFactory_abi, "CreateSwapper")


def _mined(*logs: dict) -> SubmittedTransaction:
    return SubmittedTransaction(tx_hash="0x01", receipt={"blockNumber": 7, "logs": list(logs)})


def test_function_selector_matches_signature() -> None:
    schema = FunctionSchema.from_abi(Swapper_abi, "setBeneficiary")

    assert schema.selector == keccak(text="setBeneficiary(address)")[:4]
    assert schema.input_types == ("address",)


def test_tuple_function_signature_is_canonical() -> None:
    schema = FunctionSchema.from_abi(SwapperFactory_abi, "createSwapper")
    assert schema.input_types == (
        "(address,bool,address,address,(address,(address,bytes)),uint32,"
        "((address,address),uint32)[])",
    )


def test_encode_rejects_wrong_arity() -> None:
    schema = FunctionSchema.from_abi(Swapper_abi, "setPaused")
    with pytest.raises(ValueError, match="expects 1 arguments"):
        schema.encode((True, False))


def test_decode_output_checksums_addresses() -> None:
    schema = FunctionSchema.from_abi(Swapper_abi, "getPairScaledOfferFactors")
    assert schema.output_types == ("uint32[]",)

    oracle = FunctionSchema.from_abi(Swapper_abi, "oracle")
    data = HexBytes("0x" + "00" * 12 + ORACLE[2:].lower())
    assert oracle.decode_output(data) == (ORACLE,)


def test_event_topic_is_keccak_of_signature() -> None:
    assert SET_BENEFICIARY.topic == keccak(text="SetBeneficiary(address)")
    assert [item.name for item in CREATE_SWAPPER.indexed_inputs] == ["swapper"]


def test_descriptor_exposes_event_topics() -> None:
    descriptor = OperationDescriptor.from_abi(
        "set_oracle", ContractKind.SWAPPER, Swapper_abi, "setOracle", ("SetOracle",)
    )
    assert descriptor.event_topics == (SET_ORACLE.topic,)
    assert descriptor.encode((ORACLE,))[:4] == keccak(text="setOracle(address)")[:4]


def test_extract_decodes_indexed_and_data_args() -> None:
    params = (OWNER, False, BENEFICIARY, OWNER, ORACLE, 990_000, [((OWNER, ORACLE), 995_000)])
    log = encode_event_log(
        CREATE_SWAPPER,
        {"swapper": SWAPPER_ID, "params": params},
        address=OWNER,
        block_number=7,
        log_index=3,
    )

    event = EventExtractor([CREATE_SWAPPER]).extract(_mined(log), [CREATE_SWAPPER.topic])

    assert event is not None
    assert event.name == "CreateSwapper"
    assert event.args["swapper"] == SWAPPER_ID
    assert event.args["params"] == (
        OWNER,
        False,
        BENEFICIARY,
        OWNER,
        ORACLE,
        990_000,
        [((OWNER, ORACLE), 995_000)],
    )
    assert event.block_number == 7
    assert event.log_index == 3
    assert event.address == OWNER


def test_extract_ignores_non_matching_logs() -> None:
    unrelated = {"topics": [keccak(text="Transfer(address,address,uint256)")], "data": "0x"}
    paused = encode_event_log(SET_PAUSED, {"paused": True}, address=SWAPPER_ID, log_index=1)

    event = EventExtractor([SET_PAUSED]).extract(_mined(unrelated, paused), [SET_PAUSED.topic])

    assert event is not None
    assert event.args == {"paused": True}
    assert event.log_index == 1


def test_extract_prefers_first_candidate_topic() -> None:
    beneficiary = encode_event_log(
        SET_BENEFICIARY, {"beneficiary": BENEFICIARY}, address=SWAPPER_ID, log_index=0
    )
    oracle = encode_event_log(SET_ORACLE, {"oracle": ORACLE}, address=SWAPPER_ID, log_index=1)
    extractor = EventExtractor([SET_BENEFICIARY, SET_ORACLE])

    mined = _mined(beneficiary, oracle)
    first = extractor.extract(mined, [SET_ORACLE.topic, SET_BENEFICIARY.topic])
    assert first is not None
    assert first.name == "SetOracle"

    second = extractor.extract(mined, [SET_BENEFICIARY.topic])
    assert second is not None
    assert second.name == "SetBeneficiary"


def test_extract_returns_first_matching_log() -> None:
    first = encode_event_log(SET_PAUSED, {"paused": True}, address=SWAPPER_ID, log_index=0)
    second = encode_event_log(SET_PAUSED, {"paused": False}, address=SWAPPER_ID, log_index=1)

    event = EventExtractor([SET_PAUSED]).extract(_mined(first, second), [SET_PAUSED.topic])

    assert event is not None
    assert event.args["paused"] is True


def test_extract_returns_none_without_match() -> None:
    extractor = EventExtractor([SET_PAUSED, SET_ORACLE])
    oracle = encode_event_log(SET_ORACLE, {"oracle": ORACLE}, address=SWAPPER_ID)

    assert extractor.extract(_mined(), [SET_PAUSED.topic]) is None
    assert extractor.extract(_mined(oracle), [SET_PAUSED.topic]) is None
    assert extractor.extract({"logs": [oracle]}, [SET_PAUSED.topic]) is None


def test_extract_unknown_topic() -> None:
    with pytest.raises(InvalidResponseError) as exc_info:
        EventExtractor([SET_PAUSED]).extract(_mined(), [SET_ORACLE.topic])
    assert exc_info.value.details == {"topic": SET_ORACLE.topic.to_0x_hex()}
