"""
Tests for query parameter normalization and address checks
"""
import pytest

from guardian.utils.validators import (
    AddressValidator,
    normalize_request_params,
    normalize_window,
    safe_number
)


@pytest.mark.parametrize("raw", [None, "", "   ", "abc", "nan", "inf", "-Infinity", "0x10"])
def test_safe_number_falls_back_to_default(raw):
    """Test malformed numbers give the default"""
    assert safe_number(raw, 7) == 7


def test_safe_number_parses_and_truncates():
    assert safe_number("12", 0) == 12
    assert safe_number(" 3.9 ", 0) == 3
    assert safe_number("1e3", 0) == 1000
    assert safe_number("-4", 0) == -4


def test_window_defaults():
    window = normalize_window(None, None, None)

    assert window.window_blocks == 200
    assert window.span == 5
    assert window.delay_ms == 500
    assert window.fast is False


def test_span_is_clamped():
    assert normalize_window(None, "0", None).span == 1
    assert normalize_window(None, "99", None).span == 10
    assert normalize_window(None, "-3", None).span == 1
    assert normalize_window(None, "7", None).span == 7


def test_window_and_delay_never_negative():
    window = normalize_window("-50", None, "-1")

    assert window.window_blocks == 1
    assert window.delay_ms == 0


def test_malformed_window_uses_default():
    window = normalize_window("x", "abc", "")

    assert window.window_blocks == 200
    assert window.span == 5
    assert window.delay_ms == 500


@pytest.mark.parametrize("raw,expected", [("1", True), ("0", False), ("true", False), (" 1", False), (None, False)])
def test_fast_only_for_exact_one(raw, expected):
    assert normalize_window(None, None, None, raw).fast is expected


def test_request_params_identifiers():
    params = normalize_request_params(chain="  BASE ", token="  0xAbc  ", center=" 0xDef ")

    assert params.chain_key == "base"
    assert params.token == "0xAbc"
    assert params.center == "0xDef"


def test_request_params_default_chain():
    assert normalize_request_params().chain_key == "base"
    assert normalize_request_params(chain="").chain_key == "base"
    assert normalize_request_params().token == ""


def test_solana_address_shape():
    assert AddressValidator.validate_solana_address("So11111111111111111111111111111111111111112")
    assert not AddressValidator.validate_solana_address("not-an-address")
    assert not AddressValidator.validate_solana_address("0x4200000000000000000000000000000000000006")
    assert not AddressValidator.validate_solana_address("")


def test_evm_address_shape():
    assert AddressValidator.validate_evm_address("0x4200000000000000000000000000000000000006")
    assert not AddressValidator.validate_evm_address("0x42")
