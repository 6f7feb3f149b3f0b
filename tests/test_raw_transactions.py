# tests/test_raw_transactions.py

"""Tests for the raw transaction wire types

Decoded transactions, coinbase vs spending inputs, the v22 and v23
scriptPubKey changes, decodescript, funding, signing, the PSBT family and
testmempoolaccept.
"""

from copy import deepcopy
from decimal import Decimal

import pytest

from btcrpc.core.exceptions import (
    ConversionError,
    InconsistentFieldsError,
    InvalidHexError,
    MalformedResponseError,
    UnknownVariantError,
)
from btcrpc.models.primitives import ScriptType
from btcrpc.models.raw_transactions import CoinbaseInput, SpendInput
from btcrpc.schemas.v17 import blockchain as v17_blockchain
from btcrpc.schemas.v17 import raw_transactions as v17
from btcrpc.schemas.v18 import raw_transactions as v18
from btcrpc.schemas.v21 import raw_transactions as v21
from btcrpc.schemas.v22 import blockchain as v22_blockchain
from btcrpc.schemas.v22 import raw_transactions as v22
from btcrpc.schemas.v23 import blockchain as v23_blockchain
from btcrpc.schemas.v23 import raw_transactions as v23


TXID = "a1075db55d416d3ca199f55b6084e2115b9345e16c5cf302fc80e9d5fbf5d48d"
PREV_TXID = "7b1eabe0209b1fe794124575ef807057c77ada2138ae4fa8d6c4de0398a14f3f"
BLOCK_HASH = "000000000000000000024bead8df69990852c202db0e0097c1a12ea637d7e96d"
P2WPKH = "0014e8df018c7e326cc253faac7e46cdc51e68542c42"
ADDRESS = "bc1qar0srrr7xfkvy5l643lydnw9re59gtzzwf5mdq"

SCRIPT_PUBKEY_V17 = {
    "asm": "0 e8df018c7e326cc253faac7e46cdc51e68542c42",
    "hex": P2WPKH,
    "reqSigs": 1,
    "type": "witness_v0_keyhash",
    "addresses": [ADDRESS],
}

SCRIPT_PUBKEY_V22 = {
    "asm": "0 e8df018c7e326cc253faac7e46cdc51e68542c42",
    "hex": P2WPKH,
    "address": ADDRESS,
    "type": "witness_v0_keyhash",
}

SCRIPT_PUBKEY_V23 = {**SCRIPT_PUBKEY_V22, "desc": f"addr({ADDRESS})#uyjndxcw"}

SPEND_INPUT = {
    "txid": PREV_TXID,
    "vout": 0,
    "scriptSig": {"asm": "", "hex": ""},
    "txinwitness": ["3044022000", "02aabb"],
    "sequence": 4294967293,
}

COINBASE_INPUT = {
    "coinbase": "03400d0c",
    "txinwitness": ["00" * 32],
    "sequence": 4294967295,
}

DECODED_V17 = {
    "txid": TXID,
    "hash": TXID,
    "version": 2,
    "size": 110,
    "vsize": 110,
    "weight": 440,
    "locktime": 0,
    "vin": [SPEND_INPUT],
    "vout": [{"value": Decimal("0.49998590"), "n": 0, "scriptPubKey": SCRIPT_PUBKEY_V17}],
}

DECODED_V22 = {
    **DECODED_V17,
    "vout": [{"value": Decimal("0.49998590"), "n": 0, "scriptPubKey": SCRIPT_PUBKEY_V22}],
}

DECODED_V23 = {
    **DECODED_V17,
    "vout": [{"value": Decimal("0.49998590"), "n": 0, "scriptPubKey": SCRIPT_PUBKEY_V23}],
}


class TestInputs:
    """Test suite for the two kinds of transaction input"""

    def test_spend_input(self):
        result = v17.TransactionInput.from_value(deepcopy(SPEND_INPUT)).to_model()

        assert isinstance(result, SpendInput)
        assert result.txid == bytes.fromhex(PREV_TXID)
        assert result.script_sig == b""
        assert result.witness == (bytes.fromhex("3044022000"), b"\x02\xaa\xbb")

    def test_coinbase_input(self):
        result = v17.TransactionInput.from_value(deepcopy(COINBASE_INPUT)).to_model()

        assert isinstance(result, CoinbaseInput)
        assert result.coinbase == bytes.fromhex("03400d0c")
        assert result.sequence == 4294967295

    def test_coinbase_with_spend_fields(self):
        data = {**deepcopy(COINBASE_INPUT), "txid": PREV_TXID}

        with pytest.raises(InconsistentFieldsError) as exc_info:
            v17.TransactionInput.from_value(data).to_model()

        assert exc_info.value.field == "coinbase"

    def test_incomplete_spend(self):
        data = deepcopy(SPEND_INPUT)
        del data["scriptSig"]

        with pytest.raises(InconsistentFieldsError) as exc_info:
            v17.TransactionInput.from_value(data).to_model()

        assert exc_info.value.field == "scriptSig"

    def test_bad_witness_item(self):
        data = deepcopy(SPEND_INPUT)
        data["txinwitness"] = ["00", "0g"]

        with pytest.raises(InvalidHexError) as exc_info:
            v17.TransactionInput.from_value(data).to_model()

        assert exc_info.value.field == "txinwitness[1]"


class TestDecodedTransactions:
    """Test suite for decoderawtransaction and getrawtransaction"""

    def test_decode_v17(self):
        result = v17.DecodeRawTransaction.from_value(deepcopy(DECODED_V17)).to_model()

        tx = result.transaction
        assert tx.txid == bytes.fromhex(TXID)
        assert tx.version == 2
        assert tx.outputs[0].value == 49_998_590
        assert tx.outputs[0].script_pubkey.type is ScriptType.WITNESS_V0_KEYHASH
        assert tx.outputs[0].script_pubkey.addresses == (ADDRESS,)
        assert tx.outputs[0].script_pubkey.required_signatures == 1
        assert tx.outputs[0].script_pubkey.descriptor is None

    def test_decode_v22(self):
        result = v22.DecodeRawTransaction.from_value(deepcopy(DECODED_V22)).to_model()

        script = result.transaction.outputs[0].script_pubkey
        assert script.address == ADDRESS
        assert script.addresses is None
        assert script.descriptor is None

    def test_decode_v23_reports_descriptor(self):
        result = v23.DecodeRawTransaction.from_value(deepcopy(DECODED_V23)).to_model()

        script = result.transaction.outputs[0].script_pubkey
        assert script.address == ADDRESS
        assert script.descriptor == f"addr({ADDRESS})#uyjndxcw"

    def test_v22_rejects_descriptor(self):
        with pytest.raises(MalformedResponseError) as exc_info:
            v22.DecodeRawTransaction.from_value(deepcopy(DECODED_V23))

        assert exc_info.value.fields == ["vout[0].scriptPubKey.desc"]

    def test_v23_requires_descriptor(self):
        with pytest.raises(MalformedResponseError) as exc_info:
            v23.DecodeRawTransaction.from_value(deepcopy(DECODED_V22))

        assert "vout[0].scriptPubKey.desc" in exc_info.value.fields

    def test_v22_rejects_v17_script(self):
        with pytest.raises(MalformedResponseError) as exc_info:
            v22.DecodeRawTransaction.from_value(deepcopy(DECODED_V17))

        assert "vout[0].scriptPubKey.reqSigs" in exc_info.value.fields

    def test_bad_input_names_its_path(self):
        data = deepcopy(DECODED_V17)
        data["vin"][0]["txid"] = "00"

        with pytest.raises(InvalidHexError) as exc_info:
            v17.DecodeRawTransaction.from_value(data).to_model()

        assert exc_info.value.field == "vin[0].txid"

    def test_bad_script_type_names_its_path(self):
        data = deepcopy(DECODED_V17)
        data["vout"][0]["scriptPubKey"]["type"] = "witness_v2_future"

        with pytest.raises(UnknownVariantError) as exc_info:
            v17.DecodeRawTransaction.from_value(data).to_model()

        assert exc_info.value.field == "vout[0].scriptPubKey.type"

    def test_get_raw_transaction_verbose(self):
        data = {
            **deepcopy(DECODED_V22),
            "hex": "02000000",
            "blockhash": BLOCK_HASH,
            "confirmations": 6,
            "time": 1700000000,
            "blocktime": 1700000000,
        }

        result = v22.GetRawTransactionVerbose.from_value(data).to_model()

        assert result.raw == bytes.fromhex("02000000")
        assert result.block_hash == bytes.fromhex(BLOCK_HASH)
        assert result.in_active_chain is None

    def test_get_raw_transaction_hex(self):
        assert v17.GetRawTransaction.from_value("0200").to_model().transaction == b"\x02\x00"

    def test_send_raw_transaction(self):
        assert v17.SendRawTransaction.from_value(TXID).to_model().txid == bytes.fromhex(TXID)


class TestMempoolAccept:
    """Test suite for testmempoolaccept"""

    def test_v17_rejection(self):
        data = [{"txid": TXID, "allowed": False, "reject-reason": "missing-inputs"}]

        result = v17.TestMempoolAccept.from_value(data).to_model()

        assert result.results[0].allowed is False
        assert result.results[0].reject_reason == "missing-inputs"
        assert result.results[0].wtxid is None

    def test_v21_acceptance(self):
        data = [{"txid": TXID, "wtxid": TXID, "allowed": True, "vsize": 110, "fees": {"base": "0.00001410"}}]

        result = v21.TestMempoolAccept.from_value(data).to_model()

        assert result.results[0].base_fee == 1410
        assert result.results[0].vsize == 110


class TestTxOut:
    """Test suite for gettxout"""

    def test_v17(self):
        data = {
            "bestblock": BLOCK_HASH,
            "confirmations": 10,
            "value": Decimal("0.25"),
            "scriptPubKey": deepcopy(SCRIPT_PUBKEY_V17),
            "coinbase": False,
        }

        result = v17_blockchain.GetTxOut.from_value(data).to_model()

        assert result.value == 25_000_000
        assert result.script_pubkey.script == bytes.fromhex(P2WPKH)

    def test_v22_script_shape(self):
        data = {
            "bestblock": BLOCK_HASH,
            "confirmations": 10,
            "value": Decimal("0.25"),
            "scriptPubKey": deepcopy(SCRIPT_PUBKEY_V22),
            "coinbase": True,
        }

        result = v22_blockchain.GetTxOut.from_value(data).to_model()

        assert result.script_pubkey.address == ADDRESS
        assert result.coinbase is True

    def test_v23_descriptor(self):
        data = {
            "bestblock": BLOCK_HASH,
            "confirmations": 10,
            "value": Decimal("0.25"),
            "scriptPubKey": deepcopy(SCRIPT_PUBKEY_V23),
            "coinbase": False,
        }

        result = v23_blockchain.GetTxOut.from_value(data).to_model()

        assert result.script_pubkey.descriptor.startswith("addr(")

    def test_v22_rejects_descriptor(self):
        data = {
            "bestblock": BLOCK_HASH,
            "confirmations": 10,
            "value": Decimal("0.25"),
            "scriptPubKey": deepcopy(SCRIPT_PUBKEY_V23),
            "coinbase": False,
        }

        with pytest.raises(MalformedResponseError) as exc_info:
            v22_blockchain.GetTxOut.from_value(data)

        assert exc_info.value.fields == ["scriptPubKey.desc"]


MULTISIG = "5121" + "02" + "11" * 32 + "51ae"
P2SH_ADDRESS = "3P14159f73E4gFr7JterCCQh9QjiTjiZrG"
P2SH_SEGWIT = "3QJmV3qfvL9SuYo34YihAf3sRCW3qSinyC"
P2WSH_ADDRESS = "bc1qrp33g0q5c5txsp9arysrx4k6zdkfs4nce4xj0gdcccefvpysxf3qccfmv3"
P2WSH = "0020" + "18" * 32


class TestDecodeScript:
    """Test suite for decodescript across the scriptPubKey reshapes"""

    def test_v17(self):
        data = {
            "asm": "1 0211 1 OP_CHECKMULTISIG",
            "reqSigs": 1,
            "type": "multisig",
            "addresses": [P2SH_ADDRESS],
            "p2sh": P2SH_ADDRESS,
            "segwit": {
                "asm": "0 1818",
                "hex": P2WSH,
                "reqSigs": 1,
                "type": "witness_v0_scripthash",
                "addresses": [P2WSH_ADDRESS],
                "p2sh-segwit": P2SH_SEGWIT,
            },
        }

        result = v17.DecodeScript.from_value(data).to_model()

        assert result.type is ScriptType.MULTISIG
        assert result.required_signatures == 1
        assert result.p2sh == P2SH_ADDRESS
        assert result.segwit.script == bytes.fromhex(P2WSH)
        assert result.segwit.p2sh_segwit == P2SH_SEGWIT
        assert result.descriptor is None

    def test_nulldata_has_no_wrapping(self):
        result = v17.DecodeScript.from_value({"asm": "OP_RETURN 00", "type": "nulldata"}).to_model()

        assert result.p2sh is None
        assert result.segwit is None

    def test_v22_single_address(self):
        data = {
            "asm": "0 1818",
            "address": P2WSH_ADDRESS,
            "type": "witness_v0_scripthash",
            "p2sh": P2SH_ADDRESS,
        }

        result = v22.DecodeScript.from_value(data).to_model()

        assert result.address == P2WSH_ADDRESS
        assert result.addresses is None

    def test_v23_descriptor_on_both_levels(self):
        data = {
            "asm": "1 0211 1 OP_CHECKMULTISIG",
            "desc": "multi(1,0211)#abcdefgh",
            "type": "multisig",
            "p2sh": P2SH_ADDRESS,
            "segwit": {
                "asm": "0 1818",
                "desc": "addr(bc1q)#abcdefgh",
                "hex": P2WSH,
                "address": P2WSH_ADDRESS,
                "type": "witness_v0_scripthash",
                "p2sh-segwit": P2SH_SEGWIT,
            },
        }

        result = v23.DecodeScript.from_value(data).to_model()

        assert result.descriptor == "multi(1,0211)#abcdefgh"
        assert result.segwit.descriptor == "addr(bc1q)#abcdefgh"

    def test_v23_segwit_without_descriptor(self):
        data = {
            "asm": "OP_TRUE",
            "desc": "raw(51)#abcdefgh",
            "type": "nonstandard",
            "segwit": {"asm": "0 1818", "hex": P2WSH, "type": "witness_v0_scripthash"},
        }

        with pytest.raises(MalformedResponseError) as exc_info:
            v23.DecodeScript.from_value(data)

        assert exc_info.value.fields == ["segwit.desc"]

    def test_bad_segwit_hex_names_its_path(self):
        data = {
            "asm": "OP_TRUE",
            "type": "nonstandard",
            "segwit": {"asm": "", "hex": "zz", "type": "witness_v0_scripthash"},
        }

        with pytest.raises(InvalidHexError) as exc_info:
            v17.DecodeScript.from_value(data).to_model()

        assert exc_info.value.field == "segwit.hex"


class TestFundingAndSigning:
    """Test suite for fundrawtransaction and signrawtransactionwithkey"""

    def test_fund(self):
        data = {"hex": "02000000", "fee": Decimal("0.00000141"), "changepos": -1}

        result = v17.FundRawTransaction.from_value(data).to_model()

        assert result.transaction == bytes.fromhex("02000000")
        assert result.fee == 141
        assert result.change_position == -1

    def test_signed(self):
        result = v17.SignRawTransactionWithKey.from_value({"hex": "0200", "complete": True}).to_model()

        assert result.complete is True
        assert result.errors == ()

    def test_signing_errors(self):
        data = {
            "hex": "0200",
            "complete": False,
            "errors": [{
                "txid": PREV_TXID,
                "vout": 1,
                "witness": [],
                "scriptSig": "",
                "sequence": 4294967295,
                "error": "Input not found or already spent",
            }],
        }

        result = v17.SignRawTransactionWithKey.from_value(data).to_model()

        error = result.errors[0]
        assert error.txid == bytes.fromhex(PREV_TXID)
        assert error.witness == ()
        assert error.error.startswith("Input not found")

    def test_signing_error_path(self):
        data = {
            "hex": "0200",
            "complete": False,
            "errors": [{"txid": "00", "vout": 1, "scriptSig": "", "sequence": 0, "error": "x"}],
        }

        with pytest.raises(InvalidHexError) as exc_info:
            v17.SignRawTransactionWithKey.from_value(data).to_model()

        assert exc_info.value.field == "errors[0].txid"

    def test_combine(self):
        assert v17.CombineRawTransaction.from_value("0200").to_model().transaction == b"\x02\x00"


class TestPsbt:
    """Test suite for the PSBT family"""

    def test_base64_results(self):
        assert v17.CreatePsbt.from_value("cHNidP8=").to_model().psbt == b"psbt\xff"
        assert v17.CombinePsbt.from_value("cHNidP8=").to_model().psbt == b"psbt\xff"
        assert v17.ConvertToPsbt.from_value("cHNidP8=").to_model().psbt == b"psbt\xff"
        assert v18.JoinPsbts.from_value("cHNidP8=").to_model().psbt == b"psbt\xff"
        assert v18.UtxoUpdatePsbt.from_value("cHNidP8=").to_model().psbt == b"psbt\xff"

    def test_invalid_base64(self):
        with pytest.raises(ConversionError) as exc_info:
            v17.CreatePsbt.from_value("not base64!").to_model()

        assert exc_info.value.field == "psbt"

    def test_finalize_extracted(self):
        result = v17.FinalizePsbt.from_value({"hex": "0200", "complete": True}).to_model()

        assert result.transaction == b"\x02\x00"
        assert result.psbt is None

    def test_finalize_incomplete(self):
        result = v17.FinalizePsbt.from_value({"psbt": "cHNidP8=", "complete": False}).to_model()

        assert result.psbt == b"psbt\xff"
        assert result.transaction is None

    def test_analyze(self):
        data = {
            "inputs": [
                {"has_utxo": True, "is_final": True, "next": "extractor"},
                {
                    "has_utxo": True,
                    "is_final": False,
                    "missing": {"signatures": ["e8df018c7e326cc253faac7e46cdc51e68542c42"]},
                    "next": "signer",
                },
            ],
            "estimated_vsize": 208,
            "estimated_feerate": Decimal("0.00010000"),
            "fee": Decimal("0.00002080"),
            "next": "signer",
        }

        result = v18.AnalyzePsbt.from_value(data).to_model()

        assert result.inputs[0].missing is None
        key_id = bytes.fromhex("e8df018c7e326cc253faac7e46cdc51e68542c42")
        assert result.inputs[1].missing.signatures == (key_id,)
        assert result.inputs[1].missing.pubkeys == ()
        assert result.estimated_fee_rate == 10_000
        assert result.fee == 2080
        assert result.error is None

    def test_analyze_invalid(self):
        data = {"inputs": [], "next": "creator", "error": "PSBT is not valid. Input 0 spends unspendable output"}

        result = v18.AnalyzePsbt.from_value(data).to_model()

        assert result.error.startswith("PSBT is not valid")
        assert result.fee is None

    def test_analyze_missing_path(self):
        data = {
            "inputs": [{"has_utxo": False, "is_final": False, "missing": {"pubkeys": ["zz"]}, "next": "updater"}],
            "next": "updater",
        }

        with pytest.raises(InvalidHexError) as exc_info:
            v18.AnalyzePsbt.from_value(data).to_model()

        assert exc_info.value.field == "inputs[0].missing.pubkeys[0]"
