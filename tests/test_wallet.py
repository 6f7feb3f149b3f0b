# tests/test_wallet.py

"""Tests for the wallet wire types

Covers the balance family, getwalletinfo growth across versions, wallet
transactions with their signed amounts and the wallet lifecycle results.
"""

from copy import deepcopy
from decimal import Decimal

import pytest

from btcrpc.core.exceptions import InvalidAmountError, MalformedResponseError, UnknownVariantError
from btcrpc.models.primitives import (
    AddressPurpose,
    Amount,
    Bip125Replaceable,
    ModelBase,
    ScriptType,
    TransactionCategory,
)
from btcrpc.schemas.base import WireAmount, WireModel
from btcrpc.schemas.v17 import wallet as v17
from btcrpc.schemas.v18 import wallet as v18
from btcrpc.schemas.v19 import wallet as v19
from btcrpc.schemas.v20 import wallet as v20
from btcrpc.schemas.v21 import wallet as v21
from btcrpc.schemas.v25 import wallet as v25
from btcrpc.schemas.v26 import wallet as v26
from btcrpc.utils import convert


TXID = "a1075db55d416d3ca199f55b6084e2115b9345e16c5cf302fc80e9d5fbf5d48d"
BLOCK_HASH = "000000000000000000024bead8df69990852c202db0e0097c1a12ea637d7e96d"
ADDRESS = "bc1qar0srrr7xfkvy5l643lydnw9re59gtzzwf5mdq"

WALLET_INFO_V17 = {
    "walletname": "main",
    "walletversion": 169900,
    "balance": Decimal("1.50000000"),
    "unconfirmed_balance": Decimal("0E-8"),
    "immature_balance": Decimal("0E-8"),
    "txcount": 4,
    "keypoololdest": 1700000000,
    "keypoolsize": 1000,
    "keypoolsize_hd_internal": 1000,
    "paytxfee": Decimal("0E-8"),
    "hdseedid": "11" * 20,
    "private_keys_enabled": True,
}

TRANSACTION_V17 = {
    "amount": Decimal("-0.50000000"),
    "fee": Decimal("-0.00001410"),
    "confirmations": 3,
    "blockhash": BLOCK_HASH,
    "blockindex": 7,
    "blocktime": 1700000000,
    "txid": TXID,
    "walletconflicts": [],
    "time": 1699999000,
    "timereceived": 1699999000,
    "bip125-replaceable": "no",
    "details": [
        {
            "address": ADDRESS,
            "category": "send",
            "amount": Decimal("-0.50000000"),
            "label": "",
            "vout": 0,
            "fee": Decimal("-0.00001410"),
            "abandoned": False,
        }
    ],
    "hex": "0200000000010000000000",
}

UNSPENT_V17 = [
    {
        "txid": TXID,
        "vout": 1,
        "address": ADDRESS,
        "label": "",
        "scriptPubKey": "0014e8df018c7e326cc253faac7e46cdc51e68542c42",
        "amount": Decimal("0.25000000"),
        "confirmations": 12,
        "spendable": True,
        "solvable": True,
        "desc": "wpkh([d34db33f/84'/0'/0'/0/1]03a34b99f22c790c4e36b2b3c2c35a36db06226e41c692fc82b8b56ac1c540c5bd)#8fhd9pwu",
        "safe": True,
    }
]


class Balances(WireModel):
    """Two-amount object used to exercise WireAmount parsing"""

    confirmed: WireAmount
    unconfirmed: WireAmount

    def to_model(self) -> "BalancesModel":
        return BalancesModel(
            confirmed=convert.amount(self.confirmed, "confirmed"),
            unconfirmed=convert.amount(self.unconfirmed, "unconfirmed"),
        )


class BalancesModel(ModelBase):
    confirmed: Amount
    unconfirmed: Amount


class TestBalances:
    """Test suite for balance results"""

    def test_string_amounts(self):
        result = Balances.from_json('{"confirmed": "1.23", "unconfirmed": "0.00"}').to_model()

        assert result.confirmed == 123_000_000
        assert result.unconfirmed == 0

    def test_number_and_string_are_equivalent(self):
        as_number = Balances.from_json('{"confirmed": 1.23, "unconfirmed": 0}').to_model()
        as_string = Balances.from_json('{"confirmed": "1.23", "unconfirmed": "0"}').to_model()

        assert as_number == as_string

    def test_boolean_amount_is_malformed(self):
        with pytest.raises(MalformedResponseError) as exc_info:
            Balances.from_json('{"confirmed": true, "unconfirmed": 0}')

        assert exc_info.value.fields == ["confirmed"]

    def test_get_balance_may_be_negative(self):
        assert v17.GetBalance.from_json("-0.10000000").to_model().balance == -10_000_000

    def test_unconfirmed_balance_may_not(self):
        with pytest.raises(InvalidAmountError) as exc_info:
            v17.GetUnconfirmedBalance.from_json("-0.1").to_model()

        assert exc_info.value.field == "balance"

    def test_received_by_address(self):
        assert v17.GetReceivedByAddress.from_json("0.25").to_model().amount == 25_000_000

    @pytest.mark.parametrize("raw", ['"1e999999"', "1e999999"])
    def test_received_by_address_huge_exponent(self, raw):
        with pytest.raises(InvalidAmountError) as exc_info:
            v17.GetReceivedByAddress.from_json(raw).to_model()

        assert exc_info.value.field == "amount"

    @pytest.mark.parametrize("raw", ['"1.000000000000000000000000000001"', '"1e-999999999"'])
    def test_received_by_address_hidden_sub_satoshi(self, raw):
        with pytest.raises(InvalidAmountError):
            v17.GetReceivedByAddress.from_json(raw).to_model()

    def test_get_balances_v19(self):
        data = {"mine": {"trusted": Decimal("1.0"), "untrusted_pending": 0, "immature": Decimal("0.5")}}

        result = v19.GetBalances.from_value(data).to_model()

        assert result.mine.trusted == 100_000_000
        assert result.mine.immature == 50_000_000
        assert result.mine.used is None
        assert result.watch_only is None
        assert result.last_processed_block is None

    def test_get_balances_watch_only(self):
        data = {
            "mine": {"trusted": 0, "untrusted_pending": 0, "immature": 0, "used": Decimal("0.1")},
            "watchonly": {"trusted": Decimal("2"), "untrusted_pending": 0, "immature": 0},
        }

        result = v19.GetBalances.from_value(data).to_model()

        assert result.mine.used == 10_000_000
        assert result.watch_only.trusted == 200_000_000

    def test_get_balances_bad_nested_amount(self):
        data = {"mine": {"trusted": "x", "untrusted_pending": 0, "immature": 0}}

        with pytest.raises(InvalidAmountError) as exc_info:
            v19.GetBalances.from_value(data).to_model()

        assert exc_info.value.field == "mine.trusted"

    def test_get_balances_v26_requires_last_processed_block(self):
        data = {"mine": {"trusted": 0, "untrusted_pending": 0, "immature": 0}}

        with pytest.raises(MalformedResponseError):
            v26.GetBalances.from_value(dict(data))

        result = v26.GetBalances.from_value(
            {**data, "lastprocessedblock": {"hash": BLOCK_HASH, "height": 800000}}
        ).to_model()

        assert result.last_processed_block.height == 800000
        assert result.last_processed_block.hash == bytes.fromhex(BLOCK_HASH)


class TestWalletInfo:
    """Test suite for getwalletinfo across versions"""

    def test_v17(self):
        result = v17.GetWalletInfo.from_value(dict(WALLET_INFO_V17)).to_model()

        assert result.wallet_name == "main"
        assert result.balance == 150_000_000
        assert result.hd_seed_id == b"\x11" * 20
        assert result.scanning is None
        assert result.avoid_reuse is None
        assert result.descriptors is None

    def test_v19_not_scanning(self):
        data = {**WALLET_INFO_V17, "avoid_reuse": False, "scanning": False}

        result = v19.GetWalletInfo.from_value(data).to_model()

        assert result.scanning is False
        assert result.avoid_reuse is False

    def test_v19_scanning(self):
        data = {**WALLET_INFO_V17, "avoid_reuse": False, "scanning": {"duration": 12, "progress": Decimal("0.25")}}

        result = v19.GetWalletInfo.from_value(data).to_model()

        assert result.scanning.duration == 12
        assert result.scanning.progress == pytest.approx(0.25)

    def test_v19_rejects_scanning_true(self):
        data = {**WALLET_INFO_V17, "avoid_reuse": False, "scanning": True}

        with pytest.raises(MalformedResponseError):
            v19.GetWalletInfo.from_value(data)

    def test_v21_descriptor_wallet(self):
        data = {**WALLET_INFO_V17, "avoid_reuse": False, "scanning": False, "descriptors": True}
        del data["keypoololdest"]
        del data["hdseedid"]

        result = v21.GetWalletInfo.from_value(data).to_model()

        assert result.descriptors is True
        assert result.keypool_oldest is None
        assert result.hd_seed_id is None

    def test_v21_field_unknown_to_v17(self):
        data = {**WALLET_INFO_V17, "descriptors": True}

        with pytest.raises(MalformedResponseError) as exc_info:
            v17.GetWalletInfo.from_value(data)

        assert exc_info.value.fields == ["descriptors"]


class TestTransactions:
    """Test suite for gettransaction and listtransactions"""

    def test_get_transaction(self):
        result = v17.GetTransaction.from_value(deepcopy(TRANSACTION_V17)).to_model()

        assert result.amount == -50_000_000
        assert result.fee == -1410
        assert result.txid == bytes.fromhex(TXID)
        assert result.bip125_replaceable is Bip125Replaceable.NO
        assert result.block_height is None
        assert result.details[0].category is TransactionCategory.SEND
        assert result.details[0].amount == -50_000_000
        assert result.transaction == bytes.fromhex("0200000000010000000000")

    def test_unknown_replaceability(self):
        data = deepcopy(TRANSACTION_V17)
        data["bip125-replaceable"] = "maybe"

        with pytest.raises(UnknownVariantError) as exc_info:
            v17.GetTransaction.from_value(data).to_model()

        assert exc_info.value.field == "bip125-replaceable"
        assert exc_info.value.value == "maybe"

    def test_block_height_from_v20(self):
        data = {**deepcopy(TRANSACTION_V17), "blockheight": 800000}

        with pytest.raises(MalformedResponseError):
            v17.GetTransaction.from_value(deepcopy(data))

        assert v20.GetTransaction.from_value(data).to_model().block_height == 800000

    def test_metadata_fields(self):
        data = {**deepcopy(TRANSACTION_V17), "comment": "rent", "to": "landlord", "replaced_by_txid": "ab" * 32}

        result = v17.GetTransaction.from_value(data).to_model()

        assert result.comment == "rent"
        assert result.comment_to == "landlord"
        assert result.replaced_by_txid == b"\xab" * 32

    def test_bad_detail_names_its_index(self):
        data = deepcopy(TRANSACTION_V17)
        data["details"][0]["category"] = "bribe"

        with pytest.raises(UnknownVariantError) as exc_info:
            v17.GetTransaction.from_value(data).to_model()

        assert exc_info.value.field == "details[0].category"

    def test_list_transactions(self):
        item = {
            key: value for key, value in TRANSACTION_V17.items() if key not in ("details", "hex")
        }
        item.update(address=ADDRESS, category="receive", amount=Decimal("0.5"), vout=1, blockheight=800000)
        del item["fee"]

        result = v20.ListTransactions.from_value([item]).to_model()

        assert len(result.transactions) == 1
        assert result.transactions[0].amount == 50_000_000
        assert result.transactions[0].fee is None
        assert result.transactions[0].block_height == 800000


class TestUnspentAndSending:
    """Test suite for listunspent and the send family"""

    def test_list_unspent(self):
        result = v17.ListUnspent.from_value(deepcopy(UNSPENT_V17)).to_model()

        output = result.outputs[0]
        assert output.amount == 25_000_000
        assert output.script_pubkey[:2] == b"\x00\x14"
        assert output.descriptor.startswith("wpkh(")
        assert output.redeem_script is None

    def test_send_to_address(self):
        assert v17.SendToAddress.from_value(TXID).to_model().txid == bytes.fromhex(TXID)

    def test_bump_fee(self):
        data = {"txid": TXID, "origfee": Decimal("0.00001410"), "fee": Decimal("0.00002820"), "errors": []}

        result = v17.BumpFee.from_value(data).to_model()

        assert result.original_fee == 1410
        assert result.fee == 2820
        assert result.errors == ()


class TestWalletLifecycle:
    """Test suite for create/load/unload wallet results"""

    def test_empty_warning_means_none(self):
        result = v17.CreateWallet.from_value({"name": "w", "warning": ""}).to_model()

        assert result.warnings == ()

    def test_single_warning(self):
        result = v17.LoadWallet.from_value({"name": "w", "warning": "careful"}).to_model()

        assert result.warnings == ("careful",)

    def test_v25_prefers_warnings_array(self):
        data = {"name": "w", "warning": "first", "warnings": ["first", "second"]}

        result = v25.CreateWallet.from_value(data).to_model()

        assert result.warnings == ("first", "second")

    def test_v25_without_warnings(self):
        assert v25.LoadWallet.from_value({"name": "w"}).to_model().warnings == ()
        assert v25.UnloadWallet.from_value({}).to_model().warnings == ()

    def test_list_wallets(self):
        assert v17.ListWallets.from_value(["", "cold"]).to_model().wallets == ("", "cold")

    def test_list_wallet_dir(self):
        result = v18.ListWalletDir.from_value({"wallets": [{"name": ""}, {"name": "cold"}]}).to_model()

        assert [wallet.name for wallet in result.wallets] == ["", "cold"]


LIST_ITEM_V17 = {
    **{key: value for key, value in TRANSACTION_V17.items() if key not in ("details", "hex", "fee")},
    "address": ADDRESS,
    "category": "receive",
    "amount": Decimal("0.5"),
    "label": "",
    "vout": 1,
}

ADDRESS_INFO_V17 = {
    "address": ADDRESS,
    "scriptPubKey": "0014e8df018c7e326cc253faac7e46cdc51e68542c42",
    "ismine": True,
    "iswatchonly": False,
    "isscript": False,
    "iswitness": True,
    "witness_version": 0,
    "witness_program": "e8df018c7e326cc253faac7e46cdc51e68542c42",
    "pubkey": "03a34b99f22c790c4e36b2b3c2c35a36db06226e41c692fc82b8b56ac1c540c5bd",
    "label": "rent",
    "timestamp": 1700000000,
    "hdkeypath": "m/0'/0'/1'",
    "hdseedid": "11" * 20,
    "hdmasterkeyid": "11" * 20,
    "labels": [{"name": "rent", "purpose": "receive"}],
}


class TestAddressesAndLabels:
    """Test suite for address book, address info and received-by results"""

    def test_address_info_v17(self):
        result = v17.GetAddressInfo.from_value(deepcopy(ADDRESS_INFO_V17)).to_model()

        assert result.is_mine is True
        assert result.witness_version == 0
        assert result.hd_master_key_id == b"\x11" * 20
        assert result.hd_master_fingerprint is None
        assert result.labels[0].name == "rent"
        assert result.labels[0].purpose is AddressPurpose.RECEIVE

    def test_address_info_plain_labels(self):
        data = {
            key: value for key, value in ADDRESS_INFO_V17.items()
            if key not in ("label", "hdmasterkeyid")
        }
        data.update(
            solvable=True, desc="wpkh([d34db33f/0'/0'/1']03a3)#x", ischange=False,
            hdmasterfingerprint="d34db33f", labels=["rent"],
        )

        result = v17.GetAddressInfo.from_value(data).to_model()

        assert result.labels[0].purpose is None
        assert result.hd_master_fingerprint == bytes.fromhex("d34db33f")
        assert result.descriptor.startswith("wpkh(")

    def test_address_info_script(self):
        data = deepcopy(ADDRESS_INFO_V17)
        data.update(isscript=True, script="multisig", hex="51ae", sigsrequired=1, pubkeys=["02aa"])

        result = v17.GetAddressInfo.from_value(data).to_model()

        assert result.script is ScriptType.MULTISIG
        assert result.pubkeys == (b"\x02\xaa",)

    def test_address_info_unknown_purpose(self):
        data = deepcopy(ADDRESS_INFO_V17)
        data["labels"][0]["purpose"] = "gift"

        with pytest.raises(UnknownVariantError) as exc_info:
            v17.GetAddressInfo.from_value(data).to_model()

        assert exc_info.value.field == "labels[0].purpose"

    def test_addresses_by_label(self):
        result = v17.GetAddressesByLabel.from_value({ADDRESS: {"purpose": "receive"}}).to_model()

        assert result.addresses == {ADDRESS: AddressPurpose.RECEIVE}

    def test_received_by_label(self):
        assert v17.GetReceivedByLabel.from_value(Decimal("0.1")).to_model().amount == 10_000_000

    def test_list_labels(self):
        assert v17.ListLabels.from_value(["", "rent"]).to_model().labels == ("", "rent")

    def test_address_groupings(self):
        data = [[[ADDRESS, Decimal("0.25"), "rent"], ["bc1qother", Decimal("0")]]]

        result = v17.ListAddressGroupings.from_value(data).to_model()

        first, second = result.groupings[0]
        assert first.amount == 25_000_000
        assert first.label == "rent"
        assert second.label is None

    def test_address_grouping_bad_amount(self):
        data = [[[ADDRESS, Decimal("0.000000001")]]]

        with pytest.raises(InvalidAmountError) as exc_info:
            v17.ListAddressGroupings.from_value(data).to_model()

        assert exc_info.value.field == "groupings[0].addresses[0].amount"

    def test_list_received_by_address(self):
        data = [{
            "address": ADDRESS,
            "amount": Decimal("0.5"),
            "confirmations": 3,
            "label": "",
            "txids": [TXID],
        }]

        result = v17.ListReceivedByAddress.from_value(data).to_model()

        assert result.entries[0].amount == 50_000_000
        assert result.entries[0].txids == (bytes.fromhex(TXID),)
        assert result.entries[0].involves_watch_only is None

    def test_list_received_by_label(self):
        data = [{"involvesWatchonly": True, "amount": Decimal("0.5"), "confirmations": 3, "label": "rent"}]

        result = v17.ListReceivedByLabel.from_value(data).to_model()

        assert result.entries[0].involves_watch_only is True

    def test_sign_message(self):
        result = v17.SignMessage.from_value("cHNidP8=").to_model()

        assert result.signature == b"psbt\xff"

    def test_multisig_address_v20(self):
        data = {"address": "3P14159f73E4gFr7JterCCQh9QjiTjiZrG", "redeemScript": "51ae", "descriptor": "sh(x)#y"}

        result = v20.AddMultisigAddress.from_value(data).to_model()

        assert result.redeem_script == b"\x51\xae"
        assert result.descriptor == "sh(x)#y"

        with pytest.raises(MalformedResponseError):
            v17.AddMultisigAddress.from_value(data)


class TestCoinsAndHistory:
    """Test suite for locked coins, listsinceblock and rescans"""

    def test_list_lock_unspent(self):
        result = v17.ListLockUnspent.from_value([{"txid": TXID, "vout": 2}]).to_model()

        assert result.outputs[0].vout == 2

    def test_list_since_block(self):
        data = {"transactions": [deepcopy(LIST_ITEM_V17)], "lastblock": BLOCK_HASH}

        result = v17.ListSinceBlock.from_value(data).to_model()

        assert result.transactions[0].category is TransactionCategory.RECEIVE
        assert result.removed is None
        assert result.last_block == bytes.fromhex(BLOCK_HASH)

    def test_list_since_block_v20_removed(self):
        item = {**deepcopy(LIST_ITEM_V17), "blockheight": 800000}
        data = {"transactions": [item], "removed": [deepcopy(item)], "lastblock": BLOCK_HASH}

        result = v20.ListSinceBlock.from_value(data).to_model()

        assert result.transactions[0].block_height == 800000
        assert result.removed[0].block_height == 800000

    def test_list_since_block_bad_removed_item(self):
        item = deepcopy(LIST_ITEM_V17)
        item["category"] = "bribe"
        data = {"transactions": [], "removed": [item], "lastblock": BLOCK_HASH}

        with pytest.raises(UnknownVariantError) as exc_info:
            v17.ListSinceBlock.from_value(data).to_model()

        assert exc_info.value.field == "removed[0].category"

    def test_rescan(self):
        result = v17.RescanBlockchain.from_value({"start_height": 0, "stop_height": 800000}).to_model()

        assert result.stop_height == 800000

    def test_import_multi_is_wire_only(self):
        wire = v17.ImportMulti.from_value([
            {"success": True},
            {"success": False, "error": {"code": -5, "message": "Invalid address"}},
        ])

        assert wire.root[1].error.code == -5
        assert not hasattr(wire, "to_model")


class TestPsbtAndSigning:
    """Test suite for the wallet PSBT and signing results"""

    def test_wallet_create_funded_psbt(self):
        data = {"psbt": "cHNidP8=", "fee": Decimal("0.00000141"), "changepos": 1}

        result = v17.WalletCreateFundedPsbt.from_value(data).to_model()

        assert result.psbt == b"psbt\xff"
        assert result.fee == 141
        assert result.change_position == 1

    def test_wallet_process_psbt(self):
        result = v17.WalletProcessPsbt.from_value({"psbt": "cHNidP8=", "complete": False}).to_model()

        assert result.complete is False
        assert result.transaction is None

    def test_wallet_process_psbt_v26_extracts(self):
        data = {"psbt": "cHNidP8=", "complete": True, "hex": "0200"}

        with pytest.raises(MalformedResponseError):
            v17.WalletProcessPsbt.from_value(data)

        assert v26.WalletProcessPsbt.from_value(data).to_model().transaction == b"\x02\x00"

    def test_sign_with_wallet(self):
        data = {"hex": "0200", "complete": True}

        result = v17.SignRawTransactionWithWallet.from_value(data).to_model()

        assert type(result).__name__ == "SignRawTransactionWithWallet"
        assert result.errors == ()
