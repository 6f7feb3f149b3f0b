# tests/test_versions.py

"""Tests for the per-version method tables and the version resolver

Checks that every table accounts for its parent's methods, that unchanged
methods resolve to the identical wire class, and that versions are
normalized and resolved the same way the client does it.
"""

import pytest

from btcrpc.core.exceptions import MethodTableError, UnsupportedMethodError, UnsupportedVersionError
from btcrpc.schemas.v17 import blockchain as v17_blockchain
from btcrpc.schemas.v19 import wallet as v19_wallet
from btcrpc.schemas.v23 import blockchain as v23_blockchain
from btcrpc.services import resolver
from btcrpc.versions import v17, v18, v19, v20, v22, v23, v24, v26
from btcrpc.versions.registry import MethodSpec, MethodTable


METHOD_COUNTS = {17: 122, 18: 130, 19: 132, 20: 133, 21: 138, 22: 138, 23: 139, 24: 139, 25: 139, 26: 140}


@pytest.fixture
def small_table():
    """Two-method table to derive from"""
    return MethodTable(1, [MethodSpec("first", "first", str), MethodSpec("second", "second", int)])


class TestMethodTables:
    """Test suite for table derivation"""

    @pytest.mark.parametrize("version,count", sorted(METHOD_COUNTS.items()))
    def test_method_counts(self, version, count):
        table = resolver.method_table(version)

        assert table.version == version
        assert len(table) == count

    def test_every_version_keeps_every_method(self):
        previous = None
        for version in resolver.SUPPORTED_VERSIONS:
            names = set(resolver.method_table(version))
            if previous is not None:
                assert previous <= names, f"v{version} lost {sorted(previous - names)}"
            previous = names

    def test_inherited_method_is_the_same_object(self):
        assert v20.METHODS["get_balances"] is v19.METHODS["get_balances"]
        assert v24.METHODS["get_blockchain_info"] is v23.METHODS["get_blockchain_info"]

    def test_overridden_method_is_replaced(self):
        assert v19.METHODS["get_blockchain_info"] is not v18.METHODS["get_blockchain_info"]

    def test_script_descriptor_starts_in_v23(self):
        for name in ("decode_raw_transaction", "decode_script", "get_raw_transaction_verbose", "get_tx_out"):
            assert v23.METHODS[name] is not v22.METHODS[name], name

    def test_multisig_descriptor_starts_in_v20(self):
        assert v20.METHODS["create_multisig"] is not v19.METHODS["create_multisig"]
        assert v20.METHODS["add_multisig_address"] is not v19.METHODS["add_multisig_address"]

    def test_nullable_results(self):
        assert v17.METHODS["submit_block"].nullable
        assert not v17.METHODS["get_block_template"].nullable

    def test_fixed_verbosity(self):
        assert v17.METHODS["get_block_verbose_zero"].fixed == {"verbosity": 0}
        assert v17.METHODS["get_block_verbose_one"].fixed == {"verbosity": 1}

    def test_derive_requires_every_parent_method(self, small_table):
        with pytest.raises(MethodTableError) as exc_info:
            small_table.derive(2, inherit=["first"])

        assert exc_info.value.details["not accounted for"] == ["second"]

    def test_derive_rejects_doubles(self, small_table):
        with pytest.raises(MethodTableError) as exc_info:
            small_table.derive(2, inherit=["first", "second"], override=[MethodSpec("first", "first", bytes)])

        assert exc_info.value.details["declared more than once"] == ["first"]

    def test_derive_rejects_unknown_names(self, small_table):
        with pytest.raises(MethodTableError) as exc_info:
            small_table.derive(2, inherit=["first", "second"], drop=["third"])

        assert exc_info.value.details["not in the parent table"] == ["third"]

    def test_derive_rejects_clashing_additions(self, small_table):
        with pytest.raises(MethodTableError) as exc_info:
            small_table.derive(2, inherit=["first", "second"], add=[MethodSpec("first", "first", str)])

        assert "added but already present" in exc_info.value.details

    def test_derive_drop_and_add(self, small_table):
        derived = small_table.derive(
            2, inherit=["first"], drop=["second"], add=[MethodSpec("third", "third", bool)]
        )

        assert list(derived) == ["first", "third"]
        assert derived["first"] is small_table["first"]

    def test_duplicate_names_in_one_table(self):
        with pytest.raises(MethodTableError):
            MethodTable(1, [MethodSpec("same", "a", str), MethodSpec("same", "b", str)])


class TestVersionModules:
    """Test suite for wire type lookup on the version modules"""

    def test_wire_types_are_shared_across_versions(self):
        assert v19.GetBalances is v20.GetBalances
        assert v20.GetBalances is v19_wallet.GetBalances

    def test_method_missing_from_version(self):
        with pytest.raises(AttributeError):
            v18.GetBalances

    def test_replaced_wire_type(self):
        assert v17.GetBlockchainInfo is v17_blockchain.GetBlockchainInfo
        assert v24.GetBlockchainInfo is v23_blockchain.GetBlockchainInfo
        assert v26.GetBalances is not v19.GetBalances

    def test_dir_lists_wire_types(self):
        assert "GetBalances" in dir(v19)
        assert "GetBalances" not in dir(v18)


class TestMethodSpec:
    """Test suite for the introspection properties of a method"""

    def test_returns(self):
        assert v17.METHODS["get_blockchain_info"].returns == "version + model"
        assert v17.METHODS["get_memory_info"].returns == "version"
        assert v17.METHODS["stop"].returns == "returns str"
        assert v17.METHODS["save_mempool"].returns == "returns nothing"

    def test_model(self):
        spec = v17.METHODS["get_blockchain_info"]

        assert spec.model.__name__ == "GetBlockchainInfo"
        assert spec.model.__module__ == "btcrpc.models.blockchain"
        assert v17.METHODS["get_memory_info"].model is None

    def test_rows_are_sorted_by_rpc(self):
        rows = v26.METHODS.rows()

        assert [row.rpc for row in rows] == sorted(row.rpc for row in rows)
        assert len(rows) == len(v26.METHODS)


class TestResolver:
    """Test suite for version normalization and method lookup"""

    @pytest.mark.parametrize("given,expected", [
        (17, 17),
        (26, 26),
        (170100, 17),
        (260000, 26),
        ("v0.17.1", 17),
        ("0.21", 21),
        ("26.0", 26),
        ("v24", 24),
    ])
    def test_normalize(self, given, expected):
        assert resolver.normalize_version(given) == expected

    @pytest.mark.parametrize("given", [16, 27, 160000, "0.16.3", "abc", "", True, None, 17.0])
    def test_unsupported(self, given):
        with pytest.raises(UnsupportedVersionError) as exc_info:
            resolver.normalize_version(given)

        assert exc_info.value.supported == resolver.SUPPORTED_VERSIONS

    def test_resolve(self):
        spec = resolver.resolve("v0.19", "get_balances")

        assert spec.rpc == "getbalances"
        assert resolver.wire_type(19, "get_balances") is v19_wallet.GetBalances

    def test_resolve_missing_method(self):
        with pytest.raises(UnsupportedMethodError) as exc_info:
            resolver.resolve(18, "get_balances")

        assert exc_info.value.method == "get_balances"
        assert exc_info.value.version == 18

    def test_resolve_rpc_with_several_wrappers(self):
        names = {spec.name for spec in resolver.resolve_rpc(26, "getblock")}

        assert names == {"get_block_verbose_zero", "get_block_verbose_one"}

    def test_resolve_rpc_missing(self):
        with pytest.raises(UnsupportedMethodError):
            resolver.resolve_rpc(17, "getdeploymentinfo")

    def test_describe(self):
        rows = resolver.describe(17)
        by_name = {row.name: row for row in rows}

        assert by_name["get_blockchain_info"].model == "GetBlockchainInfo"
        assert by_name["get_tx_out"].rpc == "gettxout"
