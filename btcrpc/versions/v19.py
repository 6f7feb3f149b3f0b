# btcrpc/versions/v19.py

"""Bitcoin Core v0.19

Softforks become a single map, mempool entries report ``vsize``/``weight``
and ``bip125-replaceable``, and wallets gain ``getbalances``.
"""

from btcrpc.schemas.v19 import blockchain, network, wallet
from btcrpc.versions import v18
from btcrpc.versions.registry import MethodSpec, module_attribute

VERSION = 19

METHODS = v18.METHODS.derive(
    VERSION,
    inherit=[
        # == Blockchain ==
        "get_best_block_hash", "get_block_count", "get_block_hash", "get_block_header",
        "get_block_header_verbose", "get_block_stats", "get_block_verbose_one",
        "get_block_verbose_zero", "get_chain_tips", "get_difficulty", "get_mempool_ancestors",
        "get_mempool_descendants", "get_raw_mempool", "get_tx_out", "get_tx_out_proof",
        "get_tx_out_set_info", "precious_block", "prune_blockchain", "save_mempool",
        "verify_chain", "verify_tx_out_proof",
        # == Control ==
        "get_memory_info", "help", "logging", "stop", "uptime",
        # == Generating / Mining ==
        "generate_to_address", "get_block_template", "get_mining_info", "get_network_hash_ps",
        "prioritise_transaction", "submit_block",
        # == Network ==
        "add_node", "clear_banned", "disconnect_node", "get_added_node_info",
        "get_connection_count", "get_net_totals", "get_node_addresses", "list_banned", "ping",
        "set_ban", "set_network_active",
        # == Rawtransactions ==
        "analyze_psbt", "combine_psbt", "combine_raw_transaction", "convert_to_psbt",
        "create_psbt", "create_raw_transaction", "decode_raw_transaction", "decode_script",
        "finalize_psbt", "fund_raw_transaction", "get_raw_transaction",
        "get_raw_transaction_verbose", "join_psbts", "send_raw_transaction",
        "sign_raw_transaction_with_key", "test_mempool_accept", "utxo_update_psbt",
        # == Util ==
        "create_multisig", "derive_addresses", "estimate_smart_fee", "get_descriptor_info",
        "sign_message_with_priv_key", "validate_address", "verify_message",
        # == Wallet ==
        "abandon_transaction", "abort_rescan", "add_multisig_address", "backup_wallet", "bump_fee",
        "create_wallet", "dump_priv_key", "dump_wallet", "encrypt_wallet", "get_address_info",
        "get_addresses_by_label", "get_balance", "get_new_address", "get_raw_change_address",
        "get_received_by_address", "get_received_by_label", "get_transaction",
        "get_unconfirmed_balance", "import_address", "import_multi", "import_priv_key",
        "import_pruned_funds", "import_pub_key", "import_wallet", "keypool_refill",
        "list_address_groupings", "list_labels", "list_lock_unspent", "list_received_by_address",
        "list_received_by_label", "list_since_block", "list_transactions", "list_unspent",
        "list_wallet_dir", "list_wallets", "load_wallet", "lock_unspent", "remove_pruned_funds",
        "rescan_blockchain", "send_many", "send_to_address", "set_hd_seed", "set_label",
        "set_tx_fee", "sign_message", "sign_raw_transaction_with_wallet", "unload_wallet",
        "wallet_create_funded_psbt", "wallet_lock", "wallet_passphrase",
        "wallet_passphrase_change", "wallet_process_psbt",
        # == Zmq ==
        "get_zmq_notifications",
    ],
    override=[
        MethodSpec("get_blockchain_info", "getblockchaininfo", blockchain.GetBlockchainInfo),
        MethodSpec(
            "get_chain_tx_stats", "getchaintxstats", blockchain.GetChainTxStats,
            params=("nblocks", "blockhash"),
        ),
        MethodSpec(
            "get_mempool_ancestors_verbose", "getmempoolancestors",
            blockchain.GetMempoolAncestorsVerbose,
            params=("txid",), fixed={"verbose": True},
        ),
        MethodSpec(
            "get_mempool_descendants_verbose", "getmempooldescendants",
            blockchain.GetMempoolDescendantsVerbose,
            params=("txid",), fixed={"verbose": True},
        ),
        MethodSpec("get_mempool_entry", "getmempoolentry", blockchain.GetMempoolEntry, params=("txid",)),
        MethodSpec("get_mempool_info", "getmempoolinfo", blockchain.GetMempoolInfo),
        MethodSpec(
            "get_raw_mempool_verbose", "getrawmempool", blockchain.GetRawMempoolVerbose,
            fixed={"verbose": True},
        ),
        MethodSpec("get_network_info", "getnetworkinfo", network.GetNetworkInfo),
        MethodSpec("get_rpc_info", "getrpcinfo", network.GetRpcInfo),
        MethodSpec("get_wallet_info", "getwalletinfo", wallet.GetWalletInfo),
    ],
    add=[
        MethodSpec("get_balances", "getbalances", wallet.GetBalances),
        MethodSpec(
            "get_block_filter", "getblockfilter", blockchain.GetBlockFilter,
            params=("blockhash", "filtertype"),
            notes="requires -blockfilterindex",
        ),
    ],
)


def __getattr__(name: str):
    return module_attribute(METHODS, __name__, name)


def __dir__():
    return sorted(list(globals()) + list(METHODS.wire_types()))
