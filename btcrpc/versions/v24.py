# btcrpc/versions/v24.py

"""Bitcoin Core v24

``getmempoolinfo`` reports the replacement policy.
"""

from btcrpc.schemas.v24 import blockchain
from btcrpc.versions import v23
from btcrpc.versions.registry import MethodSpec, module_attribute

VERSION = 24

METHODS = v23.METHODS.derive(
    VERSION,
    inherit=[
        # == Blockchain ==
        "get_best_block_hash", "get_block_count", "get_block_filter", "get_block_hash",
        "get_block_header", "get_block_header_verbose", "get_block_stats", "get_block_verbose_one",
        "get_block_verbose_zero", "get_blockchain_info", "get_chain_tips", "get_chain_tx_stats",
        "get_deployment_info", "get_difficulty", "get_mempool_ancestors",
        "get_mempool_ancestors_verbose", "get_mempool_descendants",
        "get_mempool_descendants_verbose", "get_mempool_entry", "get_raw_mempool",
        "get_raw_mempool_verbose", "get_tx_out", "get_tx_out_proof", "get_tx_out_set_info",
        "precious_block", "prune_blockchain", "save_mempool", "verify_chain",
        "verify_tx_out_proof",
        # == Control ==
        "get_memory_info", "get_rpc_info", "help", "logging", "stop", "uptime",
        # == Generating / Mining ==
        "generate_to_address", "generate_to_descriptor", "get_block_template", "get_mining_info",
        "get_network_hash_ps", "prioritise_transaction", "submit_block",
        # == Network ==
        "add_node", "clear_banned", "disconnect_node", "get_added_node_info",
        "get_connection_count", "get_net_totals", "get_network_info", "get_node_addresses",
        "list_banned", "ping", "set_ban", "set_network_active",
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
        "get_addresses_by_label", "get_balance", "get_balances", "get_new_address",
        "get_raw_change_address", "get_received_by_address", "get_received_by_label",
        "get_transaction", "get_unconfirmed_balance", "get_wallet_info", "import_address",
        "import_descriptors", "import_multi", "import_priv_key", "import_pruned_funds",
        "import_pub_key", "import_wallet", "keypool_refill", "list_address_groupings",
        "list_labels", "list_lock_unspent", "list_received_by_address", "list_received_by_label",
        "list_since_block", "list_transactions", "list_unspent", "list_wallet_dir", "list_wallets",
        "load_wallet", "lock_unspent", "psbt_bump_fee", "remove_pruned_funds", "rescan_blockchain",
        "send", "send_many", "send_many_verbose", "send_to_address", "set_hd_seed", "set_label",
        "set_tx_fee", "sign_message", "sign_raw_transaction_with_wallet", "unload_wallet",
        "upgrade_wallet", "wallet_create_funded_psbt", "wallet_lock", "wallet_passphrase",
        "wallet_passphrase_change", "wallet_process_psbt",
        # == Zmq ==
        "get_zmq_notifications",
    ],
    override=[
        MethodSpec("get_mempool_info", "getmempoolinfo", blockchain.GetMempoolInfo),
    ],
)


def __getattr__(name: str):
    return module_attribute(METHODS, __name__, name)


def __dir__():
    return sorted(list(globals()) + list(METHODS.wire_types()))
