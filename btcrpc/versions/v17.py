# btcrpc/versions/v17.py

"""Bitcoin Core v0.17

Base method table. Every later version is derived from this one.
"""

from btcrpc.schemas.v17 import blockchain, control, mining, network, raw_transactions, wallet
from btcrpc.versions.registry import MethodSpec, MethodTable, module_attribute

VERSION = 17

METHODS = MethodTable(VERSION, [
    # == Blockchain ==
    MethodSpec("get_best_block_hash", "getbestblockhash", blockchain.GetBestBlockHash),
    MethodSpec(
        "get_block_verbose_zero", "getblock", blockchain.GetBlockVerboseZero,
        params=("blockhash",), fixed={"verbosity": 0},
    ),
    MethodSpec(
        "get_block_verbose_one", "getblock", blockchain.GetBlockVerboseOne,
        params=("blockhash",), fixed={"verbosity": 1},
    ),
    MethodSpec("get_blockchain_info", "getblockchaininfo", blockchain.GetBlockchainInfo),
    MethodSpec("get_block_count", "getblockcount", blockchain.GetBlockCount),
    MethodSpec("get_block_hash", "getblockhash", blockchain.GetBlockHash, params=("height",)),
    MethodSpec(
        "get_block_header", "getblockheader", blockchain.GetBlockHeader,
        params=("blockhash",), fixed={"verbose": False},
    ),
    MethodSpec(
        "get_block_header_verbose", "getblockheader", blockchain.GetBlockHeaderVerbose,
        params=("blockhash",), fixed={"verbose": True},
    ),
    MethodSpec(
        "get_block_stats", "getblockstats", blockchain.GetBlockStats,
        params=("hash_or_height", "stats"),
        notes="requesting a subset of stats yields a partial object the wire type rejects",
    ),
    MethodSpec("get_chain_tips", "getchaintips", blockchain.GetChainTips),
    MethodSpec(
        "get_chain_tx_stats", "getchaintxstats", blockchain.GetChainTxStats,
        params=("nblocks", "blockhash"),
    ),
    MethodSpec("get_difficulty", "getdifficulty", blockchain.GetDifficulty),
    MethodSpec(
        "get_mempool_ancestors", "getmempoolancestors", blockchain.GetMempoolAncestors,
        params=("txid",), fixed={"verbose": False},
    ),
    MethodSpec(
        "get_mempool_ancestors_verbose", "getmempoolancestors", blockchain.GetMempoolAncestorsVerbose,
        params=("txid",), fixed={"verbose": True},
    ),
    MethodSpec(
        "get_mempool_descendants", "getmempooldescendants", blockchain.GetMempoolDescendants,
        params=("txid",), fixed={"verbose": False},
    ),
    MethodSpec(
        "get_mempool_descendants_verbose", "getmempooldescendants",
        blockchain.GetMempoolDescendantsVerbose,
        params=("txid",), fixed={"verbose": True},
    ),
    MethodSpec("get_mempool_entry", "getmempoolentry", blockchain.GetMempoolEntry, params=("txid",)),
    MethodSpec("get_mempool_info", "getmempoolinfo", blockchain.GetMempoolInfo),
    MethodSpec(
        "get_raw_mempool", "getrawmempool", blockchain.GetRawMempool, fixed={"verbose": False},
    ),
    MethodSpec(
        "get_raw_mempool_verbose", "getrawmempool", blockchain.GetRawMempoolVerbose,
        fixed={"verbose": True},
    ),
    MethodSpec(
        "get_tx_out", "gettxout", blockchain.GetTxOut,
        params=("txid", "n", "include_mempool"), nullable=True,
        notes="null for spent or unknown outputs",
    ),
    MethodSpec(
        "get_tx_out_proof", "gettxoutproof", str, params=("txids", "blockhash"),
        notes="hex-serialized merkle proof",
    ),
    MethodSpec("get_tx_out_set_info", "gettxoutsetinfo", blockchain.GetTxOutSetInfo),
    MethodSpec("prune_blockchain", "pruneblockchain", int, params=("height",)),
    MethodSpec("precious_block", "preciousblock", None, params=("blockhash",)),
    MethodSpec("save_mempool", "savemempool", None),
    MethodSpec("verify_chain", "verifychain", bool, params=("checklevel", "nblocks")),
    MethodSpec(
        "verify_tx_out_proof", "verifytxoutproof", blockchain.VerifyTxOutProof, params=("proof",),
    ),

    # == Control ==
    MethodSpec("get_memory_info", "getmemoryinfo", control.GetMemoryInfoStats, params=("mode",)),
    MethodSpec("help", "help", str, params=("command",)),
    MethodSpec("logging", "logging", control.Logging, params=("include", "exclude")),
    MethodSpec("stop", "stop", str),
    MethodSpec("uptime", "uptime", int),

    # == Generating ==
    MethodSpec(
        "generate_to_address", "generatetoaddress", mining.GenerateToAddress,
        params=("nblocks", "address", "maxtries"),
    ),

    # == Mining ==
    MethodSpec(
        "get_block_template", "getblocktemplate", mining.GetBlockTemplate,
        params=("template_request",),
        notes="template mode only; proposal mode answers with a string or null",
    ),
    MethodSpec("get_mining_info", "getmininginfo", mining.GetMiningInfo),
    MethodSpec("get_network_hash_ps", "getnetworkhashps", float, params=("nblocks", "height")),
    MethodSpec(
        "prioritise_transaction", "prioritisetransaction", bool,
        params=("txid", "dummy", "fee_delta"),
    ),
    MethodSpec(
        "submit_block", "submitblock", str, params=("hexdata",), nullable=True,
        notes="null when accepted, otherwise the rejection reason",
    ),

    # == Network ==
    MethodSpec("add_node", "addnode", None, params=("node", "command")),
    MethodSpec("clear_banned", "clearbanned", None),
    MethodSpec("disconnect_node", "disconnectnode", None, params=("address", "nodeid")),
    MethodSpec("get_added_node_info", "getaddednodeinfo", network.GetAddedNodeInfo, params=("node",)),
    MethodSpec("get_connection_count", "getconnectioncount", int),
    MethodSpec("get_net_totals", "getnettotals", network.GetNetTotals),
    MethodSpec("get_network_info", "getnetworkinfo", network.GetNetworkInfo),
    MethodSpec("list_banned", "listbanned", network.ListBanned),
    MethodSpec("ping", "ping", None),
    MethodSpec(
        "set_ban", "setban", None, params=("subnet", "command", "bantime", "absolute"),
    ),
    MethodSpec("set_network_active", "setnetworkactive", bool, params=("state",)),

    # == Rawtransactions ==
    MethodSpec("combine_psbt", "combinepsbt", raw_transactions.CombinePsbt, params=("txs",)),
    MethodSpec(
        "combine_raw_transaction", "combinerawtransaction", raw_transactions.CombineRawTransaction,
        params=("txs",),
    ),
    MethodSpec(
        "convert_to_psbt", "converttopsbt", raw_transactions.ConvertToPsbt,
        params=("hexstring", "permitsigdata", "iswitness"),
    ),
    MethodSpec(
        "create_psbt", "createpsbt", raw_transactions.CreatePsbt,
        params=("inputs", "outputs", "locktime", "replaceable"),
    ),
    MethodSpec(
        "create_raw_transaction", "createrawtransaction", raw_transactions.CreateRawTransaction,
        params=("inputs", "outputs", "locktime", "replaceable"),
    ),
    MethodSpec(
        "decode_raw_transaction", "decoderawtransaction", raw_transactions.DecodeRawTransaction,
        params=("hexstring", "iswitness"),
    ),
    MethodSpec("decode_script", "decodescript", raw_transactions.DecodeScript, params=("hexstring",)),
    MethodSpec("finalize_psbt", "finalizepsbt", raw_transactions.FinalizePsbt, params=("psbt", "extract")),
    MethodSpec(
        "fund_raw_transaction", "fundrawtransaction", raw_transactions.FundRawTransaction,
        params=("hexstring", "options", "iswitness"),
    ),
    MethodSpec(
        "get_raw_transaction", "getrawtransaction", raw_transactions.GetRawTransaction,
        params=("txid", "blockhash"), fixed={"verbose": False},
    ),
    MethodSpec(
        "get_raw_transaction_verbose", "getrawtransaction", raw_transactions.GetRawTransactionVerbose,
        params=("txid", "blockhash"), fixed={"verbose": True},
    ),
    MethodSpec(
        "send_raw_transaction", "sendrawtransaction", raw_transactions.SendRawTransaction,
        params=("hexstring",),
    ),
    MethodSpec(
        "sign_raw_transaction_with_key", "signrawtransactionwithkey",
        raw_transactions.SignRawTransactionWithKey,
        params=("hexstring", "privkeys", "prevtxs", "sighashtype"),
    ),
    MethodSpec(
        "test_mempool_accept", "testmempoolaccept", raw_transactions.TestMempoolAccept,
        params=("rawtxs",),
    ),

    # == Util ==
    MethodSpec(
        "create_multisig", "createmultisig", control.CreateMultisig,
        params=("nrequired", "keys", "address_type"),
    ),
    MethodSpec(
        "estimate_smart_fee", "estimatesmartfee", control.EstimateSmartFee,
        params=("conf_target", "estimate_mode"),
    ),
    MethodSpec(
        "sign_message_with_priv_key", "signmessagewithprivkey", str, params=("privkey", "message"),
        notes="base64 signature",
    ),
    MethodSpec("validate_address", "validateaddress", control.ValidateAddress, params=("address",)),
    MethodSpec("verify_message", "verifymessage", bool, params=("address", "signature", "message")),

    # == Wallet ==
    MethodSpec("abandon_transaction", "abandontransaction", None, params=("txid",)),
    MethodSpec("abort_rescan", "abortrescan", bool),
    MethodSpec(
        "add_multisig_address", "addmultisigaddress", wallet.AddMultisigAddress,
        params=("nrequired", "keys", "label", "address_type"),
    ),
    MethodSpec("backup_wallet", "backupwallet", None, params=("destination",)),
    MethodSpec("bump_fee", "bumpfee", wallet.BumpFee, params=("txid", "options")),
    MethodSpec(
        "create_wallet", "createwallet", wallet.CreateWallet,
        params=("wallet_name", "disable_private_keys"),
    ),
    MethodSpec("dump_priv_key", "dumpprivkey", str, params=("address",), notes="WIF private key"),
    MethodSpec("dump_wallet", "dumpwallet", wallet.DumpWallet, params=("filename",)),
    MethodSpec(
        "encrypt_wallet", "encryptwallet", str, params=("passphrase",),
        notes="the daemon's confirmation message",
    ),
    MethodSpec(
        "get_addresses_by_label", "getaddressesbylabel", wallet.GetAddressesByLabel, params=("label",),
    ),
    MethodSpec("get_address_info", "getaddressinfo", wallet.GetAddressInfo, params=("address",)),
    MethodSpec(
        "get_balance", "getbalance", wallet.GetBalance,
        params=("minconf", "include_watchonly"), fixed={"dummy": "*"},
    ),
    MethodSpec(
        "get_new_address", "getnewaddress", wallet.GetNewAddress,
        params=("label", "address_type"),
    ),
    MethodSpec(
        "get_raw_change_address", "getrawchangeaddress", wallet.GetRawChangeAddress,
        params=("address_type",),
    ),
    MethodSpec(
        "get_received_by_address", "getreceivedbyaddress", wallet.GetReceivedByAddress,
        params=("address", "minconf"),
    ),
    MethodSpec(
        "get_received_by_label", "getreceivedbylabel", wallet.GetReceivedByLabel,
        params=("label", "minconf"),
    ),
    MethodSpec(
        "get_transaction", "gettransaction", wallet.GetTransaction,
        params=("txid", "include_watchonly"),
    ),
    MethodSpec("get_unconfirmed_balance", "getunconfirmedbalance", wallet.GetUnconfirmedBalance),
    MethodSpec("get_wallet_info", "getwalletinfo", wallet.GetWalletInfo),
    MethodSpec("import_address", "importaddress", None, params=("address", "label", "rescan", "p2sh")),
    MethodSpec("import_multi", "importmulti", wallet.ImportMulti, params=("requests", "options")),
    MethodSpec("import_priv_key", "importprivkey", None, params=("privkey", "label", "rescan")),
    MethodSpec("import_pruned_funds", "importprunedfunds", None, params=("rawtransaction", "txoutproof")),
    MethodSpec("import_pub_key", "importpubkey", None, params=("pubkey", "label", "rescan")),
    MethodSpec("import_wallet", "importwallet", None, params=("filename",)),
    MethodSpec("keypool_refill", "keypoolrefill", None, params=("newsize",)),
    MethodSpec("list_address_groupings", "listaddressgroupings", wallet.ListAddressGroupings),
    MethodSpec("list_labels", "listlabels", wallet.ListLabels, params=("purpose",)),
    MethodSpec("list_lock_unspent", "listlockunspent", wallet.ListLockUnspent),
    MethodSpec(
        "list_received_by_address", "listreceivedbyaddress", wallet.ListReceivedByAddress,
        params=("minconf", "include_empty", "include_watchonly", "address_filter"),
    ),
    MethodSpec(
        "list_received_by_label", "listreceivedbylabel", wallet.ListReceivedByLabel,
        params=("minconf", "include_empty", "include_watchonly"),
    ),
    MethodSpec(
        "list_since_block", "listsinceblock", wallet.ListSinceBlock,
        params=("blockhash", "target_confirmations", "include_watchonly", "include_removed"),
    ),
    MethodSpec(
        "list_transactions", "listtransactions", wallet.ListTransactions,
        params=("label", "count", "skip", "include_watchonly"),
    ),
    MethodSpec(
        "list_unspent", "listunspent", wallet.ListUnspent,
        params=("minconf", "maxconf", "addresses", "include_unsafe", "query_options"),
    ),
    MethodSpec("list_wallets", "listwallets", wallet.ListWallets),
    MethodSpec("load_wallet", "loadwallet", wallet.LoadWallet, params=("filename",)),
    MethodSpec("lock_unspent", "lockunspent", bool, params=("unlock", "transactions")),
    MethodSpec("remove_pruned_funds", "removeprunedfunds", None, params=("txid",)),
    MethodSpec(
        "rescan_blockchain", "rescanblockchain", wallet.RescanBlockchain,
        params=("start_height", "stop_height"),
    ),
    MethodSpec(
        "send_many", "sendmany", wallet.SendMany,
        params=("amounts", "minconf", "comment", "subtractfeefrom", "replaceable",
                "conf_target", "estimate_mode"),
        fixed={"dummy": ""},
    ),
    MethodSpec(
        "send_to_address", "sendtoaddress", wallet.SendToAddress,
        params=("address", "amount", "comment", "comment_to", "subtractfeefromamount",
                "replaceable", "conf_target", "estimate_mode"),
    ),
    MethodSpec("set_hd_seed", "sethdseed", None, params=("newkeypool", "seed")),
    MethodSpec("set_label", "setlabel", None, params=("address", "label")),
    MethodSpec("set_tx_fee", "settxfee", bool, params=("amount",)),
    MethodSpec("sign_message", "signmessage", wallet.SignMessage, params=("address", "message")),
    MethodSpec(
        "sign_raw_transaction_with_wallet", "signrawtransactionwithwallet",
        wallet.SignRawTransactionWithWallet,
        params=("hexstring", "prevtxs", "sighashtype"),
    ),
    MethodSpec("unload_wallet", "unloadwallet", None, params=("wallet_name",)),
    MethodSpec(
        "wallet_create_funded_psbt", "walletcreatefundedpsbt", wallet.WalletCreateFundedPsbt,
        params=("inputs", "outputs", "locktime", "options", "bip32derivs"),
    ),
    MethodSpec("wallet_lock", "walletlock", None),
    MethodSpec("wallet_passphrase", "walletpassphrase", None, params=("passphrase", "timeout")),
    MethodSpec(
        "wallet_passphrase_change", "walletpassphrasechange", None,
        params=("oldpassphrase", "newpassphrase"),
    ),
    MethodSpec(
        "wallet_process_psbt", "walletprocesspsbt", wallet.WalletProcessPsbt,
        params=("psbt", "sign", "sighashtype", "bip32derivs"),
    ),

    # == Zmq ==
    MethodSpec("get_zmq_notifications", "getzmqnotifications", control.GetZmqNotifications),
])


def __getattr__(name: str):
    return module_attribute(METHODS, __name__, name)


def __dir__():
    return sorted(list(globals()) + list(METHODS.wire_types()))
