JSONRPC_VERSION = "2.0"
