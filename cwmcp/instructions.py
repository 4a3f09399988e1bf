"""Descriptions shown to clients for the server and each of its tools."""

SERVER_INFO_DESCR = """
Helper tools for preparing queries and transactions against a deployed smart
contract. Nothing is signed or broadcast here; the prepared messages are meant
to be handed on to an RPC-capable tool or wallet.

Available actions:
- Show the deployed contract addresses together with their network and chain id
('list_contract_deployments')
- Show the query entry points and the parameters each one takes
('list_query_entry_points')
- Prepare a query message ready for any RPC-capable tool to send
('build_query_msg')
- Show the execute (transaction) entry points and the parameters each one takes
('list_tx_entry_points')
- Prepare an execute message that a signing wallet can sign and broadcast
('build_execute_msg')"""

LIST_CONTRACTS_DESCR = """
Returns every address at which the contract is deployed, along with its network
and chain id. Use it to find the mainnet and testnet addresses of the contract."""

LIST_QUERY_ENTRY_POINTS_DESCR = """
Returns the queries the contract accepts (its query entry points) and the
parameters each of them needs. Use it to learn what a user has to supply before
a query message can be prepared.

The result is the JSON schema of the contract's QueryMsg enum. It is long, so
summarise it rather than passing it on verbatim."""

BUILD_QUERY_MSG_DESCR = """
Wraps a QueryMsg variant into a Cosmos QueryRequest. The query is neither sent
nor answered here; pass the result to any RPC-connected query tool.

Two parameters are required: 'contract_addr', the address of the deployed
contract (see 'list_contract_deployments'), and 'query_msg', the QueryMsg
variant as a JSON string (see 'list_query_entry_points' for the variants and
their parameters)."""

LIST_TX_ENTRY_POINTS_DESCR = """
Returns the transactions the contract accepts (its execute entry points) and
the parameters each of them needs. Use it to learn what a user has to supply
before an execute message can be prepared.

The result is the JSON schema of the contract's ExecuteMsg enum. It is long, so
summarise it rather than passing it on verbatim."""

BUILD_EXECUTE_MSG_DESCR = """
Wraps an ExecuteMsg variant into a CosmosMsg for a transaction. The message is
neither signed nor broadcast here; pass the result to an RPC-connected wallet
that can sign and send it.

Parameters: 'contract_addr', the address of the deployed contract (see
'list_contract_deployments'); 'execute_msg', the ExecuteMsg variant as a JSON
string (see 'list_tx_entry_points'); and optionally 'payment' with
'payment_denom', the amount and denom of native funds to attach."""