# web3types

Plain Python models for data exchanged with Ethereum JSON-RPC nodes.
Each model converts to and from the JSON shapes a node uses
(`0x`-prefixed hex quantities, fixed-size hashes, camelCase keys) through
`to_json()` and the class method `from_json()`. Malformed input raises
`ValueError`.

The package has no runtime dependencies.

## Installation

```
pip install web3types
```

## Modules

- `web3types.uint`: fixed-size hashes `H64`, `H128`, `H160`, `H256`, `H512`,
  `H520` and `H2048` (logs bloom), all built on `FixedHash`, plus the helpers
  `encode_quantity`, `decode_quantity` and `uint_from_bytes`.
  Quantities are plain Python `int`s.
- `web3types.bytes`: `Bytes` (JSON as a `0x` hex string) and `BytesArray`
  (JSON as an array of byte values).
- `web3types.block`: `Block`, `BlockHeader`, `BlockNumber`, `BlockTag` and `BlockId`.
- `web3types.log`: `Log`, `Filter`, `FilterBuilder` and `TopicFilter`.
- `web3types.fee_history`: `FeeHistory`.
- `web3types.transaction_id`: `TransactionId`.
- `web3types.proof`: `Proof` and `StorageProof`.
- `web3types.work`: `Work`, the miner's work package.
- `web3types.parity`: peer information (`ParityPeerType`, `ParityPeerInfo`,
  `PeerNetworkInfo`, `PeerProtocolsInfo`, `EthProtocolInfo`, `PipProtocolInfo`)
  and the pending-transaction filter (`ParityPendingTransactionFilter`,
  `ParityPendingTransactionFilterBuilder`, `FilterCondition`, `FilterOperator`,
  `ToFilter`).
- `web3types.trace_filtering`: `Trace`, `TraceFilter`, `TraceFilterBuilder`,
  the actions `Call`, `Create`, `Suicide` and `Reward`, the results `CallResult`
  and `CreateResult`, the enums `ActionType`, `CallType` and `RewardType`, and
  the helpers `parse_action` and `parse_result`.

## Examples

Hashes and quantities:

```python
from web3types.uint import H160, decode_quantity, encode_quantity

H160.from_low_u64_be(1).to_json()   # "0x0000000000000000000000000000000000000001"
encode_quantity(256)                # "0x100"
decode_quantity("0x100")            # 256
decode_quantity("0x")               # raises ValueError
```

Block numbers:

```python
from web3types.block import BlockNumber, BlockTag

BlockNumber.of(100).to_json()          # "0x64"
BlockNumber.from_json("latest")        # BlockNumber(BlockTag.LATEST)
BlockNumber.from_json("64")            # raises ValueError: missing 0x prefix
```

Reading a block; each entry of `transactions` is passed through
`parse_transaction` when one is given, and kept as the raw JSON value otherwise:

```python
import json
from web3types.block import Block

block = Block.from_json(json.loads(response_text))
block.author, block.base_fee_per_gas
```

Building a log filter:

```python
from web3types.block import BlockNumber
from web3types.log import FilterBuilder
from web3types.uint import H160, H256

log_filter = (
    FilterBuilder()
    .from_block(BlockNumber.of(1))
    .address([H160.from_low_u64_be(1)])
    .topics([H256.from_low_u64_be(3)], None, None, None)
    .limit(10)
    .build()
)
payload = log_filter.to_json()
```

Setting `block_hash` on a `FilterBuilder` clears the block range, and setting
`from_block` or `to_block` clears a block hash.

Building a trace filter:

```python
from web3types.trace_filtering import TraceFilterBuilder

trace_filter = TraceFilterBuilder().from_block(1).to_block(2).count(10).build()
trace_filter.to_json()   # {"fromBlock": "0x1", "toBlock": "0x2", "count": 10}
```

## What this package does not do

It only models and converts data. It does not connect to a node or send
requests. It has no models for transactions, receipts, call or transaction
requests, signed data and signature recovery, sync status, or ad-hoc replay
traces (state diffs and VM traces).

## Running the tests

```
pip install -e ".[test]"
pytest
```