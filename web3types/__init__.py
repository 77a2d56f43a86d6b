"""Typed models for Ethereum JSON-RPC hashes, quantities, blocks, logs, filters, traces and proofs."""

__version__ = "0.1.0"