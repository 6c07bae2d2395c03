"""
Gateway - HTTP interaction layer for starkgw.

Provides the gateway/feeder gateway client, request models and entry point
selector hashing.

Uses httpx for HTTP and eth-hash for Keccak instead of a full SDK.
"""
