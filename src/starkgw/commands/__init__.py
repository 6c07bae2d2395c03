"""
Command implementations for the starkgw CLI.

Each module corresponds to top-level CLI commands:
- call:     Read contract state through the feeder gateway
- invoke:   Submit an already-signed invoke transaction
- deploy:   Compress and deploy a compiled contract
- program:  Encode / decode a contract program offline
"""
