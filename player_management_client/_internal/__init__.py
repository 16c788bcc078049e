"""Internal modules for the Player Management client.

WARNING: These modules are implementation details of the public clients.
They are not intended for direct use in application code.

Modules:
    builder - Request descriptors and the URL/header builder
    http - Shared httpx client configuration
    curl - curl command reconstruction for debug output
    redaction - Secret redaction for debug output
"""
