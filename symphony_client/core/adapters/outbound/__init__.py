"""
Outbound adapters - implementations of ports for external systems.

- http: requests-based pod transport and certificate authenticator
- mappers: wire model <-> domain entity conversion
"""
