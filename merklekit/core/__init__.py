"""Engine configuration, Merkle tree engine and allowlist"""
