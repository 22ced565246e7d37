"""Test suite for neoanalyzer package.

Run tests with: pytest tests/ -v

Test markers:
    -m "not network"   - Skip tests requiring network access (default)
    -m "network"       - Run only tests querying NASA NeoWs
"""
