"""Shared pytest configuration"""

# pytest-playwright modules generated into tests/ need a browser; keep them out of this suite
collect_ignore_glob = ["test_*.py"]
