"""Data models: operation descriptors, results and search specifications."""
