"""Build log sub-gateway.

Import from submodules:
- abc: BuildLog
- real: StreamBuildLog
- fake: FakeBuildLog
"""
