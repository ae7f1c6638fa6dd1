"""CVS process launch sub-gateway.

Import from submodules:
- abc: CvsRunner, CvsRunInterrupted
- real: RealCvsRunner
- fake: FakeCvsRunner
- dry_run: DryRunCvsRunner
"""
