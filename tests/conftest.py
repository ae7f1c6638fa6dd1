from collections.abc import Callable

import pytest

from cvs_tag.gateway.build_log.fake import FakeBuildLog
from cvs_tag.scm import ScmDescriptor

CVS_ROOT = ":pserver:anon@cvs.example.org:/cvsroot"


@pytest.fixture
def fake_log() -> FakeBuildLog:
    return FakeBuildLog()


@pytest.fixture
def make_scm() -> Callable[..., ScmDescriptor]:
    def _make(
        *,
        branch: str | None = "REL",
        modules: tuple[str, ...] = ("moduleA",),
        legacy: bool = False,
        executable: str = "cvs",
    ) -> ScmDescriptor:
        return ScmDescriptor(
            executable=executable,
            cvs_root=CVS_ROOT,
            branch=branch,
            modules=modules,
            legacy=legacy,
        )

    return _make
