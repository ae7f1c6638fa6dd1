import tomllib
from dataclasses import dataclass
from pathlib import Path

from cvs_tag.expression import DEFAULT_TAG_TEMPLATE
from cvs_tag.scm import DEFAULT_CVS_EXECUTABLE, ScmDescriptor, UnsupportedScm, normalize_modules

CONFIG_FILE_NAME = "cvs-tag.toml"


class ConfigError(ValueError):
    """Raised when cvs-tag.toml is present but unusable."""


@dataclass(frozen=True)
class LoadedConfig:
    """In-memory representation of `cvs-tag.toml`.

    Example cvs-tag.toml:
      scm = "cvs"

      [cvs]
      root = ":pserver:anon@cvs.example.org:/cvsroot"
      # Optional: omit to tag by date with rtag
      branch = "REL"
      modules = "moduleA moduleB"
      legacy = false

      [tag]
      name = "${env['JOB_NAME']}-${env['BUILD_NUMBER']}"
      move = false
    """

    scm: ScmDescriptor | UnsupportedScm
    tag_template: str
    move_tag: bool


def load_config(config_path: Path) -> LoadedConfig:
    """Load the tagging configuration; return defaults if the file doesn't exist."""
    if not config_path.exists():
        return LoadedConfig(
            scm=UnsupportedScm(kind="none"), tag_template=DEFAULT_TAG_TEMPLATE, move_tag=False
        )

    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"{config_path}: {e}") from e

    tag = data.get("tag", {})
    template = str(tag.get("name", "")).strip() or DEFAULT_TAG_TEMPLATE
    move_tag = tag.get("move", False)
    if not isinstance(move_tag, bool):
        raise ConfigError(f"{config_path}: [tag].move must be true or false")

    return LoadedConfig(
        scm=_load_scm(data, config_path), tag_template=template, move_tag=move_tag
    )


def _load_scm(data: dict, config_path: Path) -> ScmDescriptor | UnsupportedScm:
    kind = str(data.get("scm", "cvs"))
    if kind != "cvs":
        return UnsupportedScm(kind=kind)

    cvs = data.get("cvs", {})
    root = cvs.get("root")
    if not root:
        raise ConfigError(f"{config_path}: [cvs].root is required when scm = \"cvs\"")

    branch = cvs.get("branch")
    if branch is not None:
        branch = str(branch).strip() or None

    modules = cvs.get("modules", "")
    if isinstance(modules, list):
        modules = " ".join(str(m).replace(" ", "\\ ") for m in modules)

    legacy = cvs.get("legacy", False)
    if not isinstance(legacy, bool):
        raise ConfigError(f"{config_path}: [cvs].legacy must be true or false")

    return ScmDescriptor(
        executable=str(cvs.get("executable") or DEFAULT_CVS_EXECUTABLE),
        cvs_root=str(root),
        branch=branch,
        modules=normalize_modules(str(modules)),
        legacy=legacy,
    )


def effective_tag_template(override: str | None, configured: str) -> str:
    """Per-build template if given and not blank, else the configured default."""
    if override is None or not override.strip():
        return configured
    return override
