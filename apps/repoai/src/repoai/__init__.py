from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as package_version

from repoai.config import ConfigError, RepoAIConfig, load_repoai_config
from repoai.scaffold import ManifestEntry, build_manifest, run_init


def _resolve_version() -> str:
    try:
        return package_version("repoai")
    except PackageNotFoundError:
        return "0+unknown"


__version__ = _resolve_version()

__all__ = [
    "__version__",
    "ConfigError",
    "ManifestEntry",
    "RepoAIConfig",
    "build_manifest",
    "load_repoai_config",
    "run_init",
]
