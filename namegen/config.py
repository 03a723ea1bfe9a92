"""Runtime configuration for namegen."""

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DATA_DIR_ENV_VAR = "NAMEGEN_DATA_DIR"
BUNDLED_DATA_DIR = Path(__file__).parent / "datasets"

DEFAULT_COUNT = 10
DEFAULT_PREVIEW_LIMIT = 20


@dataclass(frozen=True)
class NamegenConfig:
    """Where datasets live and how much to generate or show."""

    data_dirs: tuple[Path, ...] = (BUNDLED_DATA_DIR,)
    """Data roots, searched in order"""

    default_count: int = DEFAULT_COUNT
    """Names drawn per generation"""

    preview_limit: int = DEFAULT_PREVIEW_LIMIT
    """Entries listed per pool when showing a dataset"""

    @classmethod
    def from_env(
        cls,
        extra_dirs: Iterable[Path | str] = (),
        environ: Optional[Mapping[str, str]] = None,
        **overrides,
    ) -> "NamegenConfig":
        """Build a config from explicit directories and the environment.

        Roots are ordered: `extra_dirs`, then the entries of NAMEGEN_DATA_DIR
        (os.pathsep separated), then the datasets bundled with the package.

        Args:
            extra_dirs: Directories given on the command line
            environ: Environment mapping (defaults to os.environ)
            **overrides: Any other NamegenConfig field
        """
        environ = os.environ if environ is None else environ

        dirs: list[Path] = [Path(d).expanduser() for d in extra_dirs]
        env_value = environ.get(DATA_DIR_ENV_VAR, "")
        dirs.extend(Path(part).expanduser() for part in env_value.split(os.pathsep) if part.strip())
        dirs.append(BUNDLED_DATA_DIR)

        return cls(data_dirs=tuple(dirs), **overrides)
