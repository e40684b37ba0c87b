import shutil
import subprocess
from pathlib import Path


class GhcClient:
    """
    Thin wrapper around the ``ghc`` executable.

    Only the informational modes are used, to discover which language
    extensions and options the installed compiler supports.
    """

    def __init__(self, ghc_path: str | Path | None = None, timeout: int = 10):
        """
        Initialize the GHC client.

        Args:
            ghc_path: Path or command name of the compiler. Looks up
                      ``ghc`` on PATH if None.
            timeout: Timeout in seconds for every invocation.
        """
        self.ghc_path = str(ghc_path) if ghc_path else "ghc"
        self.timeout = timeout

    def resolve(self) -> str | None:
        """Return the absolute path of the executable, or None if missing."""
        return shutil.which(self.ghc_path)

    def is_available(self) -> bool:
        """Check if GHC is installed and answers ``--numeric-version``."""
        if self.resolve() is None:
            return False

        try:
            result = self._run(["--numeric-version"])
        except (OSError, subprocess.SubprocessError):
            return False
        return result.returncode == 0

    def numeric_version(self) -> str | None:
        result = self._run(["--numeric-version"])
        if result.returncode != 0:
            return None
        return result.stdout.strip() or None

    def supported_extensions(self) -> list[str]:
        """
        Query ``ghc --supported-extensions``.

        Returns:
            Extension names in compiler order, one per output line.

        Raises:
            RuntimeError: If GHC exits with a non-zero status.
        """
        return self._lines(["--supported-extensions"])

    def show_options(self) -> list[str]:
        """Query ``ghc --show-options`` (all flags, leading dashes included)."""
        return self._lines(["--show-options"])

    def _lines(self, args: list[str]) -> list[str]:
        result = self._run(args)
        if result.returncode != 0:
            raise RuntimeError(
                f"{self.ghc_path} {' '.join(args)} failed: {result.stderr.strip()}"
            )
        return [line.strip() for line in result.stdout.splitlines() if line.strip()]

    def _run(self, args: list[str]) -> subprocess.CompletedProcess:
        return subprocess.run(
            [self.ghc_path, *args],
            capture_output=True,
            text=True,
            timeout=self.timeout,
        )
