"""Thin wrapper around the external ``cpu_air_verifier`` binary."""
from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Optional

from .config import DEFAULT_VERIFIER_BIN

LOGGER = logging.getLogger(__name__)


class VerifierError(RuntimeError):
    """Base class for verifier failures."""


class VerifierNotFoundError(VerifierError):
    def __init__(self, binary: str):
        super().__init__(f"could not find verifier program '{binary}'. Is cpu_air_verifier installed?")
        self.binary = binary


class VerifierLaunchError(VerifierError):
    def __init__(self, binary: str, reason: str):
        super().__init__(f"could not run verifier program '{binary}': {reason}")
        self.binary = binary
        self.reason = reason


class VerificationFailedError(VerifierError):
    def __init__(self, returncode: int, stderr: str):
        detail = stderr.strip() or f"exit code {returncode}"
        super().__init__(f"failed to run verifier: {detail}")
        self.returncode = returncode
        self.stderr = stderr


def run_verifier(
    proof_file: Path,
    *,
    binary: str = DEFAULT_VERIFIER_BIN,
    timeout: Optional[float] = None,
) -> None:
    """Run the verifier on ``proof_file``; raise on any failure."""
    cmd = [binary, "--in_file", str(proof_file)]
    LOGGER.info("verification in progress: %s", " ".join(cmd))
    try:
        proc = subprocess.run(cmd, capture_output=True, text=True, timeout=timeout)
    except FileNotFoundError as exc:
        raise VerifierNotFoundError(binary) from exc
    except OSError as exc:
        raise VerifierLaunchError(binary, exc.strerror or str(exc)) from exc
    except subprocess.TimeoutExpired as exc:
        raise VerificationFailedError(-1, f"verifier timed out after {timeout}s") from exc

    if proc.returncode != 0:
        raise VerificationFailedError(proc.returncode, proc.stderr or "")
    LOGGER.info("verification completed")
