"""stone verify - check a proof with the external cpu_air_verifier."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from ..config import Settings, SettingsError
from ..verifier import VerificationFailedError, VerifierLaunchError, VerifierNotFoundError, run_verifier
from .console import fail
from .exit_codes import EXIT_INTERNAL, EXIT_MALFORMED, EXIT_VERIFY_FAILED


@click.command("verify")
@click.argument("proof_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--verifier", "verifier_bin", default=None, help="Verifier binary (default: $STONE_VERIFIER_BIN or cpu_air_verifier)")
@click.option("--timeout", type=float, default=None, help="Seconds to wait for the verifier")
@click.pass_obj
def verify_command(settings: Optional[Settings], proof_file: Path, verifier_bin: Optional[str], timeout: Optional[float]) -> None:
    """Verify PROOF_FILE.

    \b
    Example:
        stone verify proof.json
    """
    settings = settings or Settings.from_env()
    if timeout is None:
        try:
            timeout = settings.verifier_timeout
        except SettingsError as exc:
            fail("config", exc, EXIT_MALFORMED)

    try:
        run_verifier(proof_file, binary=verifier_bin or settings.verifier_bin, timeout=timeout)
    except (VerifierNotFoundError, VerifierLaunchError) as exc:
        fail("verify", exc, EXIT_INTERNAL)
    except VerificationFailedError as exc:
        fail("verify", exc, EXIT_VERIFY_FAILED)

    click.echo("Proof verified")
