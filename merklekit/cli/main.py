"""
MerkleKit CLI - Command Line Interface for the Merkle tree engine

Main entry point for all CLI commands. Leaves can be given as arguments,
read from a file (one digest per line), or both.
"""

import json
import logging
from typing import List, Optional, TextIO, Tuple

import click
from pydantic import ValidationError

from merklekit.core.config import load_config
from merklekit.core.tree import MerkleError
from merklekit.crypto import DIGEST_FUNCTIONS, get_digest_function
from merklekit.utils.logger import setup_logging, get_logger
from merklekit.utils.validation import validate_leaves, validate_proof_dicts

logger = get_logger("cli")


def read_lines(file: Optional[TextIO]) -> List[str]:
    """
    Read non-empty, non-comment lines from an open text file.

    Args:
        file: Open file object, or None

    Returns:
        Stripped lines, in file order
    """
    if file is None:
        return []
    lines = []
    for line in file:
        line = line.strip()
        if line and not line.startswith("#"):
            lines.append(line)
    return lines


def collect_leaves(ctx: click.Context, args: Tuple[str, ...], file: Optional[TextIO]) -> List[str]:
    """Merge argument and file leaves, then validate them."""
    leaves = list(args) + read_lines(file)
    valid, err = validate_leaves(
        leaves,
        max_leaves=ctx.obj["config"].max_leaves,
        require_uniform_length=False,
    )
    if not valid:
        raise click.BadParameter(err, param_hint="LEAVES")
    logger.debug(f"Collected {len(leaves)} leaves")
    return leaves


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--config", "config_path", default=None, type=click.Path(exists=True, dir_okay=False), help="JSON config file")
@click.option("--algorithm", default=None, type=click.Choice(sorted(DIGEST_FUNCTIONS)), help="Hash algorithm (overrides config)")
@click.version_option(version="0.1.0")
@click.pass_context
def cli(ctx, debug, config_path, algorithm):
    """MerkleKit - build Merkle trees, generate and verify inclusion proofs"""
    try:
        config = load_config(config_path)
    except (ValidationError, ValueError, OSError) as e:
        raise click.ClickException(f"Invalid configuration: {e}")

    level = logging.DEBUG if debug else getattr(logging, config.log_level)
    setup_logging(level=level, log_dir=str(config.log_dir), log_to_file=config.log_to_file)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["digest_fn"] = get_digest_function(algorithm) if algorithm else config.digest_fn


# =============================================================================
# Tree Commands
# =============================================================================


@cli.command("root")
@click.argument("leaves", nargs=-1)
@click.option("--file", "leaf_file", type=click.File("r"), default=None, help="File with one leaf digest per line")
@click.pass_context
def root_cmd(ctx, leaves, leaf_file):
    """Print the Merkle root of LEAVES"""
    from merklekit.core.tree import build_root

    leaves = collect_leaves(ctx, leaves, leaf_file)
    try:
        click.echo(build_root(leaves, ctx.obj["digest_fn"]))
    except MerkleError as e:
        raise click.ClickException(str(e))


@cli.command("tree")
@click.argument("leaves", nargs=-1)
@click.option("--file", "leaf_file", type=click.File("r"), default=None, help="File with one leaf digest per line")
@click.pass_context
def tree_cmd(ctx, leaves, leaf_file):
    """Print every level of the tree as JSON, leaves first"""
    from merklekit.core.tree import build_tree

    leaves = collect_leaves(ctx, leaves, leaf_file)
    click.echo(json.dumps(build_tree(leaves, ctx.obj["digest_fn"]), indent=2))


# =============================================================================
# Proof Commands
# =============================================================================


@cli.command("prove")
@click.argument("target")
@click.argument("leaves", nargs=-1)
@click.option("--file", "leaf_file", type=click.File("r"), default=None, help="File with one leaf digest per line")
@click.option("--output", "-o", type=click.File("w"), default=None, help="Write proof JSON to file instead of stdout")
@click.pass_context
def prove_cmd(ctx, target, leaves, leaf_file, output):
    """Generate an inclusion proof for TARGET among LEAVES"""
    from merklekit.core.tree import generate_proof, proof_to_dicts

    leaves = collect_leaves(ctx, leaves, leaf_file)
    proof = generate_proof(target, leaves, ctx.obj["digest_fn"])
    if proof is None:
        raise click.ClickException(f"Target {target} not found among {len(leaves)} leaves")

    click.echo(json.dumps(proof_to_dicts(proof), indent=2), file=output)


@cli.command("verify")
@click.argument("proof_file", type=click.File("r"))
@click.option("--root", "expected_root", default=None, help="Expected root; prints valid/invalid")
@click.pass_context
def verify_cmd(ctx, proof_file, expected_root):
    """Recompute the root from PROOF_FILE (JSON, '-' for stdin)"""
    from merklekit.core.tree import check_proof, proof_from_dicts, verify_proof

    try:
        items = json.load(proof_file)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Proof is not valid JSON: {e}")

    valid, err = validate_proof_dicts(items)
    if not valid:
        raise click.ClickException(err)

    try:
        proof = proof_from_dicts(items)
    except MerkleError as e:
        raise click.ClickException(str(e))

    digest_fn = ctx.obj["digest_fn"]
    if expected_root is None:
        click.echo(verify_proof(proof, digest_fn))
        return

    if check_proof(proof, expected_root, digest_fn):
        click.echo("valid")
    else:
        click.echo("invalid")
        ctx.exit(1)


# =============================================================================
# Address Commands
# =============================================================================


@cli.command("check-address")
@click.argument("address")
@click.option("--file", "address_file", type=click.File("r"), required=True, help="Address list, one per line")
@click.option("--hashed", is_flag=True, help="File holds hashed leaves instead of raw addresses")
@click.option("--no-normalize", is_flag=True, help="Do not lowercase addresses before hashing")
@click.pass_context
def check_address(ctx, address, address_file, hashed, no_normalize):
    """Check whether ADDRESS belongs to an address allowlist"""
    from merklekit.core.allowlist import AddressAllowlist
    from merklekit.crypto import is_valid_address

    if not is_valid_address(address):
        logger.warning(f"{address} does not look like a 0x-prefixed 20-byte address")

    entries = read_lines(address_file)
    normalize = not no_normalize
    digest_fn = ctx.obj["digest_fn"]
    if hashed:
        allowlist = AddressAllowlist.from_hashed(entries, normalize=normalize, digest_fn=digest_fn)
    else:
        allowlist = AddressAllowlist(entries, normalize=normalize, digest_fn=digest_fn)

    if len(allowlist) == 0:
        raise click.ClickException("Address list is empty")

    click.echo(f"Merkle root: {allowlist.root}")
    if allowlist.is_member(address):
        click.echo(f"{address} is a valid address.")
    else:
        click.echo(f"{address} is NOT a valid address.")
        ctx.exit(1)


if __name__ == "__main__":
    cli()
