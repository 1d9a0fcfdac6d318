"""
Solidity compilation through py-solc-x.

Source text is compiled from stdin, so solc qualifies every contract name
as "<stdin>:Name". Artifacts are written as Name.bin (bytecode hex) and
Name.abi (JSON ABI array).
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import solcx
from solcx import compile_source
from solcx.exceptions import SolcError, SolcNotInstalled

from .errors import ArtifactError, CompilerError
from .log import get_logger

logger = get_logger("compiler")

# Prefix solc puts in front of contracts compiled from stdin
STDIN_PREFIX = "<stdin>:"

OUTPUT_VALUES = ["abi", "bin", "bin-runtime"]


@dataclass(frozen=True)
class CompiledContract:
    """
    A single contract from solc output.

    Attributes:
        name: Qualified compiler name (e.g. "<stdin>:Greeter")
        runtime_code: 0x-prefixed runtime bytecode
        code: 0x-prefixed creation bytecode
        abi: ABI definition
    """
    name: str
    runtime_code: str
    code: str = ""
    abi: list[dict[str, Any]] = field(default_factory=list)

    @property
    def short_name(self) -> str:
        """Qualified name with the fixed-length stdin prefix stripped."""
        return self.name[len(STDIN_PREFIX):]

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "code": self.code,
            "runtime_code": self.runtime_code,
            "abi": self.abi,
        }


def _hex(value: Optional[str]) -> str:
    if not value:
        return "0x"
    return value if value.startswith("0x") else "0x" + value


def ensure_solc(version: str) -> None:
    """Install the given solc version if needed and make it active."""
    installed = [str(v) for v in solcx.get_installed_solc_versions()]
    if version not in installed:
        logger.info("Installing solc %s", version)
        solcx.install_solc(version)
    solcx.set_solc_version(version)


def compile_solidity(source: str, solc_version: Optional[str] = None) -> dict[str, CompiledContract]:
    """
    Compile Solidity source text.

    Args:
        source: Solidity source code
        solc_version: solc version to use; installed on demand. None uses
            the active solc.

    Returns:
        Mapping of qualified contract name to CompiledContract

    Raises:
        CompilerError: If solc is missing or compilation fails
    """
    try:
        if solc_version:
            ensure_solc(solc_version)
        compiled = compile_source(source, output_values=OUTPUT_VALUES)
    except SolcNotInstalled as exc:
        raise CompilerError(f"solc is not installed: {exc}") from exc
    except SolcError as exc:
        raise CompilerError(str(exc)) from exc

    return {
        name: CompiledContract(
            name=name,
            runtime_code=_hex(data.get("bin-runtime")),
            code=_hex(data.get("bin")),
            abi=data.get("abi", []),
        )
        for name, data in compiled.items()
    }


def write_artifacts(
    contract: CompiledContract,
    output_dir: Optional[Path] = None,
    creation: bool = False,
) -> tuple[Path, Path]:
    """
    Write NAME.bin and NAME.abi for a compiled contract.

    Args:
        contract: The compiled contract
        output_dir: Target directory (default: current directory)
        creation: Write creation bytecode instead of runtime bytecode

    Returns:
        Tuple of (bin_path, abi_path)

    Raises:
        ArtifactError: If a file cannot be written
    """
    output_dir = output_dir or Path(".")
    bin_path = output_dir / f"{contract.short_name}.bin"
    abi_path = output_dir / f"{contract.short_name}.abi"

    bytecode = contract.code if creation else contract.runtime_code

    try:
        _write_private(bin_path, bytecode)
    except OSError as exc:
        raise ArtifactError(f"Cannot write the bin file: {exc}") from exc
    try:
        _write_private(abi_path, json.dumps(contract.abi, indent=2))
    except OSError as exc:
        raise ArtifactError(f"Cannot write the abi file: {exc}") from exc

    return bin_path, abi_path


def _write_private(path: Path, content: str) -> None:
    path.write_text(content, encoding="utf-8")
    # Set owner-only permissions on Unix
    if os.name != "nt":
        path.chmod(0o600)


def read_source(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ArtifactError(f"Failed to read file {str(path)!r}: {exc}") from exc


def read_bytecode(path: Path) -> str:
    """
    Read a .bin artifact.

    Raises:
        ArtifactError: If the file does not exist, cannot be read, or is empty
    """
    if not path.exists():
        raise ArtifactError(f"Cannot find the bin file: {path}")
    try:
        bytecode = path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise ArtifactError(f"Cannot read the bin file: {exc}") from exc
    if bytecode in ("", "0x"):
        raise ArtifactError(f"The bin file is empty: {path}")
    return bytecode


def read_abi(path: Path) -> list[dict[str, Any]]:
    try:
        with path.open("r", encoding="utf-8") as f:
            abi = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise ArtifactError(f"Cannot read the abi file: {exc}") from exc
    if not isinstance(abi, list):
        raise ArtifactError(f"ABI file must contain a JSON array: {path}")
    return abi
