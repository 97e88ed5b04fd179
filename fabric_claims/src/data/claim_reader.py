"""Reading claims from byte streams and files."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Iterator, List

from fabric_claims.src.core.claim import Claim, parse_claim
from fabric_claims.src.errors import ClaimInputError
from fabric_claims.src.utils.logger import get_logger

logger = get_logger(__name__)


def iter_lines(stream: BinaryIO) -> Iterator[str]:
    """Yield decoded lines from ``stream`` without their line terminator.

    Each line must be valid UTF-8.
    """
    for lineno, raw in enumerate(stream, start=1):
        try:
            line = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ClaimInputError(f"Line {lineno} is not valid UTF-8. {exc}") from exc
        if line.endswith("\n"):
            line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
        yield line


def read_claims(stream: BinaryIO) -> List[Claim]:
    """Parse every line of ``stream`` into a :class:`Claim`.

    The first malformed line aborts the whole batch.
    """
    try:
        claims = [parse_claim(line) for line in iter_lines(stream)]
    except ClaimInputError:
        raise
    except OSError as exc:
        raise ClaimInputError(f"Failed to read claims: {exc}") from exc
    logger.info("Read %d claims", len(claims))
    return claims


def load_claims(path: str | Path) -> List[Claim]:
    """Read claims from the file at ``path``."""
    try:
        with open(Path(path), "rb") as f:
            return read_claims(f)
    except ClaimInputError:
        raise
    except OSError as exc:
        raise ClaimInputError(f"Failed to open {path}: {exc}") from exc


__all__ = ["iter_lines", "read_claims", "load_claims"]
