"""Building and inspecting SV39 page table entries."""

from __future__ import annotations

PTE_V = 1 << 0  # valid
PTE_R = 1 << 1  # readable
PTE_W = 1 << 2  # writable
PTE_X = 1 << 3  # executable
PTE_U = 1 << 4  # user accessible
PTE_G = 1 << 5  # global
PTE_A = 1 << 6  # accessed
PTE_D = 1 << 7  # dirty

PPN_SHIFT = 10
PPN_MASK = (1 << 44) - 1

_U64_MASK = (1 << 64) - 1
_PPN_FIELD = PPN_MASK << PPN_SHIFT


def _check_u64(value: int, name: str) -> None:
    if not 0 <= value <= _U64_MASK:
        raise ValueError(f"{name} must fit in an unsigned 64-bit integer, got {value}")


def make_pte(ppn: int, flags: int) -> int:
    """Build an entry with ``ppn`` in bits 53..10 and ``flags`` in the low bits."""
    _check_u64(ppn, "ppn")
    _check_u64(flags, "flags")
    return ((ppn << PPN_SHIFT) | flags) & _U64_MASK


def extract_ppn(pte: int) -> int:
    """Return the 44-bit physical page number held in the entry."""
    _check_u64(pte, "pte")
    return (pte >> PPN_SHIFT) & PPN_MASK


def extract_flags(pte: int) -> int:
    """Return every bit of the entry outside the physical page number field."""
    _check_u64(pte, "pte")
    return pte & (_U64_MASK ^ _PPN_FIELD)


def is_valid(pte: int) -> bool:
    """Whether the V bit is set."""
    return bool(pte & PTE_V)


def is_leaf(pte: int) -> bool:
    """Whether any of the R, W or X bits is set."""
    return bool(pte & (PTE_R | PTE_W | PTE_X))


def check_permission(pte: int, read: bool, write: bool, execute: bool) -> bool:
    """Whether the entry is valid and grants every requested kind of access."""
    if not is_valid(pte):
        return False
    required = (
        (PTE_R if read else 0) | (PTE_W if write else 0) | (PTE_X if execute else 0)
    )
    return pte & required == required