"""Address translation through a simulated single-level page table."""

from __future__ import annotations

from dataclasses import dataclass

PAGE_SIZE = 4096
PAGE_OFFSET_BITS = 12

PTE_VALID = 1 << 0
PTE_READ = 1 << 1
PTE_WRITE = 1 << 2

_U32_LIMIT = 1 << 32
_OFFSET_MASK = (1 << PAGE_OFFSET_BITS) - 1


class PageFault(LookupError):
    """Raised when a virtual address falls in an unmapped or invalid page."""

    def __init__(self, va: int) -> None:
        super().__init__(f"page fault at virtual address {va:#x}")
        self.va = va


class PermissionDenied(PermissionError):
    """Raised when writing to a page that is not writable."""

    def __init__(self, va: int) -> None:
        super().__init__(f"write to read-only page at virtual address {va:#x}")
        self.va = va


@dataclass(frozen=True)
class PageTableEntry:
    """A mapping to a physical page number with its flag bits."""

    ppn: int
    flags: int


def _check_u32(value: int, name: str) -> None:
    if not 0 <= value < _U32_LIMIT:
        raise ValueError(f"{name} must fit in an unsigned 32-bit integer, got {value}")


def va_to_vpn(va: int) -> int:
    """Return the virtual page number of a 32-bit virtual address."""
    _check_u32(va, "va")
    return va >> PAGE_OFFSET_BITS


def va_to_offset(va: int) -> int:
    """Return the offset of a 32-bit virtual address within its page."""
    _check_u32(va, "va")
    return va & _OFFSET_MASK


def make_pa(ppn: int, offset: int) -> int:
    """Combine a physical page number and an offset into a 32-bit address.

    Raises OverflowError if the result does not fit in 32 bits.
    """
    _check_u32(ppn, "ppn")
    _check_u32(offset, "offset")
    pa = ppn * PAGE_SIZE + offset
    if pa >= _U32_LIMIT:
        raise OverflowError(f"physical address {pa:#x} does not fit in 32 bits")
    return pa


class SingleLevelPageTable:
    """A flat table mapping up to ``max_pages`` virtual pages."""

    def __init__(self, max_pages: int) -> None:
        if max_pages < 0:
            raise ValueError(f"max_pages must not be negative, got {max_pages}")
        self._entries: list[PageTableEntry | None] = [None] * max_pages

    def _check_vpn(self, vpn: int) -> None:
        if not 0 <= vpn < len(self._entries):
            raise IndexError(
                f"vpn {vpn} is outside the table of {len(self._entries)} pages"
            )

    def map(self, vpn: int, ppn: int, flags: int) -> None:
        """Map virtual page ``vpn`` to physical page ``ppn`` with ``flags``."""
        self._check_vpn(vpn)
        _check_u32(ppn, "ppn")
        self._entries[vpn] = PageTableEntry(ppn, flags)

    def unmap(self, vpn: int) -> None:
        """Remove the mapping of virtual page ``vpn``."""
        self._check_vpn(vpn)
        self._entries[vpn] = None

    def lookup(self, vpn: int) -> PageTableEntry | None:
        """Return the entry for ``vpn``, or None if it is unmapped or out of range."""
        if not 0 <= vpn < len(self._entries):
            return None
        return self._entries[vpn]

    def translate(self, va: int, is_write: bool) -> int:
        """Translate ``va`` to a physical address.

        Raises PageFault for an unmapped or invalid page and PermissionDenied
        for a write to a page without the write flag.
        """
        vpn = va_to_vpn(va)
        entry = self.lookup(vpn)
        if entry is None or not entry.flags & PTE_VALID:
            raise PageFault(va)
        if is_write and not entry.flags & PTE_WRITE:
            raise PermissionDenied(va)
        return make_pa(entry.ppn, va_to_offset(va))