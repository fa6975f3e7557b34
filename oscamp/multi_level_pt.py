"""A simulated SV39 three-level page table with 4 KiB and 2 MiB mappings."""

from __future__ import annotations

from dataclasses import dataclass, field

PAGE_SIZE = 4096
PT_ENTRIES = 512

PTE_V = 1 << 0
PTE_R = 1 << 1
PTE_W = 1 << 2
PTE_X = 1 << 3

PPN_SHIFT = 10
SUPERPAGE_SIZE = PAGE_SIZE * PT_ENTRIES

_ROOT_PPN = 0x80000
_LEAF_BITS = PTE_R | PTE_W | PTE_X


class PageFault(Exception):
    """Raised when a virtual address has no valid mapping."""

    def __init__(self, va: int) -> None:
        super().__init__(f"page fault at virtual address {va:#x}")
        self.va = va


@dataclass
class PageTableNode:
    """One page of the table: 512 raw entries."""

    entries: list[int] = field(default_factory=lambda: [0] * PT_ENTRIES)


class Sv39PageTable:
    """Three-level page table whose nodes live in simulated physical pages."""

    def __init__(self) -> None:
        self.root_ppn = _ROOT_PPN
        self._next_ppn = _ROOT_PPN + 1
        self._nodes: dict[int, PageTableNode] = {self.root_ppn: PageTableNode()}

    @staticmethod
    def extract_vpn(va: int, level: int) -> int:
        """Return the 9-bit index of ``va`` for table level 2, 1 or 0."""
        return (va >> (12 + level * 9)) & 0x1FF

    def _alloc_node(self) -> int:
        ppn = self._next_ppn
        self._next_ppn += 1
        self._nodes[ppn] = PageTableNode()
        return ppn

    def _node(self, ppn: int) -> PageTableNode:
        try:
            return self._nodes[ppn]
        except KeyError:
            raise LookupError(
                f"entry points to physical page {ppn:#x}, which is not a table node"
            ) from None

    def _descend(self, node_ppn: int, index: int) -> int:
        """Follow entry ``index`` of a node, creating the next node if absent."""
        node = self._node(node_ppn)
        pte = node.entries[index]
        if pte & PTE_V:
            return pte >> PPN_SHIFT
        child = self._alloc_node()
        node.entries[index] = (child << PPN_SHIFT) | PTE_V
        return child

    def map_page(self, va: int, pa: int, flags: int) -> None:
        """Map the 4 KiB page holding ``va`` to the page holding ``pa``."""
        cur = self.root_ppn
        for level in (2, 1):
            cur = self._descend(cur, self.extract_vpn(va, level))
        ppn = pa >> 12
        self._node(cur).entries[self.extract_vpn(va, 0)] = (
            (ppn << PPN_SHIFT) | flags | PTE_V
        )

    def translate(self, va: int) -> int:
        """Walk the table and return the physical address for ``va``.

        Raises PageFault if any entry on the way is invalid.
        """
        cur = self.root_ppn
        for level in (2, 1, 0):
            pte = self._node(cur).entries[self.extract_vpn(va, level)]
            if not pte & PTE_V:
                raise PageFault(va)
            if pte & _LEAF_BITS:
                offset_bits = 12 if level == 0 else 21
                offset = va & ((1 << offset_bits) - 1)
                return ((pte >> PPN_SHIFT) << 12) | offset
            cur = pte >> PPN_SHIFT
        raise PageFault(va)

    def map_superpage(self, va: int, pa: int, flags: int) -> None:
        """Map a 2 MiB page with a leaf entry at level 1.

        Raises ValueError unless both addresses are 2 MiB aligned.
        """
        if va % SUPERPAGE_SIZE:
            raise ValueError(f"va must be 2MB-aligned, got {va:#x}")
        if pa % SUPERPAGE_SIZE:
            raise ValueError(f"pa must be 2MB-aligned, got {pa:#x}")
        cur = self._descend(self.root_ppn, self.extract_vpn(va, 2))
        ppn = pa >> 12
        self._node(cur).entries[self.extract_vpn(va, 1)] = (
            (ppn << PPN_SHIFT) | flags | PTE_V
        )