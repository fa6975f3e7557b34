# oscamp

Small, self-contained Python models of classic operating-system mechanisms.
Each module covers one idea and can be used on its own. The package has no
dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite, install the test extra:

```
pip install ".[test]"
pytest
```

## Concurrency primitives

- `oscamp.atomic_counter.AtomicCounter(init)`: a thread-safe unsigned 64-bit
  counter. `increment()` and `decrement()` return the value from before the
  change and wrap around on overflow. `get()` returns the current value.
  `compare_and_swap(expected, new_val)` returns `(True, expected)` on success
  and `(False, actual)` on failure. `fetch_multiply(multiplier)` returns the old
  value and raises `OverflowError` if the product does not fit in 64 bits.
- `oscamp.atomic_ordering.FlagChannel`: a one-slot hand-off for a 32-bit value.
  `produce(value)` stores the value and raises the ready flag. `consume()` waits
  for the flag and returns the value. `reset()` clears both.
- `oscamp.atomic_ordering.OnceCell`: `init(val)` returns `True` only for the
  first call that stores a value. `get()` returns the value, or `None` before
  that.
- `oscamp.spinlock.SpinLock(data)`: a busy-waiting lock with explicit calls.
  `lock()` spins until it holds the lock and returns the protected data.
  `unlock()` releases the lock. `try_lock()` makes a single attempt and returns
  whether it succeeded. The data is also reachable as the `data` attribute
  while the lock is held.
- `oscamp.spinlock_guard.SpinLock(data)`: `lock()` returns a `SpinGuard`.
  The guard exposes the data as `value`, which can be read and assigned. It
  releases the lock on `release()`, when a `with` block exits, or when the
  guard is garbage-collected.
- `oscamp.rwlock.RwLock(data)`: a writer-priority read-write lock. Once a
  writer is waiting, new readers block. `read()` returns an `RwLockReadGuard`
  with a read-only `value`. `write()` returns an `RwLockWriteGuard` whose
  `value` can also be assigned. Both guards release on `release()` or on
  leaving a `with` block.

```python
from oscamp.spinlock_guard import SpinLock

lock = SpinLock([])
with lock.lock() as guard:
    guard.value.append(1)
```

## Asynchronous programming

- `oscamp.basic_future.CountDown(count)`: an awaitable that suspends once for
  each remaining count and then resolves to `"liftoff!"`.
- `oscamp.basic_future.YieldOnce()`: an awaitable that suspends on its first
  await only and then resolves to `None`.
- `oscamp.tasks.concurrent_squares(n)`: squares `0..n-1`, each in its own task,
  and returns the results in order.
- `oscamp.tasks.parallel_sleep_tasks(n, duration_ms)`: runs `n` tasks that
  sleep at the same time and returns their ids in sorted order.
- `oscamp.async_channel.producer_consumer(items)`: passes the items through a
  bounded queue from a producer task and returns them in order.
- `oscamp.async_channel.fan_in(n_producers)`: collects
  `"producer {id}: message"` from each producer and returns the messages
  sorted.
- `oscamp.select_timeout.with_timeout(awaitable, timeout_ms)`: returns the
  result, or `None` if the timeout expires. An awaitable that runs out of time
  is cancelled.
- `oscamp.select_timeout.race(f1, f2)`: returns the result of whichever
  awaitable finishes first and cancels the other.

```python
import asyncio
from oscamp.select_timeout import with_timeout

async def main():
    return await with_timeout(asyncio.sleep(0, result=42), 100)

print(asyncio.run(main()))  # 42
```

## Paging and address translation

- `oscamp.pte_flags`: builds and decodes RISC-V SV39 page-table entries. It
  provides the flag constants `PTE_V`, `PTE_R`, `PTE_W`, `PTE_X`, `PTE_U`,
  `PTE_G`, `PTE_A` and `PTE_D`, and the functions `make_pte`, `extract_ppn`,
  `extract_flags`, `is_valid`, `is_leaf` and
  `check_permission(pte, read, write, execute)`.
- `oscamp.page_table_walk.SingleLevelPageTable(max_pages)`: a flat table with
  `map`, `unmap`, `lookup` and `translate(va, is_write)`. `translate` returns
  the physical address. It raises `PageFault` for an unmapped or invalid page
  and `PermissionDenied` for a write to a page without `PTE_WRITE`. The module
  also provides the helpers `va_to_vpn`, `va_to_offset` and `make_pa`.
- `oscamp.multi_level_pt.Sv39PageTable()`: a simulated three-level SV39 table
  with `map_page` for 4 KiB pages and `map_superpage` for 2 MiB pages.
  `map_superpage` raises `ValueError` for unaligned addresses. It also has
  `translate`, which raises `PageFault`, and the static method `extract_vpn`.
- `oscamp.tlb_sim.Tlb(capacity)`: a FIFO TLB with `lookup`, `insert`,
  `flush_all`, `flush_by_vpn`, `flush_by_asid` and `valid_count`. Hit and miss
  counts are kept in `stats`, whose `hit_rate()` returns the fraction of
  lookups that hit.
- `oscamp.tlb_sim.Mmu(tlb_capacity)`: checks its TLB first and falls back to a
  simple page table on a miss, refilling the TLB. Use `add_mapping` to add
  entries and `switch_asid` to change address space. `translate(vpn)` returns
  the ppn, or `None` on a page fault.

```python
from oscamp.multi_level_pt import Sv39PageTable
from oscamp.pte_flags import PTE_R, PTE_V

pt = Sv39PageTable()
pt.map_page(0x2000, 0x90000000, PTE_V | PTE_R)
print(hex(pt.translate(0x2ABC)))  # 0x90000abc
```

## What the package does not do

It is a library only and has no command-line tool. It does not model
register-level context switching or a green-thread scheduler. For cooperative
suspension, use the asyncio-based modules above.