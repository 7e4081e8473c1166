"""
rhonull.runtime.runners
=======================

Runners that evaluate per-iteration kernels with different strategies.

A kernel is any callable mapping one seed to one rho sample (see
`rhonull.stats.null`). Kernels define *what* an iteration computes; runners
decide *how* iterations are scheduled. Iterations are independent, so the
output is the same whichever runner is used: sample `i` always lands in slot
`i`, whatever order the iterations complete in.

Examples
--------
>>> from rhonull.runtime.runners import SequentialRunner, ThreadedRunner
>>> kernel = lambda seed: float(seed) / 10
>>> SequentialRunner().run(kernel, [3, 1, 2]).tolist()
[0.3, 0.1, 0.2]
>>> ThreadedRunner(max_workers=2).run(kernel, [3, 1, 2]).tolist()
[0.3, 0.1, 0.2]
"""

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from typing import Any, Callable, Dict, List, Optional, Sequence

import numpy as np

logger = logging.getLogger(__name__)

Kernel = Callable[[int], float]


class Runner(ABC):
    """Base class for iteration runners."""

    runner_type = "generic"

    def __init__(self) -> None:
        self._run_sizes: List[int] = []

    @abstractmethod
    def _fill(self, kernel: Kernel, seeds: Sequence[int], out: np.ndarray) -> None:
        """Write `kernel(seeds[i])` into `out[i]` for every `i`."""

    def run(self, kernel: Kernel, seeds: Sequence[int]) -> np.ndarray:
        """Evaluate the kernel once per seed and return the samples in seed order."""
        out = np.empty(len(seeds), dtype=np.float64)
        if len(seeds):
            self._fill(kernel, seeds, out)
        self._run_sizes.append(len(seeds))
        return out

    def get_summary(self) -> Dict[str, Any]:
        """Get runner type and per-call iteration counts."""
        return {
            "runner_type": self.runner_type,
            "total_runs": len(self._run_sizes),
            "total_iterations": sum(self._run_sizes),
        }

    def reset(self) -> None:
        """Forget the run history."""
        self._run_sizes.clear()


class SequentialRunner(Runner):
    """Evaluate iterations one after another, in seed order."""

    runner_type = "sequential"

    def _fill(self, kernel: Kernel, seeds: Sequence[int], out: np.ndarray) -> None:
        for i, seed in enumerate(seeds):
            out[i] = kernel(seed)


class ThreadedRunner(Runner):
    """
    Evaluate iterations on a thread pool.

    The kernel must be safe to call concurrently; kernels in
    `rhonull.stats.null` keep all per-iteration state local. If any
    iteration raises, pending iterations are cancelled and the exception
    propagates; no partial result is returned.
    """

    runner_type = "threaded"

    def __init__(self, max_workers: Optional[int] = None) -> None:
        super().__init__()
        if max_workers is not None and max_workers < 1:
            raise ValueError(f"max_workers must be positive, got {max_workers}")
        self.max_workers = max_workers

    def _fill(self, kernel: Kernel, seeds: Sequence[int], out: np.ndarray) -> None:
        logger.debug(
            "Dispatching %d iterations to %s workers",
            len(seeds),
            self.max_workers or "default",
        )
        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            slots = {pool.submit(kernel, seed): i for i, seed in enumerate(seeds)}
            done, pending = wait(slots, return_when=FIRST_EXCEPTION)
            for future in pending:
                future.cancel()
            for future in done:
                out[slots[future]] = future.result()

    def get_summary(self) -> Dict[str, Any]:
        summary = super().get_summary()
        summary["max_workers"] = self.max_workers
        return summary
