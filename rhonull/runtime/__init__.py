"""
rhonull.runtime
===============

Execution infrastructure for Monte Carlo iterations.

Key Components
--------------
- `Runner`: Base class for execution strategies
- `SequentialRunner`: In-order evaluation on the calling thread
- `ThreadedRunner`: Thread-pool evaluation with slot-ordered output

Examples
--------
>>> from rhonull.runtime.runners import ThreadedRunner
>>> from rhonull.stats.null.unconstrained import null_rho
>>> rho = null_rho(30, 8, list(range(8)), runner=ThreadedRunner(max_workers=4))
>>> bool((rho == null_rho(30, 8, list(range(8)))).all())
True
"""

from rhonull.runtime.runners import Runner, SequentialRunner, ThreadedRunner

__all__ = ["Runner", "SequentialRunner", "ThreadedRunner"]
