"""
Output formatting and optional matplotlib plotting.
"""

import sys
import numpy as np
from typing import Iterable, Optional

from .registry import PrimalityRegistry
from .sampling import PrimeCountTrace


def format_invariant_report(results: list) -> str:
    """Format invariant check results for terminal output."""
    lines = []
    lines.append("=" * 60)
    lines.append("  INVARIANT VALIDATION REPORT")
    lines.append("=" * 60)

    all_passed = True
    for r in results:
        status = "PASS" if r.passed else "FAIL"
        marker = " [+]" if r.passed else " [X]"
        lines.append(f"{marker} {r.name}: {status}")
        lines.append(f"      {r.message}")
        if not r.passed:
            all_passed = False

    lines.append("-" * 60)
    if all_passed:
        lines.append("  ALL ALGORITHMS CONSISTENT: Every invariant holds.")
    else:
        lines.append("  REGISTRY COMPROMISED: One or more invariants failed.")
    lines.append("=" * 60)

    return "\n".join(lines)


def format_agreement_table(registry: PrimalityRegistry,
                           values: Iterable[int]) -> str:
    """One row per value, one column per algorithm; '*' flags a split."""
    names = registry.names()
    width = max([len(n) for n in names] + [5])
    lines = []
    header = f"  {'n':>20s}  " + "  ".join(f"{n:>{width}s}" for n in names)
    lines.append(header)
    lines.append("  " + "-" * (len(header) - 2))
    for n in values:
        verdicts = [a.is_prime(n) for a in registry.algorithms()]
        cells = "  ".join(f"{('prime' if v else '-'):>{width}s}" for v in verdicts)
        flag = " *" if len(set(verdicts)) > 1 else ""
        lines.append(f"  {n:>20d}  {cells}{flag}")
    return "\n".join(lines)


def format_prime_counts(trace: PrimeCountTrace, max_rows: int = 20) -> str:
    """Summary of a sampled prime count, with the x / log x estimate."""
    lines = []
    lines.append("=" * 60)
    lines.append(f"  PRIME COUNT ({trace.algorithm}, limit={trace.limit}, "
                 f"stride={trace.stride})")
    lines.append("=" * 60)
    if not len(trace.n_values):
        lines.append("  No candidates below 2.")
        lines.append("=" * 60)
        return "\n".join(lines)

    step = max(1, int(np.ceil(len(trace.n_values) / max_rows)))
    idx = list(range(0, len(trace.n_values), step))
    if idx[-1] != len(trace.n_values) - 1:
        idx.append(len(trace.n_values) - 1)

    lines.append(f"  {'n':>12s}  {'pi(n)':>10s}  {'n/log n':>10s}")
    lines.append(f"  {'-'*12}  {'-'*10}  {'-'*10}")
    for i in idx:
        n = int(trace.n_values[i])
        estimate = n / np.log(n) if n > 1 else 0.0
        lines.append(f"  {n:12d}  {int(trace.counts[i]):10d}  {estimate:10.1f}")
    lines.append("=" * 60)
    return "\n".join(lines)


def plot_prime_counts(trace: PrimeCountTrace,
                      output_path: Optional[str] = None,
                      show: bool = True) -> None:
    """
    Plot pi(n) against n / log n.
    Requires matplotlib (optional dependency).
    """
    try:
        import matplotlib
        if not show:
            matplotlib.use("Agg")
        import matplotlib.pyplot as plt
    except ImportError:
        print("matplotlib is required for plotting. Install with: "
              "pip install matplotlib", file=sys.stderr)
        return

    fig, ax = plt.subplots(figsize=(10, 5))
    n = trace.n_values.astype(np.float64)
    ax.step(n, trace.counts, where="post", label=f"pi(n) [{trace.algorithm}]")
    mask = n > 1
    ax.plot(n[mask], n[mask] / np.log(n[mask]), linestyle="--",
            color="gray", label="n / log n")
    ax.set_xlabel("n")
    ax.set_ylabel("count")
    ax.set_title(f"Prime count up to {trace.limit}")
    ax.legend(fontsize=8)

    plt.tight_layout()

    if output_path:
        plt.savefig(output_path, dpi=150, bbox_inches="tight")
        print(f"Plot saved to {output_path}")
    if show:
        plt.show()
    else:
        plt.close(fig)
