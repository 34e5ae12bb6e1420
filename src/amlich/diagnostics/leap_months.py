#!/usr/bin/env python3
from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import amlich


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "amlich[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "amlich[diagnostics]"') from e


@dataclass(frozen=True)
class Style:
    label: str
    calendar: str
    marker: str
    size: float
    hollow: bool
    color: str = "0.15"
    lw: float = 1.2
    alpha: float = 0.95


DEFAULT_STYLES: Dict[str, Style] = {
    "vietnam": Style("Vietnam (UTC+7)", "vietnam", marker="o", size=22, hollow=False),
    "china": Style("China (UTC+8)", "china", marker="o", size=95, hollow=True),
}


def parse_calendars(s: str) -> List[str]:
    out = [x.strip() for x in s.split(",") if x.strip()]
    if not out:
        raise SystemExit("--calendars must name at least one calendar")
    for c in out:
        if c not in DEFAULT_STYLES:
            raise SystemExit(f"Unknown calendar '{c}'. Known: {sorted(DEFAULT_STYLES.keys())}")
    return out


def find_leap_months(calendar: str, start_year: int, end_year: int) -> List[Tuple[int, int]]:
    """(lunar_year, month) of every leap month in lunar years start_year..end_year."""
    out: List[Tuple[int, int]] = []
    for Y in range(start_year, end_year + 1):
        for lm in amlich.months_in_year(Y, calendar=calendar):
            if lm.is_leap_month:
                out.append((lm.year, lm.month))
    return out


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Leap-month barcode diagram across calendar presets."
    )
    p.add_argument("--start-year", type=int, default=1960)
    p.add_argument("--end-year", type=int, default=2030)
    p.add_argument("--out", default="leapmonth_barcode.png")
    p.add_argument("--title", default="Leap month pattern")
    p.add_argument(
        "--calendars",
        default="vietnam,china",
        help="Comma list of calendar presets to plot (default: vietnam,china).",
    )
    p.add_argument("--list", action="store_true", help="Print the leap months instead of plotting.")
    p.add_argument("--year-step", type=int, default=5, help="Label every k years (default: 5).")
    p.add_argument("--cell-edge", default="0.88", help="Cell border color (matplotlib gray string).")
    p.add_argument("--cell-lw", type=float, default=0.6, help="Cell border line width.")
    args = p.parse_args(argv)

    start_year, end_year = args.start_year, args.end_year
    if end_year < start_year:
        raise SystemExit("--end-year must be >= --start-year")

    calendars = parse_calendars(args.calendars)

    if args.list:
        for c in calendars:
            leaps = find_leap_months(c, start_year, end_year)
            print(f"{c}: " + ", ".join(f"{Y}/{M}+" for Y, M in leaps))
        return 0

    np = _need_numpy()
    plt = _need_matplotlib()
    from matplotlib.colors import ListedColormap

    fig, ax = plt.subplots(figsize=(16, 3.6))

    x_edges = np.arange(start_year - 0.5, end_year + 1.5, 1.0)
    y_edges = np.arange(0.5, 13.5, 1.0)
    Z = np.zeros((12, end_year - start_year + 1), dtype=float)

    ax.pcolormesh(
        x_edges,
        y_edges,
        Z,
        shading="flat",
        cmap=ListedColormap(["white"]),
        vmin=0, vmax=1,
        edgecolors=args.cell_edge,
        linewidth=float(args.cell_lw),
        antialiased=True,
        zorder=0,
    )

    ax.set_xlim(start_year - 0.5, end_year + 0.5)
    ax.set_ylim(0.5, 12.5)
    ax.grid(False)
    ax.tick_params(axis="both", which="both", length=0)

    step = max(1, int(args.year_step))
    xt = list(range(start_year, end_year + 1, step))
    ax.set_xticks(xt)
    ax.set_xticklabels([str(y) for y in xt])
    ax.set_xlabel("Lunar year")
    ax.set_yticks(list(range(1, 13)))
    ax.set_ylabel("Leap month")

    for c in calendars:
        st = DEFAULT_STYLES[c]
        leaps = find_leap_months(c, start_year, end_year)
        x = np.array([Y for Y, _ in leaps], dtype=int)
        m = np.array([M for _, M in leaps], dtype=int)
        if st.hollow:
            ax.scatter(
                x, m,
                s=st.size,
                marker=st.marker,
                facecolors="none",
                edgecolors=st.color,
                linewidths=st.lw,
                alpha=st.alpha,
                label=st.label,
                zorder=5,
            )
        else:
            ax.scatter(
                x, m,
                s=st.size,
                marker=st.marker,
                c=st.color,
                linewidths=0.0,
                alpha=st.alpha,
                label=st.label,
                zorder=5,
            )

    ax.set_title(args.title)
    ax.legend(loc="center left", bbox_to_anchor=(1.01, 0.5), frameon=False)
    fig.tight_layout()
    fig.savefig(args.out, dpi=250)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
