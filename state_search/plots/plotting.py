# state_search/plots/plotting.py
# Static pictures of a height-map search: terrain as an image, with the visited
# cells, the frontier at the time of the snapshot and the final path drawn on top.
from __future__ import annotations
from pathlib import Path
from typing import Optional, Sequence

import matplotlib.pyplot as plt

from ..core.observers import Frame


def plot_search(heightmap, frame: Optional[Frame] = None, path: Optional[Sequence] = None,
                ax=None, title: str = "Search"):
    if ax is None:
        fig, ax = plt.subplots(figsize=(max(4, heightmap.width / 6), max(3, heightmap.height / 6)))
    else:
        fig = ax.figure

    ax.imshow(heightmap.heights, cmap="Greens", interpolation="nearest", vmin=0, vmax=25)

    if frame is not None:
        if frame.visited:
            ax.scatter([p.x for p in frame.visited], [p.y for p in frame.visited],
                       s=6, c="tab:blue", marker="s", label="visited")
        if frame.frontier:
            ax.scatter([p.x for p in frame.frontier], [p.y for p in frame.frontier],
                       s=10, c="tab:red", marker="s", label="frontier")
        ax.scatter([frame.current.x], [frame.current.y], s=40, c="gold", marker="*", label="current")

    if path:
        ax.plot([p.x for p in path], [p.y for p in path], color="gold", lw=2, label="path")

    ax.scatter([heightmap.start.x], [heightmap.start.y], c="black", marker="o", s=20, label="S")
    ax.scatter([heightmap.end.x], [heightmap.end.y], c="black", marker="X", s=30, label="E")

    ax.set_title(title)
    ax.set_xticks([]); ax.set_yticks([])
    ax.legend(loc="upper left", bbox_to_anchor=(1.0, 1.0), fontsize=7)
    fig.tight_layout()
    return fig


def save_figure(fig, path, dpi: int = 160) -> Path:
    path = Path(path)
    fig.savefig(path, format="png", dpi=dpi)
    plt.close(fig)
    return path
