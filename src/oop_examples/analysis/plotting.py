# src/oop_examples/analysis/plotting.py

"""
Provides optional plotting utilities for visualizing queue activity.

This module depends on 'matplotlib' and 'seaborn', which are not part
of the core package's dependencies. They are installed via the
'[analysis]' extra:

    pip install oop-examples[analysis]

All functions take a 'QueueTracker' as their data source (e.g.
`queue.tracker`).
"""

import logging
from typing import Optional

# Optional Dependency Handling
try:
    import matplotlib.pyplot as plt
    import matplotlib.axes
    import seaborn as sns
except ImportError:
    log = logging.getLogger(__name__)
    log.error("Analysis dependencies (matplotlib, seaborn) not found.")
    log.error("Please install them with: pip install oop-examples[analysis]")
    raise

from ..tracker import QueueTracker

log = logging.getLogger(__name__)

sns.set_theme(style="whitegrid")


def plot_removal_outcomes(
    tracker: QueueTracker,
    ax: Optional[matplotlib.axes.Axes] = None
) -> matplotlib.axes.Axes:
    """
    Generates a bar chart of how many `remove()` calls handed out an
    item and how many found nothing to hand out.

    Args:
        tracker (QueueTracker): The tracker of the queue to plot.
        ax (Optional[matplotlib.axes.Axes]): The matplotlib Axes
            on which to draw the plot. If None, a new Figure/Axes is created.

    Returns:
        matplotlib.axes.Axes: The Axes object with the plot.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 6))

    if tracker.removal_attempts == 0:
        log.warning("No remove() calls recorded. Plotting an empty chart.")
        ax.set_title("Removal Outcomes (No Data)")
        return ax

    labels = ["Removed", "Empty Removals"]
    counts = [tracker.total_removed, tracker.total_empty_removals]

    sns.barplot(x=labels, y=counts, ax=ax)

    empty_rate = tracker.get_summary()["removals"]["empty_removal_rate"]
    ax.set_title(f"Removal Outcomes (Empty Rate: {empty_rate:.1%})")
    ax.set_ylabel("Count")

    log.debug(f"Plotted removal outcomes {dict(zip(labels, counts))}")

    return ax
