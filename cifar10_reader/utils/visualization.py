"""
Visualization utilities for decoded images.
"""

import numpy as np
import matplotlib.pyplot as plt
from typing import Optional, Sequence

from ..constants import IMAGE_SHAPE, LABEL_NAMES


def to_hwc(image) -> np.ndarray:
    """
    Convert a flat or (3, 32, 32) image to a (32, 32, 3) uint8 array.

    Args:
        image: Decoded image in either layout

    Returns:
        Image in height-width-channel order
    """
    pixels = np.asarray(image, dtype=np.uint8).reshape(IMAGE_SHAPE)
    return pixels.transpose(1, 2, 0)


def plot_samples(images: Sequence, labels: Sequence, num_samples: int = 16,
                 save_path: Optional[str] = None):
    """
    Plot a grid of images with their class names.

    Args:
        images: Decoded images
        labels: Labels of the images
        num_samples: Number of images to show (capped at the number available)
        save_path: Path to save the plot

    Returns:
        The matplotlib figure
    """
    count = min(num_samples, len(images))
    if count == 0:
        raise ValueError("No images to plot")
    cols = int(np.ceil(np.sqrt(count)))
    rows = int(np.ceil(count / cols))

    fig, axes = plt.subplots(rows, cols, figsize=(1.6 * cols, 1.8 * rows), squeeze=False)
    for idx, ax in enumerate(axes.flat):
        ax.axis("off")
        if idx >= count:
            continue
        ax.imshow(to_hwc(images[idx]))
        label = int(labels[idx])
        name = LABEL_NAMES[label] if label < len(LABEL_NAMES) else str(label)
        ax.set_title(name, fontsize=8)

    fig.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")
    return fig
