"""
CIFAR data loading.

Decodes the five training shards and the test shard of the CIFAR-10 binary
distribution, in that order, into a CIFAR10Dataset.
"""

import numpy as np
from loguru import logger
from tqdm import tqdm
from typing import Any, Callable, MutableSequence, Optional, Tuple, Union
from pathlib import Path

from ..constants import IMAGE_SHAPE, IMAGE_SIZE
from ..utils.config import ShardLayout, get_loading_options
from .dataset import CIFAR10Dataset
from .shard import ImageFactory, flat_image_factory, image_3d_factory, read_cifar10_file


def read_training(
    limit: int,
    images: MutableSequence,
    labels: MutableSequence,
    func: ImageFactory,
    layout: Optional[ShardLayout] = None,
    show_progress: bool = False,
    **decode_options,
) -> int:
    """
    Read all training shards, in order.

    Args:
        limit: The maximum number of records to read per shard (0: no limit)
        images: Sequence the images are appended to
        labels: Sequence the labels are appended to
        func: Factory creating the image objects
        layout: Shard locations (default: standard layout)
        show_progress: Show a progress bar over the shards

    Returns:
        Number of records decoded
    """
    layout = layout or ShardLayout()
    total = 0
    for path in tqdm(layout.training_paths, desc="training shards", disable=not show_progress):
        total += read_cifar10_file(
            images, labels, path, limit, func,
            records_per_shard=layout.records_per_shard, **decode_options
        )
    return total


def read_test(
    limit: int,
    images: MutableSequence,
    labels: MutableSequence,
    func: ImageFactory,
    layout: Optional[ShardLayout] = None,
    **decode_options,
) -> int:
    """
    Read the test shard.

    Args:
        limit: The maximum number of records to read (0: no limit)
        images: Sequence the images are appended to
        labels: Sequence the labels are appended to
        func: Factory creating the image objects
        layout: Shard locations (default: standard layout)

    Returns:
        Number of records decoded
    """
    layout = layout or ShardLayout()
    return read_cifar10_file(
        images, labels, layout.test_path, limit, func,
        records_per_shard=layout.records_per_shard, **decode_options
    )


def _expected_records(limit: int, layout: ShardLayout) -> int:
    if 0 < limit < layout.records_per_shard:
        return limit
    return layout.records_per_shard


def _check_complete(name: str, decoded: int, limit: int, shards: int, layout: ShardLayout):
    expected = _expected_records(limit, layout) * shards
    if decoded < expected:
        logger.warning(f"Partial {name} load: {decoded} of {expected} records decoded")


def read_dataset_direct(
    training_limit: int = 0,
    test_limit: int = 0,
    func: Optional[ImageFactory] = None,
    *,
    container: Callable[[], MutableSequence] = list,
    label_type: Callable = np.uint8,
    pixel_type: Optional[Callable] = None,
    layout: Optional[ShardLayout] = None,
    show_progress: bool = False,
) -> CIFAR10Dataset:
    """
    Read the dataset with images built by ``func``.

    Args:
        training_limit: The maximum number of records to read per training shard (0: no limit)
        test_limit: The maximum number of records to read from the test shard (0: no limit)
        func: Factory creating the image objects (default: flat numpy images)
        container: Sequence type of the four dataset collections
        label_type: Label scalar type
        pixel_type: Pixel conversion for images filled by index
        layout: Shard locations (default: standard layout)
        show_progress: Show a progress bar over the training shards

    Returns:
        The dataset
    """
    layout = layout or ShardLayout()
    func = func or flat_image_factory()
    dataset = CIFAR10Dataset.empty(container)
    options = {"label_type": label_type, "pixel_type": pixel_type}

    decoded = read_training(
        training_limit, dataset.training_images, dataset.training_labels, func,
        layout, show_progress, **options
    )
    _check_complete("training", decoded, training_limit, len(layout.training_files), layout)

    decoded = read_test(test_limit, dataset.test_images, dataset.test_labels, func, layout, **options)
    _check_complete("test", decoded, test_limit, 1, layout)

    return dataset


def read_dataset_3d(
    training_limit: int = 0,
    func: Optional[ImageFactory] = None,
    *,
    test_limit: Optional[int] = None,
    image_type: Optional[Callable] = None,
    container: Callable[[], MutableSequence] = list,
    pixel_type: Any = np.uint8,
    label_type: Callable = np.uint8,
    layout: Optional[ShardLayout] = None,
    merge_test_into_training: bool = True,
    show_progress: bool = False,
) -> CIFAR10Dataset:
    """
    Read the dataset with images in 3D (3x32x32).

    By default the test shard is read with ``training_limit`` and appended to
    the training sequences, leaving the test sequences empty. This matches
    the historical behavior of this reader and is most likely a defect, so a
    warning is logged. Pass ``merge_test_into_training=False`` to read the
    test shard into the test sequences instead, with ``test_limit`` when given.

    Args:
        training_limit: The maximum number of records to read per shard (0: no limit)
        func: Factory creating the image objects, overrides ``image_type``
        test_limit: The maximum number of records to read from the test shard when it
            is kept in the test sequences (default: ``training_limit``)
        image_type: Array-like class constructed as ``image_type(3, 32, 32)``
            (default: numpy arrays)
        container: Sequence type of the four dataset collections
        pixel_type: Pixel scalar type
        label_type: Label scalar type
        layout: Shard locations (default: standard layout)
        merge_test_into_training: Append the test shard to the training sequences
        show_progress: Show a progress bar over the training shards

    Returns:
        The dataset
    """
    layout = layout or ShardLayout()
    func = func or image_3d_factory(pixel_type, image_type)
    dataset = CIFAR10Dataset.empty(container)
    options = {"label_type": label_type, "pixel_type": pixel_type}

    decoded = read_training(
        training_limit, dataset.training_images, dataset.training_labels, func,
        layout, show_progress, **options
    )

    if merge_test_into_training:
        logger.warning(
            "read_dataset_3d appends the test shard to the training set; "
            "pass merge_test_into_training=False to keep it in the test set"
        )
        decoded += read_test(
            training_limit, dataset.training_images, dataset.training_labels, func, layout, **options
        )
        _check_complete("training", decoded, training_limit, len(layout.training_files) + 1, layout)
    else:
        _check_complete("training", decoded, training_limit, len(layout.training_files), layout)
        if test_limit is None:
            test_limit = training_limit
        decoded = read_test(
            test_limit, dataset.test_images, dataset.test_labels, func, layout, **options
        )
        _check_complete("test", decoded, test_limit, 1, layout)

    return dataset


def read_dataset(
    training_limit: int = 0,
    test_limit: int = 0,
    *,
    container: Callable[[], MutableSequence] = list,
    sub: Optional[Callable] = None,
    pixel_type: Any = np.uint8,
    label_type: Callable = np.uint8,
    layout: Optional[ShardLayout] = None,
    show_progress: bool = False,
) -> CIFAR10Dataset:
    """
    Read the dataset with flat images of 3072 pixels.

    Args:
        training_limit: The maximum number of records to read per training shard (0: no limit)
        test_limit: The maximum number of records to read from the test shard (0: no limit)
        container: Sequence type of the four dataset collections
        sub: Sequence type of one image (default: numpy vectors)
        pixel_type: Pixel scalar type
        label_type: Label scalar type
        layout: Shard locations (default: standard layout)
        show_progress: Show a progress bar over the training shards

    Returns:
        The dataset
    """
    return read_dataset_direct(
        training_limit,
        test_limit,
        flat_image_factory(pixel_type, sub),
        container=container,
        label_type=label_type,
        pixel_type=pixel_type,
        layout=layout,
        show_progress=show_progress,
    )


def _stack(images, shape: Tuple[int, ...], dtype) -> np.ndarray:
    if len(images) == 0:
        return np.empty((0,) + shape, dtype=dtype)
    return np.stack([np.asarray(image, dtype=dtype) for image in images])


class CIFARLoader:
    """Data loader for the CIFAR-10 binary dataset."""

    def __init__(self, data_dir: Union[str, Path, None] = None, layout: Optional[ShardLayout] = None):
        """
        Initialize CIFAR loader.

        Args:
            data_dir: Directory holding the shard files
            layout: Shard locations, overrides ``data_dir``
        """
        if layout is None:
            layout = ShardLayout.from_root(data_dir) if data_dir is not None else ShardLayout()
        self.layout = layout

    @classmethod
    def from_config(cls, config: dict) -> "CIFARLoader":
        return cls(layout=ShardLayout.from_config(config))

    def read(
        self,
        training_limit: int = 0,
        test_limit: int = 0,
        layout: str = "flat",
        show_progress: bool = False,
    ) -> CIFAR10Dataset:
        """
        Read the dataset.

        Args:
            training_limit: The maximum number of records to read per training shard
            test_limit: The maximum number of records to read from the test shard
            layout: ``"flat"`` or ``"3d"`` images
            show_progress: Show a progress bar over the training shards

        Returns:
            The dataset
        """
        if layout == "3d":
            # Test records stay in the test split here
            return read_dataset_3d(
                training_limit,
                test_limit=test_limit,
                layout=self.layout,
                merge_test_into_training=False,
                show_progress=show_progress,
            )
        if layout != "flat":
            raise ValueError(f"Unknown image layout: {layout}")
        return read_dataset(
            training_limit, test_limit, layout=self.layout, show_progress=show_progress
        )

    def read_from_config(self, config: dict) -> CIFAR10Dataset:
        """Read the dataset with the options of the ``loading`` config section."""
        options = get_loading_options(config)
        return self.read(
            options["training_limit"],
            options["test_limit"],
            layout=options["layout"],
            show_progress=options["show_progress"],
        )

    def load(
        self,
        training_limit: int = 0,
        test_limit: int = 0,
        layout: str = "flat",
    ) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
        """
        Load CIFAR-10 as numpy arrays.

        Returns:
            Tuple of (x_train, y_train, x_test, y_test). Images have shape
            (N, 3072) for the flat layout and (N, 3, 32, 32) for the 3d layout.
        """
        dataset = self.read(training_limit, test_limit, layout)
        shape = IMAGE_SHAPE if layout == "3d" else (IMAGE_SIZE,)
        return (
            _stack(dataset.training_images, shape, np.uint8),
            np.asarray(dataset.training_labels, dtype=np.uint8),
            _stack(dataset.test_images, shape, np.uint8),
            np.asarray(dataset.test_labels, dtype=np.uint8),
        )
