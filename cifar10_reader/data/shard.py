"""
Decoding of single CIFAR-10 binary shard files.

A shard is a run of fixed-size records, each one label byte followed by
3072 pixel bytes in channel-major order (3 x 32 x 32). The whole file is
read into memory and every record is decoded into a freshly built image
object appended to the caller's output sequences.
"""

import numpy as np
from loguru import logger
from pathlib import Path
from typing import Any, Callable, MutableSequence, Optional, Union

from ..constants import (
    CHANNELS, HEIGHT, IMAGE_SHAPE, IMAGE_SIZE, RECORD_SIZE, RECORDS_PER_SHARD, WIDTH,
)
from ..utils.errors import ImageLayoutError, MalformedShardError


ImageFactory = Callable[[], Any]


def flat_image_factory(pixel_type: Any = np.uint8, sub: Optional[Callable] = None) -> ImageFactory:
    """
    Build a factory for flat images of 3072 pixels.

    Args:
        pixel_type: Pixel scalar type (numpy dtype or any type constructible from a byte)
        sub: Sequence type for the image. ``None`` builds numpy vectors.

    Returns:
        Zero-argument callable creating an empty image
    """
    if sub is None:
        return lambda: np.zeros(IMAGE_SIZE, dtype=pixel_type)
    return lambda: sub([pixel_type(0)] * IMAGE_SIZE)


def image_3d_factory(pixel_type: Any = np.uint8, image_type: Optional[Callable] = None) -> ImageFactory:
    """
    Build a factory for (3, 32, 32) images.

    Args:
        pixel_type: Pixel dtype for the default numpy images
        image_type: Array-like class constructed as ``image_type(3, 32, 32)``.
            ``None`` builds numpy arrays.

    Returns:
        Zero-argument callable creating an empty image
    """
    if image_type is None:
        return lambda: np.zeros(IMAGE_SHAPE, dtype=pixel_type)
    return lambda: image_type(*IMAGE_SHAPE)


def _check_length(sequence: Any, expected: int, what: str):
    try:
        length = len(sequence)
    except TypeError:
        raise ImageLayoutError(f"Image {what} are not sequences") from None
    if length != expected:
        raise ImageLayoutError(f"Image {what} holds {length} entries, expected {expected}")


def _write_pixels(image: Any, pixels: np.ndarray, pixel_type: Optional[Callable]):
    # Raster order of a (3, 32, 32) array is the flat byte order
    flat = getattr(image, "flat", None)
    if flat is not None:
        if image.size != IMAGE_SIZE:
            raise ImageLayoutError(f"Image holds {image.size} pixels, expected {IMAGE_SIZE}")
        if pixel_type is not None and getattr(image, "dtype", None) == object:
            flat[:] = [pixel_type(value) for value in pixels.tolist()]
        else:
            flat[:] = pixels
        return

    convert = pixel_type or int
    values = pixels.tolist()

    if len(image) == IMAGE_SIZE:
        for k, value in enumerate(values):
            image[k] = convert(value)
        return

    # Nested (channel, row, column) indexing
    _check_length(image, CHANNELS, "channels")
    k = 0
    for c in range(CHANNELS):
        plane = image[c]
        _check_length(plane, HEIGHT, "rows")
        for h in range(HEIGHT):
            row = plane[h]
            _check_length(row, WIDTH, "columns")
            for w in range(WIDTH):
                row[w] = convert(values[k])
                k += 1


def read_cifar10_file(
    images: MutableSequence,
    labels: MutableSequence,
    path: Union[str, Path],
    limit: int = 0,
    func: Optional[ImageFactory] = None,
    *,
    label_type: Callable = np.uint8,
    pixel_type: Optional[Callable] = None,
    records_per_shard: int = RECORDS_PER_SHARD,
) -> int:
    """
    Read a CIFAR-10 shard file into the given containers.

    Args:
        images: Sequence the decoded images are appended to
        labels: Sequence the decoded labels are appended to
        path: Path to the shard file
        limit: Maximum number of records to read (0: the whole shard)
        func: Factory creating one empty image per record (default: flat numpy image)
        label_type: Conversion applied to each label byte
        pixel_type: Conversion applied to each pixel byte of images filled by index
            and of numpy images with ``object`` dtype
        records_per_shard: Natural number of records in the shard

    Returns:
        Number of records decoded. 0 if the file could not be opened.

    Raises:
        MalformedShardError: The file is shorter than the records requested
    """
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")
    if func is None:
        func = flat_image_factory()

    try:
        with open(path, "rb") as f:
            buffer = f.read()
    except OSError as e:
        logger.error(f"Error opening file {path}: {e}")
        return 0

    size = records_per_shard
    if 0 < limit < size:
        size = limit

    expected = size * RECORD_SIZE
    if len(buffer) < expected:
        raise MalformedShardError(
            f"{path} holds {len(buffer)} bytes, {expected} needed for {size} records"
        )

    records = np.frombuffer(buffer, dtype=np.uint8, count=expected).reshape(size, RECORD_SIZE)

    # Outputs only grow once every record decoded, so both stay in lockstep
    decoded = []
    for record in records:
        image = func()
        decoded.append(image)
        _write_pixels(image, record[1:], pixel_type)

    decoded_labels = [label_type(value) for value in records[:, 0].tolist()]
    labels.extend(decoded_labels)
    images.extend(decoded)

    logger.debug(f"Decoded {size} records from {path}")
    return size
