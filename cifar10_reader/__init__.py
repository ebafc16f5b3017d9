# CIFAR-10 binary dataset reader
#
# Entry points:
#   read_dataset:    flat images of 3072 pixels
#   read_dataset_3d: images of shape (3, 32, 32)

from .constants import IMAGE_SHAPE, IMAGE_SIZE, LABEL_NAMES, RECORD_SIZE, RECORDS_PER_SHARD
from .data.cifar_loader import (
    CIFARLoader,
    read_dataset,
    read_dataset_3d,
    read_dataset_direct,
    read_test,
    read_training,
)
from .data.dataset import CIFAR10Dataset
from .data.shard import flat_image_factory, image_3d_factory, read_cifar10_file
from .utils.config import ShardLayout
from .utils.errors import Cifar10ConfigError, Cifar10Error, ImageLayoutError, MalformedShardError

__version__ = "0.1.0"

__all__ = [
    # Dataset
    "CIFAR10Dataset",
    "CIFARLoader",
    "ShardLayout",
    # Reading
    "read_dataset",
    "read_dataset_3d",
    "read_dataset_direct",
    "read_training",
    "read_test",
    "read_cifar10_file",
    "flat_image_factory",
    "image_3d_factory",
    # Layout constants
    "IMAGE_SHAPE",
    "IMAGE_SIZE",
    "LABEL_NAMES",
    "RECORD_SIZE",
    "RECORDS_PER_SHARD",
    # Errors
    "Cifar10Error",
    "Cifar10ConfigError",
    "ImageLayoutError",
    "MalformedShardError",
]
