# Shard decoding, dataset assembly and the in-memory dataset

from .cifar_loader import CIFARLoader, read_dataset, read_dataset_3d, read_dataset_direct
from .dataset import CIFAR10Dataset
from .shard import flat_image_factory, image_3d_factory, read_cifar10_file

__all__ = [
    "CIFARLoader",
    "CIFAR10Dataset",
    "read_dataset",
    "read_dataset_3d",
    "read_dataset_direct",
    "read_cifar10_file",
    "flat_image_factory",
    "image_3d_factory",
]
