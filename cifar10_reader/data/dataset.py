"""
In-memory CIFAR-10 dataset.
"""

from dataclasses import dataclass, field
from typing import Callable, MutableSequence

from ..utils.errors import Cifar10Error


def _truncate(sequence: MutableSequence, new_size: int):
    while len(sequence) > new_size:
        sequence.pop()


@dataclass(eq=False)
class CIFAR10Dataset:
    """
    Complete CIFAR-10 dataset.

    Images and labels of a split always have the same length.

    Attributes:
        training_images: Training images
        training_labels: Training labels
        test_images: Test images
        test_labels: Test labels
    """

    training_images: MutableSequence = field(default_factory=list)
    training_labels: MutableSequence = field(default_factory=list)
    test_images: MutableSequence = field(default_factory=list)
    test_labels: MutableSequence = field(default_factory=list)

    def __post_init__(self):
        if len(self.training_images) != len(self.training_labels):
            raise Cifar10Error(
                f"{len(self.training_images)} training images but "
                f"{len(self.training_labels)} training labels"
            )
        if len(self.test_images) != len(self.test_labels):
            raise Cifar10Error(
                f"{len(self.test_images)} test images but {len(self.test_labels)} test labels"
            )

    @classmethod
    def empty(cls, container: Callable[[], MutableSequence] = list) -> "CIFAR10Dataset":
        """Dataset with four empty sequences built by ``container``."""
        return cls(container(), container(), container(), container())

    @property
    def training_size(self) -> int:
        return len(self.training_images)

    @property
    def test_size(self) -> int:
        return len(self.test_images)

    def resize_training(self, new_size: int):
        """
        Resize the training set to new_size.

        If new_size is not less than the current size, this has no effect.

        Args:
            new_size: The size to resize the training set to
        """
        if new_size < 0:
            raise ValueError(f"new_size must be non-negative, got {new_size}")
        if len(self.training_images) > new_size:
            _truncate(self.training_images, new_size)
            _truncate(self.training_labels, new_size)

    def resize_test(self, new_size: int):
        """
        Resize the test set to new_size.

        If new_size is not less than the current size, this has no effect.

        Args:
            new_size: The size to resize the test set to
        """
        if new_size < 0:
            raise ValueError(f"new_size must be non-negative, got {new_size}")
        if len(self.test_images) > new_size:
            _truncate(self.test_images, new_size)
            _truncate(self.test_labels, new_size)
