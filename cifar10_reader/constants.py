"""
Fixed layout of the CIFAR-10 binary distribution.
"""

CHANNELS = 3
HEIGHT = 32
WIDTH = 32

IMAGE_SHAPE = (CHANNELS, HEIGHT, WIDTH)
IMAGE_SIZE = CHANNELS * HEIGHT * WIDTH  # 3072

# One label byte followed by the pixel bytes
RECORD_SIZE = 1 + IMAGE_SIZE  # 3073
RECORDS_PER_SHARD = 10000

DEFAULT_ROOT = "cifar-10/cifar-10-batches-bin"
TRAINING_FILES = (
    "data_batch_1.bin",
    "data_batch_2.bin",
    "data_batch_3.bin",
    "data_batch_4.bin",
    "data_batch_5.bin",
)
TEST_FILE = "test_batch.bin"

# batches.meta.txt, in label order
LABEL_NAMES = (
    "airplane",
    "automobile",
    "bird",
    "cat",
    "deer",
    "dog",
    "frog",
    "horse",
    "ship",
    "truck",
)
