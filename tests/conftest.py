"""Shared pytest fixtures for cifar10_reader tests."""

from pathlib import Path

import numpy as np
import pytest
from loguru import logger

from cifar10_reader.constants import IMAGE_SIZE, RECORD_SIZE, TEST_FILE, TRAINING_FILES
from cifar10_reader.utils.config import ShardLayout


def make_records(labels, seed: int = 0) -> np.ndarray:
    """Records with the given labels and random pixels, shape (N, 3073)."""
    rng = np.random.default_rng(seed)
    records = rng.integers(0, 256, size=(len(labels), RECORD_SIZE), dtype=np.uint8)
    records[:, 0] = labels
    return records


def write_shard(path: Path, records: np.ndarray) -> bytes:
    data = np.ascontiguousarray(records, dtype=np.uint8).tobytes()
    path.write_bytes(data)
    return data


@pytest.fixture()
def log_messages():
    """Messages logged through loguru while the test runs."""
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture()
def small_corpus(tmp_path: Path):
    """Five training shards and a test shard of 4 records each.

    Training shard ``s`` (1-based) has labels ``10 * s + i``; the test shard
    has labels ``100 + i``, so record provenance is visible in the labels.

    Returns:
        (layout, {file name: raw bytes})
    """
    raw = {}
    for s, name in enumerate(TRAINING_FILES, start=1):
        records = make_records([10 * s + i for i in range(4)], seed=s)
        raw[name] = write_shard(tmp_path / name, records)
    raw[TEST_FILE] = write_shard(tmp_path / TEST_FILE, make_records([100 + i for i in range(4)], seed=99))
    layout = ShardLayout(root=tmp_path, records_per_shard=4)
    return layout, raw


@pytest.fixture(scope="session")
def standard_corpus(tmp_path_factory):
    """Standard-layout corpus: a full 10000-record test shard and 60-record training shards."""
    root = tmp_path_factory.mktemp("cifar-10-batches-bin")
    for s, name in enumerate(TRAINING_FILES, start=1):
        write_shard(root / name, make_records([s % 10] * 60, seed=s))
    labels = np.arange(10000) % 10
    write_shard(root / TEST_FILE, make_records(labels, seed=123))
    return ShardLayout.from_root(root)


@pytest.fixture()
def constant_shard(tmp_path: Path) -> Path:
    """Well-formed 30,730,000 byte shard whose first record is label 3 with all pixels 7."""
    records = np.zeros((10000, RECORD_SIZE), dtype=np.uint8)
    records[0, 0] = 3
    records[0, 1:] = 7
    path = tmp_path / "data_batch_1.bin"
    write_shard(path, records)
    assert path.stat().st_size == 10000 * (1 + IMAGE_SIZE)
    return path
