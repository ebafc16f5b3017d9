"""
Load the CIFAR-10 binary dataset and print a summary of what was decoded.
"""

import argparse
from collections import Counter

from cifar10_reader import LABEL_NAMES, CIFARLoader
from cifar10_reader.utils.config import get_default_config, load_config


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Inspect the CIFAR-10 binary dataset")
    parser.add_argument("--config", type=str, default=None, help="Path to config file")
    parser.add_argument("--root", type=str, default=None, help="Directory holding the .bin shards")
    parser.add_argument("--training-limit", type=int, default=None,
                        help="Maximum records per training shard (0: no limit)")
    parser.add_argument("--test-limit", type=int, default=None,
                        help="Maximum records from the test shard (0: no limit)")
    parser.add_argument("--layout", type=str, default=None, choices=["flat", "3d"],
                        help="Image layout")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar")
    parser.add_argument("--plot", type=str, default=None, help="Save a grid of training samples here")
    return parser.parse_args(argv)


def label_histogram(labels) -> str:
    counts = Counter(int(label) for label in labels)
    return ", ".join(
        f"{LABEL_NAMES[label] if label < len(LABEL_NAMES) else label}={counts[label]}"
        for label in sorted(counts)
    )


def main(argv=None):
    args = parse_args(argv)

    config = load_config(args.config) if args.config else get_default_config()
    if args.root is not None:
        config["data"]["root"] = args.root
    if args.training_limit is not None:
        config["loading"]["training_limit"] = args.training_limit
    if args.test_limit is not None:
        config["loading"]["test_limit"] = args.test_limit
    if args.layout is not None:
        config["loading"]["layout"] = args.layout
    if args.progress:
        config["loading"]["show_progress"] = True

    loader = CIFARLoader.from_config(config)
    print(f"Loading CIFAR-10 from {loader.layout.root}...")
    dataset = loader.read_from_config(config)

    print("Dataset splits:")
    print(f"  Training: {dataset.training_size} samples")
    print(f"  Test:     {dataset.test_size} samples")
    if dataset.training_size:
        print(f"  Image shape: {getattr(dataset.training_images[0], 'shape', None)}")
        print(f"  Training labels: {label_histogram(dataset.training_labels)}")
    if dataset.test_size:
        print(f"  Test labels: {label_histogram(dataset.test_labels)}")

    if args.plot:
        from cifar10_reader.utils.visualization import plot_samples

        plot_samples(dataset.training_images, dataset.training_labels, save_path=args.plot)
        print(f"Sample grid saved to {args.plot}")


if __name__ == "__main__":
    main()
