import logging
import os
import sys

from rbset import RedBlackSet

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger()

FAN_IN_SEQUENCE = [1, 5, 2, 3, 4, 7, 6, 8, 0, -1, -2, -3, -4]


def build_tree(values: list[int]) -> RedBlackSet:
    tree = RedBlackSet()
    for value in values:
        tree.insert(value)
    logger.debug(f"Built tree with {tree.size()} values, height {tree.height()}")
    return tree


def main() -> int:
    tree = build_tree(FAN_IN_SEQUENCE)
    print(tree.render())
    if tree.check_invariants():
        print("Tree is good.")
        return 0
    print("Tree is broken!")
    return 1


if __name__ == "__main__":
    sys.exit(main())
